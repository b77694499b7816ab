"""Ecosystem simulator exception hierarchy.

Centralised base classes so callers can catch the simulator's own failures
without resorting to bare ``except Exception`` blocks.
"""


class EcosimError(Exception):
    """Root of all ecosystem-simulator domain exceptions."""


class ConfigurationError(EcosimError):
    """Invalid or missing configuration."""


class SessionError(EcosimError):
    """Errors raised by the session controller."""


class SessionStateError(SessionError):
    """An operation was requested in the wrong session state (idle/running)."""


class UnknownParameterError(SessionError, KeyError):
    """An environmental parameter name is not part of the state vector."""
