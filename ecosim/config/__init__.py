"""Configuration package for the ecosystem simulator.

Constants are grouped by concern (display, environment, particles) and
aggregated into dataclasses by ``simulation_config``.
"""
