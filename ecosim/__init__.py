"""Ecosystem simulation core: metrics engine, simulator and session control."""

from ecosim.metrics import classify_air_quality, compute_metrics
from ecosim.results import SimulationResultsSummary, build_results_summary
from ecosim.session import SimulationSession
from ecosim.simulator import EcosystemSimulator
from ecosim.state import AirQuality, EcosystemMetrics, EnvironmentalState

__all__ = [
    "AirQuality",
    "EcosystemMetrics",
    "EcosystemSimulator",
    "EnvironmentalState",
    "SimulationResultsSummary",
    "SimulationSession",
    "build_results_summary",
    "classify_air_quality",
    "compute_metrics",
]
