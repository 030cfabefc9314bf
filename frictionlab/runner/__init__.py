"""
Drivers
=======

Fixed-step drivers around the resolver: batch runs, interactive
playback with an explicit tick handle, and the chart history window.
"""

from .history import HistorySample, SimulationHistory, kinetic_energy, friction_power
from .playback import TickHandle, start_ticker, cancel, PlaybackDriver
from .batch import RunEvent, RunResult, run_simulation

__all__ = [
    "HistorySample",
    "SimulationHistory",
    "kinetic_energy",
    "friction_power",
    "TickHandle",
    "start_ticker",
    "cancel",
    "PlaybackDriver",
    "RunEvent",
    "RunResult",
    "run_simulation",
]
