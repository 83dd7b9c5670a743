"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, traverse, sort
"""

from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics, MissingEndpointError
from engine.runner   import traverse, sort

__all__ = [
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "MissingEndpointError",
    "traverse",
    "sort",
]
