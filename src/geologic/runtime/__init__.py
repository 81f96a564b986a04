"""Runtime services shared by geologic components."""

from . import telemetry

__all__ = ["telemetry"]
