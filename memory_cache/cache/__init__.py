"""Cache module for Memory Cache."""

from .clock import Clock, ManualClock, system_clock
from .store import Cache, Entry

__all__ = ["Cache", "Entry", "Clock", "ManualClock", "system_clock"]
