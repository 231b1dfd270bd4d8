"""Kernel time – clocks used by date-relative filter helpers."""
from kp_query.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
