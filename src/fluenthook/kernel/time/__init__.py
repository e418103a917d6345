"""Kernel time – Clock port + implementations."""
from fluenthook.kernel.time.clock import Clock, FrozenClock, SystemClock, as_utc, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "as_utc", "utc_now"]
