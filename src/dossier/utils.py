import time


def now_ms() -> int:
    """Current time as milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
