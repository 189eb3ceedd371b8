"""PID control, time-temperature curves and an in-memory prefixed key-value store."""

__version__ = "0.1.0"
__all__ = ["curve", "kv_store", "pid", "polyline"]