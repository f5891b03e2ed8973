from .countdown import Countdown, DEFAULT_INTERVAL_MS  # noqa: F401
