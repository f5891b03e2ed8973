from .request_logging import LoggingMiddleware  # noqa: F401
