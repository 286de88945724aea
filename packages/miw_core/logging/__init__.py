from .config import get_logger, setup_logging, LOGGING_CONFIG

__all__ = ["get_logger", "setup_logging", "LOGGING_CONFIG"]
