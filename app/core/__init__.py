from app.core.logger import logger, configure_logging, register_logger

configure_logging()

__all__ = ["logger", "configure_logging", "register_logger"]
