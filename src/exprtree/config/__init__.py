"""Application configuration helpers."""

from exprtree.config.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
