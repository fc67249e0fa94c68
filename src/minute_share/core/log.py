"""Logging setup shared by the server and the CLI."""

import logging

from minute_share.core.config import ConfigManager

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "minute-share-console"


def setup_logging(config: ConfigManager) -> None:
    """Configure the root logger from the ``logging`` config section.

    Calling this more than once replaces the previously installed handler
    instead of adding another one.

    Args:
        config: Configuration manager
    """
    log_level = getattr(logging, config.get("logging.level", "INFO"))
    formatter = logging.Formatter(config.get("logging.format", DEFAULT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
