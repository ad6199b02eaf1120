"""Process-wide logging setup for service and provisioning entrypoints."""

import logging

_LOG_FORMAT = "%(levelname)s: %(message)s"


def config_configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once, re-levelling existing handlers.

    Args:
        level: Logging level name.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised when level name is unknown to the logging module.
    """

    formatter = logging.Formatter(_LOG_FORMAT)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_LOG_FORMAT)
        return

    root.setLevel(level)
    for handler in root.handlers:
        handler.setFormatter(formatter)
