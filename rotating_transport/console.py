"""Default console sink for warnings about the transport itself."""

import logging

PREFIX = "rotating_transport.file: "

logger = logging.getLogger("rotating_transport.console")


def log_console(message: str, error: BaseException | None = None) -> None:
    if error is None:
        logger.warning("%s%s", PREFIX, message)
    else:
        logger.warning("%s%s: %s", PREFIX, message, error)
