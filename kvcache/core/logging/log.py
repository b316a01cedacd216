import logging
import sys
from typing import Optional, Union

from loguru import logger

from kvcache.settings import LogLevel, settings


class InterceptHandler(logging.Handler):
    """
    Default handler from examples in loguru documentation.

    This handler intercepts all log requests and
    passes them to loguru.

    For more info see:
    https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover
        """
        Propagates logs to loguru.

        :param record: record to log.
        """
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level,
            record.getMessage(),
        )


def configure_logging(level: Optional[LogLevel] = None) -> None:
    """
    Configures logging.

    Everything, including records emitted by the redis client
    through the standard library, ends up on standard error.

    :param level: overrides the level from settings.
    """
    intercept_handler = InterceptHandler()

    logging.basicConfig(handlers=[intercept_handler], level=logging.NOTSET)

    # redis-py logs through the standard library
    for logger_name in logging.root.manager.loggerDict:
        if logger_name.startswith("redis"):
            logging.getLogger(logger_name).handlers = []
    logging.getLogger("redis").handlers = [intercept_handler]

    # set logs output and level
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.log_level).value,
    )
