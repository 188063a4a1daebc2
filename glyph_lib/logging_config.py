"""Logging setup for applications embedding glyph_lib."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Marks handlers installed here so repeated calls replace only those
_HANDLER_FLAG = '_glyph_lib_handler'


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def configure_logging(level: str = 'INFO', log_file: str | None = None,
                      logger_name: str | None = None) -> logging.Logger:
    """Attach console (and optional file) handlers with a shared format.

    Library modules only create named loggers; nothing is emitted until an
    application calls this or configures logging itself. Calling it again
    swaps the handlers it installed before and leaves foreign ones alone.

    Args:
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR').
            Unknown names fall back to INFO. DEBUG shows every outline
            builder event, which is verbose for large strings.
        log_file: Optional path of a file that receives the same records.
        logger_name: Logger to configure; the root logger when None. Pass
            'glyph_lib' to scope output to this package.

    Returns:
        The configured logger.

    Example:
        Trace outline extraction only::

            from glyph_lib.logging_config import configure_logging
            configure_logging(level='DEBUG', logger_name='glyph_lib.fonts')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    target = logging.getLogger(logger_name)
    target.setLevel(log_level)
    for handler in [h for h in target.handlers if getattr(h, _HANDLER_FLAG, False)]:
        target.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        target.addHandler(_tagged(handler))

    # fontTools logs table parsing at DEBUG
    logging.getLogger('fontTools').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
    return target
