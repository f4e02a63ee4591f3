"""
General logging infrastructure for the command line entry point.

Library modules only emit records into the `main` logger hierarchy,
handlers are attached here.
"""
import pathlib
import logging
import logging.handlers

from maxvalues.utils import create_timestamp

DEFAULT_FORMAT: str = '%(asctime)s - %(name)s | %(levelname)s : %(message)s'
DEFAULT_CAPACITY: int = int(1e4)
ROOT_LOGGER_NAME: str = 'main'
LOGFILE_SUFFIX: str = '.log'

# standard library logging level
Level = int | str


def create_logfile_name(timestamp: str | None = None, phase_prefix: str = '') -> str:
    """
    Generate a logfile name like 'reduction_2024-05-01_12-00-00.log'.
    The timestamp is generated if not given, the prefix is optional.
    """
    parts = [phase_prefix] if phase_prefix else []
    parts.append(timestamp or create_timestamp())
    return '_'.join(parts) + LOGFILE_SUFFIX


def attach_handler(logger: logging.Logger,
                   handler: logging.Handler,
                   level: Level) -> logging.Handler:
    """Format, level and attach the handler to the logger."""
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=DEFAULT_FORMAT))
    logger.addHandler(handler)
    return handler


def create_logging_infrastructure(level: Level,
                                  streamhandler_level: Level = logging.ERROR,
                                  memoryhandler_level: Level = logging.DEBUG
                                  ) -> tuple[logging.Logger, logging.StreamHandler,
                                             logging.handlers.MemoryHandler]:
    """
    Set up the `main` logger for a command line run.

    Records at `streamhandler_level` and above are shown on stderr right away.
    A memory handler buffers everything from `memoryhandler_level` on, since
    the logfile location is only known after the configuration is validated.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    streamhandler = attach_handler(logger, logging.StreamHandler(), streamhandler_level)
    memoryhandler = attach_handler(
        logger,
        logging.handlers.MemoryHandler(capacity=DEFAULT_CAPACITY,
                                       flushLevel=logging.ERROR,
                                       flushOnClose=True),
        memoryhandler_level
    )
    return (logger, streamhandler, memoryhandler)


def finalize_logging_infrastructure(logger: logging.Logger,
                                    memoryhandler: logging.handlers.MemoryHandler,
                                    logfile_path: pathlib.Path | None) -> logging.FileHandler | None:
    """
    Finalize logger infrastructure by flush-removing the memory handler.
    If a logfile path is given, the buffered records are transferred to
    a newly attached file handler, otherwise they are discarded.

    Returns the attached filehandler instance or `None`.
    """
    filehandler = None
    if logfile_path is not None:
        filehandler = attach_handler(logger,
                                     logging.FileHandler(filename=logfile_path, mode='a'),
                                     logging.DEBUG)
        memoryhandler.setTarget(filehandler)
        memoryhandler.flush()
    logger.removeHandler(memoryhandler)
    memoryhandler.close()
    return filehandler


def teardown_logging_infrastructure(logger: logging.Logger) -> None:
    """Detach and close all handlers of the logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
