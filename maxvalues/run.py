"""
Command line reduction of whitespace-separated input values to the
N largest (or smallest) ones.
"""
import contextlib
import logging
import pathlib
import sys

from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime
from typing import TextIO

import pydantic
import rich

from maxvalues.configtools import load_yaml, backup_configuration
from maxvalues.configtools.validation import ReductionConfiguration, OutputConfiguration
from maxvalues.errors import MaxValuesError, ConfigurationError, InputError
from maxvalues.logtools import (LoggedDict, create_logging_infrastructure,
                                finalize_logging_infrastructure, create_logfile_name)
from maxvalues.logtools.infrastructure import teardown_logging_infrastructure
from maxvalues.parsing import cli
from maxvalues.preference import Ordering
from maxvalues.tracker import MaxValues, create_tracker

LOGGER_NAME: str = '.'.join(('main', __name__))
logger = logging.getLogger(LOGGER_NAME)

CONVERTERS: dict[str, type] = {'int' : int, 'float' : float, 'str' : str}

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 2

LOGFILE_PREFIX: str = 'reduction'


class TokenStream:
    """Iterate over the whitespace-separated tokens of text sources and count them."""
    def __init__(self, sources: Iterable[TextIO]) -> None:
        self.sources = sources
        self.count: int = 0

    def __iter__(self) -> Iterator[str]:
        for handle in self.sources:
            try:
                for line in handle:
                    for token in line.split():
                        self.count += 1
                        yield token
            except UnicodeDecodeError as exc:
                name = getattr(handle, 'name', '<stream>')
                raise InputError(f'cannot decode input source \'{name}\': {exc}') from exc


def convert_tokens(tokens: Iterable[str], dtype: str) -> Iterator:
    """Lazily convert the tokens with the converter selected by `dtype`."""
    converter = CONVERTERS[dtype]
    for position, token in enumerate(tokens):
        try:
            yield converter(token)
        except ValueError as exc:
            raise InputError(
                f'cannot convert token \'{token}\' at position {position} to {dtype}'
            ) from exc


def build_configuration(content: Mapping | None,
                        overrides: Mapping[str, Mapping]) -> ReductionConfiguration:
    """
    Merge the section-wise command line overrides into the configuration
    file content and validate the result.
    """
    content = content or {}
    if not isinstance(content, Mapping):
        raise ConfigurationError(f'configuration must be a mapping, got '
                                 f'{type(content).__name__}')
    merged = {name : section for name, section in content.items()}
    for name, section_overrides in overrides.items():
        section = content.get(name) or {}
        if not isinstance(section, Mapping):
            raise ConfigurationError(f'configuration section \'{name}\' must be a mapping')
        section = LoggedDict(dict(section), logger).override(section_overrides)
        merged[name] = section.data
    return ReductionConfiguration.model_validate(merged)


def collect_overrides(args) -> dict[str, dict]:
    """Sort the command line options into the configuration sections."""
    return {
        'tracker' : {'capacity' : args.capacity, 'preference' : args.preference},
        'input' : {'dtype' : args.dtype},
        'output' : {'ordering' : args.ordering, 'report' : args.report},
        'logging' : {'level' : args.log_level, 'logfile' : args.logfile}
    }


def reduce_sources(configuration: ReductionConfiguration,
                   sources: Iterable[TextIO]) -> tuple[MaxValues, dict]:
    """Push all converted input values into a configured tracker."""
    tracker = create_tracker(configuration.tracker.model_dump())
    tokens = TokenStream(sources)
    admitted = tracker.extend(convert_tokens(tokens, configuration.input.dtype))
    logger.info(f'reduced {tokens.count} input values into {tracker!r}')
    report = emit_report(tracker, offered=tokens.count, admitted=admitted)
    return (tracker, report)


def emit_report(tracker: MaxValues, offered: int, admitted: int) -> dict:
    timestamp: str = datetime.now().isoformat(timespec='milliseconds')
    data = {
        'timestamp' : timestamp,
        'capacity' : tracker.capacity,
        'preference' : tracker.preference.value,
        'population' : tracker.population,
        'offered' : offered,
        'admitted' : admitted,
        'threshold' : tracker.current_threshold
    }
    return data


def write_values(tracker: MaxValues,
                 configuration: OutputConfiguration,
                 stream: TextIO) -> int:
    """Write the retained values line-wise and return the number of written values."""
    if Ordering(configuration.ordering) is Ordering.RANKED:
        values = tracker.ranked()
    else:
        values = tracker.into_values()
    count = 0
    for value in values:
        stream.write(f'{value}\n')
        count += 1
    return count


def resolve_logfile(logfile: str | None) -> pathlib.Path | None:
    """A directory receives a timestamped logfile, other paths are used as given."""
    if not logfile:
        return None
    logfile = pathlib.Path(logfile)
    if logfile.is_dir():
        logfile = logfile / create_logfile_name(phase_prefix=LOGFILE_PREFIX)
    return logfile


def main(argv: list[str] | None = None) -> int:
    """Main maxvalues package CLI entrypoint."""
    args = cli(argv)
    # records are buffered until the configuration names the log file
    mainlogger, streamhandler, memoryhandler = create_logging_infrastructure(
        level=logging.DEBUG, streamhandler_level=args.log_level or logging.WARNING
    )
    try:
        try:
            content = load_yaml(args.configuration) if args.configuration else None
            configuration = build_configuration(content, collect_overrides(args))
        except (MaxValuesError, pydantic.ValidationError, OSError) as exc:
            logger.error(f'invalid configuration: {exc}')
            return EXIT_FAILURE

        mainlogger.setLevel(configuration.logging.level)
        streamhandler.setLevel(configuration.logging.level)
        try:
            finalize_logging_infrastructure(mainlogger, memoryhandler,
                                            resolve_logfile(configuration.logging.logfile))
            if args.save_configuration:
                savepath = backup_configuration(configuration.model_dump(),
                                                args.save_configuration)
                logger.info(f'saved effective configuration to \'{savepath}\'')
        except OSError as exc:
            logger.error(f'could not write run artifacts: {exc}')
            return EXIT_FAILURE

        with contextlib.ExitStack() as stack:
            try:
                if args.files:
                    sources = [
                        stack.enter_context(pathlib.Path(fpath).open(mode='r', encoding='utf-8'))
                        for fpath in args.files
                    ]
                else:
                    sources = [sys.stdin]
                tracker, report = reduce_sources(configuration, sources)
            except (InputError, OSError) as exc:
                logger.error(f'reduction failed: {exc}')
                return EXIT_FAILURE

        write_values(tracker, configuration.output, stream=sys.stdout)
        if configuration.output.report:
            rich.print(report, file=sys.stderr)
        return EXIT_SUCCESS

    finally:
        teardown_logging_infrastructure(mainlogger)
