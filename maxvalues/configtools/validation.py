"""
Provides pydantic models for the systematic validation of configuration
data that drives the command line reduction.
"""
import pydantic

from typing import Literal

from typing_extensions import Annotated
from annotated_types import Ge


class Config(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra='forbid')


class TrackerConfiguration(Config):
    capacity: Annotated[int, Ge(0)] = 1
    preference: Literal['largest', 'smallest'] = 'largest'


class InputConfiguration(Config):
    dtype: Literal['int', 'float', 'str'] = 'float'


class OutputConfiguration(Config):
    ordering: Literal['ranked', 'unordered'] = 'ranked'
    report: bool = False


class LoggingConfiguration(Config):
    level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = 'WARNING'
    logfile: str | None = None


class ReductionConfiguration(Config):
    """Fully validated configuration of a command line reduction run."""
    tracker: TrackerConfiguration = pydantic.Field(default_factory=TrackerConfiguration)
    input: InputConfiguration = pydantic.Field(default_factory=InputConfiguration)
    output: OutputConfiguration = pydantic.Field(default_factory=OutputConfiguration)
    logging: LoggingConfiguration = pydantic.Field(default_factory=LoggingConfiguration)
