"""
Dictionary subclass with logged item retrieval.
"""
import logging
from collections import UserDict
from collections.abc import Mapping
from typing import Hashable, Any

NULL = object()


class LoggedDict(UserDict):
    """Dictionary that emits log messages upon get calls and overrides.

    Used for tracker configuration dictionaries: the log messages
    reflect whether the requested value stems from the configuration,
    from a command line override or if the default value was used.
    """
    def __init__(self, dict=None, logger=None, /, **kwargs):
        self.logger = logger or logging.getLogger()
        super().__init__(dict, **kwargs)

    def get(self, key: Hashable, default: Any = NULL) -> Any:
        sentinel = object()
        value = self.data.get(key, sentinel)

        if value is sentinel:
            if default is NULL:
                raise KeyError(f'could not get \'{key}\': key does not exist and default is not given')
            self.logger.info(f'Using \'{key}\' with default value < {default} >')
            return default

        self.logger.info(f'Using \'{key}\' with configuration value < {value} >')
        return value

    def override(self, overrides: Mapping) -> 'LoggedDict':
        """
        In-place update with all items of `overrides` whose value is not `None`.
        Unset command line options thus do not clobber configured values.
        """
        for key, value in overrides.items():
            if value is None:
                continue
            if key in self.data and self.data[key] != value:
                self.logger.info(f'Overriding \'{key}\' configuration value '
                                 f'< {self.data[key]} > with < {value} >')
            self.data[key] = value
        return self
