"""
Fixed-capacity tracking of the N largest values of a stream.
"""
from maxvalues.errors import (MaxValuesError, CapacityError,
                              IncomparableValueError, ConfigurationError,
                              InputError)
from maxvalues.preference import Preference
from maxvalues.tracker import MaxValues, create_tracker
from maxvalues.adapters import take_top, max_values, min_values

__all__ = [
    'MaxValues',
    'Preference',
    'create_tracker',
    'take_top',
    'max_values',
    'min_values',
    'MaxValuesError',
    'CapacityError',
    'IncomparableValueError',
    'ConfigurationError',
    'InputError',
]
