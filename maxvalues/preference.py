"""
Retention preference enums.
"""
from enum import Enum


class Preference(Enum):
    LARGEST = 'largest'
    SMALLEST = 'smallest'


class Ordering(Enum):
    RANKED = 'ranked'
    UNORDERED = 'unordered'


DEFAULT_PREFERENCE: Preference = Preference.LARGEST
