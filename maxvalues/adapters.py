"""
Reduce arbitrary iterables into a fixed-capacity tracker.
"""
import logging

from collections.abc import Iterable, Iterator

from maxvalues.preference import Preference, DEFAULT_PREFERENCE
from maxvalues.tracker import MaxValues, KeyFunction

LOGGER_NAME: str = '.'.join(('main', __name__))
logger = logging.getLogger(LOGGER_NAME)


def take_top(iterable: Iterable,
             capacity: int,
             *,
             key: KeyFunction | None = None,
             preference: Preference | str = DEFAULT_PREFERENCE) -> MaxValues:
    """
    Push every element of the iterable into a fresh tracker.

    Parameters
    ----------

    iterable : Iterable
        Finite source of candidate values.

    capacity : int
        Number of retained values.

    key : callable, optional
        Retention key function, see `MaxValues`.

    preference : Preference or str, optional
        Retain the largest (default) or the smallest values.

    Returns
    -------

    tracker : MaxValues
        Tracker holding the selected values.
    """
    tracker = MaxValues.from_iterable(capacity, iterable, key=key, preference=preference)
    logger.debug(f'reduced iterable into {tracker!r}')
    return tracker


def max_values(iterable: Iterable,
               capacity: int,
               *,
               key: KeyFunction | None = None) -> Iterator:
    """Iterate over the `capacity` largest elements of the iterable in unspecified order."""
    return take_top(iterable, capacity, key=key).into_values()


def min_values(iterable: Iterable,
               capacity: int,
               *,
               key: KeyFunction | None = None) -> Iterator:
    """Iterate over the `capacity` smallest elements of the iterable in unspecified order."""
    return take_top(iterable, capacity, key=key,
                    preference=Preference.SMALLEST).into_values()
