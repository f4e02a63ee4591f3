"""
Fixed-capacity tracker that retains the N largest values of a stream.

The retained values live in a binary min-heap whose root always holds the
value a new candidate has to beat. Once the tracker is full, a candidate is
admitted only if it is strictly greater than that root, so a value tied with
the current minimum is discarded. Which of several tied minima is evicted is
not part of the contract.

Values need to support the strict `<` comparison only. Values that compare
false in both directions (e.g. NaN) do not raise but leave minimum selection
and tie handling unspecified. All comparisons of an admission run before
any slot is written, so a failing comparison leaves the tracker untouched.
"""
import logging
import numbers

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from maxvalues.errors import CapacityError, ConfigurationError, IncomparableValueError
from maxvalues.logtools.dict import LoggedDict
from maxvalues.preference import Preference, DEFAULT_PREFERENCE

LOGGER_NAME: str = '.'.join(('main', __name__))
logger = logging.getLogger(LOGGER_NAME)

KeyFunction = Callable[[Any], Any]


class _Entry:
    """
    Heap slot ordered by its retention key.

    Ties on the key are resolved by the arrival order, where later arrivals
    compare as smaller. A candidate tied with the heap root thus never
    outranks it and the values themselves are never compared.
    """
    __slots__ = ('key', 'order', 'value')

    def __init__(self, key: Any, order: int, value: Any) -> None:
        self.key = key
        self.order = order
        self.value = value

    def __lt__(self, other: '_Entry') -> bool:
        if self.key < other.key:
            return True
        if other.key < self.key:
            return False
        return self.order < other.order

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(key={self.key!r}, order={self.order})'


class _InvertedEntry(_Entry):
    """Heap slot with inverted key ordering to retain the smallest values."""
    __slots__ = ()

    def __lt__(self, other: '_Entry') -> bool:
        if other.key < self.key:
            return True
        if self.key < other.key:
            return False
        return self.order < other.order


ENTRY_CLASSES: dict[Preference, type[_Entry]] = {
    Preference.LARGEST : _Entry,
    Preference.SMALLEST : _InvertedEntry
}


def _sift_up_path(heap: list[_Entry], entry: _Entry) -> list[int]:
    """Positions of the ancestors that move one level down if `entry` is appended."""
    path = []
    pos = len(heap)
    while pos > 0:
        parent = (pos - 1) // 2
        if not entry < heap[parent]:
            break
        path.append(parent)
        pos = parent
    return path


def _sift_down_path(heap: list[_Entry], entry: _Entry) -> list[int]:
    """Positions of the descendants that move one level up if `entry` replaces the root."""
    path = []
    pos = 0
    size = len(heap)
    while 2 * pos + 1 < size:
        child = 2 * pos + 1
        if child + 1 < size and heap[child + 1] < heap[child]:
            child += 1
        if not heap[child] < entry:
            break
        path.append(child)
        pos = child
    return path


def _move_along(heap: list[_Entry], pos: int, path: list[int], entry: _Entry) -> None:
    """Shift the entries on the path by one level and place `entry` at its end."""
    for source in path:
        heap[pos] = heap[source]
        pos = source
    heap[pos] = entry


def validate_capacity(capacity: int) -> int:
    """Check that the capacity is a non-negative integer and return it as `int`."""
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise TypeError(
            f'capacity must be an integer, got {type(capacity).__name__} < {capacity!r} >'
        )
    if capacity < 0:
        raise CapacityError(f'capacity must be non-negative, got < {capacity} >')
    return int(capacity)


class MaxValues:
    """
    Bounded multiset that keeps the `capacity` best values pushed into it.

    Duplicates occupy separate slots. Iteration order of the retained values
    is unspecified, use `ranked` for a best-first listing.

    Parameters
    ----------

    capacity : int
        Maximum number of retained values. Fixed for the lifetime
        of the tracker. Zero is valid and yields an always-empty tracker.

    values : Iterable, optional
        Seed values that are pushed in iteration order.

    key : callable, optional
        Compute the retention key from a value. The tracker stores and
        yields the values themselves. Defaults to the identity.

    preference : Preference or str, optional
        Retain the largest (default) or the smallest values.
    """
    def __init__(self,
                 capacity: int,
                 values: Iterable | None = None,
                 *,
                 key: KeyFunction | None = None,
                 preference: Preference | str = DEFAULT_PREFERENCE) -> None:

        self._capacity: int = validate_capacity(capacity)
        self._preference: Preference = Preference(preference)
        self._key: KeyFunction | None = key
        self._entry_class: type[_Entry] = ENTRY_CLASSES[self._preference]
        self._heap: list[_Entry] = []
        self._arrivals: int = 0
        # bumped on every mutation to invalidate running iterations
        self._version: int = 0

        if values is not None:
            self.extend(values)


    @classmethod
    def from_iterable(cls,
                      capacity: int,
                      iterable: Iterable,
                      *,
                      key: KeyFunction | None = None,
                      preference: Preference | str = DEFAULT_PREFERENCE) -> 'MaxValues':
        """Build a tracker by pushing every element of `iterable` in order."""
        return cls(capacity, iterable, key=key, preference=preference)

    @property
    def capacity(self) -> int:
        """Maximum number of retained values."""
        return self._capacity

    @property
    def population(self) -> int:
        """Number of currently retained values."""
        return len(self._heap)

    @property
    def preference(self) -> Preference:
        return self._preference

    @property
    def key(self) -> KeyFunction | None:
        return self._key

    @property
    def is_full(self) -> bool:
        return len(self._heap) >= self._capacity

    @property
    def current_threshold(self) -> Any:
        """
        The worst retained value or `None` for an empty tracker.
        Once the tracker is full, a candidate must strictly outrank this value.
        """
        if not self._heap:
            return None
        return self._heap[0].value


    def push(self, value: Any) -> bool:
        """
        Offer a value to the tracker.

        Below capacity the value is always admitted. At capacity it replaces
        one occurrence of the worst retained value if it strictly outranks it
        and is discarded otherwise.

        Returns `True` if the value was admitted.
        """
        if self._capacity == 0:
            return False

        self._arrivals += 1
        key = value if self._key is None else self._key(value)
        entry = self._entry_class(key, -self._arrivals, value)
        heap = self._heap
        admissible = not heap or self._outranks(entry, heap[0])

        try:
            if len(heap) < self._capacity:
                path = _sift_up_path(heap, entry)
                heap.append(entry)
                _move_along(heap, len(heap) - 1, path, entry)
            elif admissible:
                _move_along(heap, 0, _sift_down_path(heap, entry), entry)
            else:
                return False
        except TypeError as exc:
            raise IncomparableValueError(
                f'cannot order candidate < {value!r} > against the retained values'
            ) from exc

        self._version += 1
        return True


    def extend(self, iterable: Iterable) -> int:
        """Push every element of `iterable` in order and return the admission count."""
        offered = 0
        admitted = 0
        for value in iterable:
            offered += 1
            admitted += self.push(value)
        logger.debug(f'{self!r} admitted {admitted} of {offered} offered values')
        return admitted


    @staticmethod
    def _outranks(candidate: _Entry, incumbent: _Entry) -> bool:
        try:
            return incumbent < candidate
        except TypeError as exc:
            raise IncomparableValueError(
                f'cannot order candidate < {candidate.value!r} > against '
                f'retained value < {incumbent.value!r} >'
            ) from exc


    def __iter__(self) -> Iterator:
        version = self._version
        for entry in self._heap:
            if self._version != version:
                raise RuntimeError(f'{self.__class__.__name__} mutated during iteration')
            yield entry.value


    def as_values(self) -> tuple:
        """Snapshot of the retained values in unspecified order."""
        return tuple(entry.value for entry in self._heap)


    def ranked(self) -> list:
        """Retained values ordered best-first."""
        return [entry.value for entry in sorted(self._heap, reverse=True)]


    def into_values(self) -> Iterator:
        """
        Move the retained values out of the tracker.

        The tracker is empty once this method returns, the returned
        single-pass iterator owns the values.
        """
        heap, self._heap = self._heap, []
        self._version += 1
        logger.debug(f'drained {len(heap)} values from {self!r}')
        return (entry.value for entry in heap)


    def copy(self) -> 'MaxValues':
        """Independent tracker with the same configuration and content."""
        duplicate = self.__class__(self._capacity, key=self._key,
                                   preference=self._preference)
        # entries are never mutated after creation, sharing them is safe
        duplicate._heap = list(self._heap)
        duplicate._arrivals = self._arrivals
        return duplicate

    __copy__ = copy


    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, value: Any) -> bool:
        return any(entry.value == value for entry in self._heap)

    def __repr__(self) -> str:
        s = f'{self.__class__.__name__}(capacity={self._capacity}, '
        s += f'preference={self._preference.value}, population={self.population})'
        return s


DEFAULT_CAPACITY: int = 1
DEFAULT_PREFERENCE_STR: str = DEFAULT_PREFERENCE.value


def create_tracker(configuration: Mapping | None) -> MaxValues:
    """
    Create the tracker from configuration dictionary. If not given,
    create tracker in its default flavour.

    Parameters
    ----------

    configuration :  Mapping or None
        Configuration with the optional keys 'capacity' and 'preference'.
        Default values will be used for absent keys or if configuration is `None`.

    Returns
    -------

    tracker : MaxValues
        Initialized empty tracker.
    """
    configuration = LoggedDict(configuration or {}, logger)
    capacity = configuration.get('capacity', default=DEFAULT_CAPACITY)
    preference = configuration.get('preference', default=DEFAULT_PREFERENCE_STR)
    try:
        preference = Preference(preference)
    except ValueError as exc:
        raise ConfigurationError(
            f'invalid preference \'{preference}\', expected one of '
            f'{[p.value for p in Preference]}'
        ) from exc
    try:
        return MaxValues(capacity, preference=preference)
    except (TypeError, CapacityError) as exc:
        raise ConfigurationError(f'invalid tracker capacity: {exc}') from exc
