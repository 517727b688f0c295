from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..logging_config import logger

from .either import Either, Left, Right
from .errors import EmptyValueAccess
from .evidence import (
    check_flat_map_function,
    check_map_function,
    require_not_null,
    require_nullable,
)
from .partial import PartialFunction
from .values import is_absent, is_present

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")
X = TypeVar("X")


class Nullable(Generic[T]):
    """An immutable optional value whose absent state is ``None``.

    ``Nullable.of(x)`` is present unless ``x is None``; there is no way to
    build a present value holding ``None``, and wrapping a ``Nullable``
    yields that same optional value rather than a nested one. All absent
    instances are equal.

    ``map`` never flattens: a function returning ``None`` or another
    ``Nullable`` is rejected with ``NullabilityViolation``, and ``flat_map``
    likewise rejects functions that do not return a ``Nullable``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[T] = None):
        # of(empty()) is empty, of(of(x)) is of(x)
        if isinstance(value, Nullable):
            value = value._value
        object.__setattr__(self, "_value", value)

    @classmethod
    def of(cls, value: Optional[T]) -> "Nullable[T]":
        return cls(value)

    @classmethod
    def empty(cls) -> "Nullable[Any]":
        return cls(None)

    @classmethod
    def from_optional(cls, value: Optional[T]) -> "Nullable[T]":
        return cls(value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    # Inspection

    def is_empty(self) -> bool:
        return is_absent(self._value)

    def is_defined(self) -> bool:
        return is_present(self._value)

    def non_empty(self) -> bool:
        return is_present(self._value)

    def contains(self, elem: Any) -> bool:
        return is_present(self._value) and self._value == elem

    # Forced unwrap

    def or_fail(self) -> T:
        return self._unwrap("or_fail")

    def get(self) -> T:
        return self._unwrap("get")

    def _unwrap(self, operation: str) -> T:
        if is_absent(self._value):
            logger.debug("Forced unwrap of an absent value via {}()", operation)
            raise EmptyValueAccess(operation)
        return self._value

    # Transformation

    def map(self, f: Callable[[T], U]) -> "Nullable[U]":
        check_map_function(f)
        if is_absent(self._value):
            return Nullable.empty()
        return Nullable(require_not_null(f(self._value)))

    def flat_map(self, f: Callable[[T], "Nullable[U]"]) -> "Nullable[U]":
        check_flat_map_function(f)
        if is_absent(self._value):
            return Nullable.empty()
        return require_nullable(f(self._value))

    def filter(self, p: Callable[[T], bool]) -> "Nullable[T]":
        if is_present(self._value) and p(self._value):
            return self
        return Nullable.empty()

    with_filter = filter

    def filter_not(self, p: Callable[[T], bool]) -> "Nullable[T]":
        if is_absent(self._value) or not p(self._value):
            return self
        return Nullable.empty()

    def fold(self, if_empty: Callable[[], B], f: Callable[[T], B]) -> B:
        return if_empty() if is_absent(self._value) else f(self._value)

    cata = fold

    def get_or_else(self, default: Callable[[], B]) -> Any:
        return default() if is_absent(self._value) else self._value

    def or_else(self, alternative: Callable[[], "Nullable[B]"]) -> "Nullable[Any]":
        return alternative() if is_absent(self._value) else self

    def exists(self, p: Callable[[T], bool]) -> bool:
        return self.fold(lambda: False, p)

    def forall(self, p: Callable[[T], bool]) -> bool:
        return self.fold(lambda: True, p)

    def foreach(self, f: Callable[[T], Any]) -> None:
        if is_present(self._value):
            f(self._value)

    def collect(self, pf: PartialFunction[T, B]) -> "Nullable[B]":
        return self.flat_map(lambda x: Nullable(pf(x)) if pf.is_defined_at(x) else Nullable.empty())

    def zip(self, other: "Nullable[U] | Optional[U]") -> "Nullable[Tuple[T, U]]":
        if not isinstance(other, Nullable):
            other = Nullable(other)
        if is_absent(self._value) or other.is_empty():
            return Nullable.empty()
        return Nullable((self._value, other._value))

    def unzip(self) -> Tuple["Nullable[Any]", "Nullable[Any]"]:
        if is_absent(self._value):
            return (Nullable.empty(), Nullable.empty())
        first, second = self._value
        return (Nullable(first), Nullable(second))

    def unzip3(self) -> Tuple["Nullable[Any]", "Nullable[Any]", "Nullable[Any]"]:
        if is_absent(self._value):
            return (Nullable.empty(), Nullable.empty(), Nullable.empty())
        first, second, third = self._value
        return (Nullable(first), Nullable(second), Nullable(third))

    # Conversions

    def iterator(self) -> Iterator[T]:
        return iter(()) if is_absent(self._value) else iter((self._value,))

    def to_list(self) -> List[T]:
        return [] if is_absent(self._value) else [self._value]

    def to_optional(self) -> Optional[T]:
        return self._value

    or_none = to_optional

    def to_right(self, left: Callable[[], X]) -> Either[X, T]:
        return Left(left()) if is_absent(self._value) else Right(self._value)

    def to_left(self, right: Callable[[], X]) -> Either[T, X]:
        return Right(right()) if is_absent(self._value) else Left(self._value)

    # Dunders

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __len__(self) -> int:
        return 0 if is_absent(self._value) else 1

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def __eq__(self, other):
        if not isinstance(other, Nullable):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((Nullable, self._value))

    def __repr__(self):
        if is_absent(self._value):
            return "Nullable.empty()"
        return f"Nullable({self._value!r})"


def some(value: T) -> Nullable[T]:
    return Nullable.of(value)


def none() -> Nullable[Any]:
    return Nullable.empty()
