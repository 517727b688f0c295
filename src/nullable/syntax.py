"""Optional-container operations on raw ``Optional[T]`` values.

Every function takes the possibly-``None`` value as its first argument and
never wraps it, so ``None`` is the absent marker and anything else is
present::

    from nullable import syntax as nl

    nl.get_or_else(nl.map(port, lambda p: p + 1), lambda: 8080)

Fallbacks (``get_or_else``, ``fold``, ``or_else``, ``to_right``, ...) are
zero-argument callables evaluated only when the value is absent.

This module shadows the builtins ``map``, ``filter`` and ``zip``; import it
as a module rather than with ``*``.
"""
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from .logging_config import logger

from .core.either import Either, Left, Right
from .core.errors import EmptyValueAccess
from .core.evidence import (
    check_flat_map_function,
    check_map_function,
    require_not_null,
)
from .core.partial import PartialFunction
from .core.values import is_absent, is_present

A = TypeVar("A")
A1 = TypeVar("A1")
A2 = TypeVar("A2")
A3 = TypeVar("A3")
B = TypeVar("B")
X = TypeVar("X")

__all__ = [
    "map",
    "flat_map",
    "filter",
    "with_filter",
    "filter_not",
    "or_fail",
    "get",
    "is_empty",
    "is_defined",
    "non_empty",
    "get_or_else",
    "fold",
    "cata",
    "contains",
    "exists",
    "forall",
    "foreach",
    "collect",
    "or_else",
    "zip",
    "unzip",
    "unzip3",
    "iterator",
    "to_list",
    "to_right",
    "to_left",
    "to_optional",
]


def map(a: Optional[A], f: Callable[[A], B]) -> Optional[B]:
    check_map_function(f)
    if is_absent(a):
        return None
    return require_not_null(f(a))


def flat_map(a: Optional[A], f: Callable[[A], Optional[B]]) -> Optional[B]:
    check_flat_map_function(f)
    if is_absent(a):
        return None
    return f(a)


def filter(a: Optional[A], p: Callable[[A], bool]) -> Optional[A]:
    if is_present(a) and p(a):
        return a
    return None


with_filter = filter


def filter_not(a: Optional[A], p: Callable[[A], bool]) -> Optional[A]:
    if is_absent(a) or not p(a):
        return a
    return None


def or_fail(a: Optional[A], operation: str = "or_fail") -> A:
    if is_absent(a):
        logger.debug("Forced unwrap of an absent value via {}()", operation)
        raise EmptyValueAccess(operation)
    return a


def get(a: Optional[A]) -> A:
    return or_fail(a, "get")


def is_empty(a: Optional[Any]) -> bool:
    return is_absent(a)


def is_defined(a: Optional[Any]) -> bool:
    return is_present(a)


def non_empty(a: Optional[Any]) -> bool:
    return is_present(a)


def get_or_else(a: Optional[A], default: Callable[[], B]) -> Any:
    return default() if is_absent(a) else a


def fold(a: Optional[A], if_empty: Callable[[], B], f: Callable[[A], B]) -> B:
    return if_empty() if is_absent(a) else f(a)


cata = fold


def contains(a: Optional[A], elem: Any) -> bool:
    # None never contains None
    return is_present(a) and a == elem


def exists(a: Optional[A], p: Callable[[A], bool]) -> bool:
    return fold(a, lambda: False, p)


def forall(a: Optional[A], p: Callable[[A], bool]) -> bool:
    return fold(a, lambda: True, p)


def foreach(a: Optional[A], f: Callable[[A], Any]) -> None:
    if is_present(a):
        f(a)


def collect(a: Optional[A], pf: PartialFunction[A, B]) -> Optional[B]:
    return flat_map(a, lambda x: pf(x) if pf.is_defined_at(x) else None)


def or_else(a: Optional[A], alternative: Callable[[], Optional[B]]) -> Optional[Any]:
    return alternative() if is_absent(a) else a


def zip(a: Optional[A], b: Optional[B]) -> Optional[Tuple[A, B]]:
    if is_absent(a) or is_absent(b):
        return None
    return (a, b)


def unzip(a: Optional[Tuple[A1, A2]]) -> Tuple[Optional[A1], Optional[A2]]:
    if is_absent(a):
        return (None, None)
    first, second = a
    return (first, second)


def unzip3(a: Optional[Tuple[A1, A2, A3]]) -> Tuple[Optional[A1], Optional[A2], Optional[A3]]:
    if is_absent(a):
        return (None, None, None)
    first, second, third = a
    return (first, second, third)


def iterator(a: Optional[A]) -> Iterator[A]:
    return iter(()) if is_absent(a) else iter((a,))


def to_list(a: Optional[A]) -> List[A]:
    return [] if is_absent(a) else [a]


def to_right(a: Optional[A], left: Callable[[], X]) -> Either[X, A]:
    return Left(left()) if is_absent(a) else Right(a)


def to_left(a: Optional[A], right: Callable[[], X]) -> Either[A, X]:
    return Right(right()) if is_absent(a) else Left(a)


def to_optional(a: Optional[A]) -> Optional[A]:
    return a
