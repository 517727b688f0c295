from typing import Callable, Generic, Mapping, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class PartialFunction(Generic[A, B]):
    """A function paired with the predicate describing where it is defined.

    Calling it outside its domain raises ``ValueError``; callers are expected
    to check ``is_defined_at`` first (``collect`` does).
    """

    def __init__(self, domain: Callable[[A], bool], func: Callable[[A], B]):
        self._domain = domain
        self._func = func

    def is_defined_at(self, x: A) -> bool:
        return bool(self._domain(x))

    def __call__(self, x: A) -> B:
        if not self.is_defined_at(x):
            raise ValueError(f"Partial function is not defined at {x!r}")
        return self._func(x)

    def or_else(self, other: "PartialFunction[A, B]") -> "PartialFunction[A, B]":
        def func(x: A) -> B:
            return self._func(x) if self.is_defined_at(x) else other(x)

        return PartialFunction(lambda x: self.is_defined_at(x) or other.is_defined_at(x), func)

    def lift(self) -> Callable[[A], Optional[B]]:
        def lifted(x: A) -> Optional[B]:
            return self._func(x) if self.is_defined_at(x) else None

        return lifted

    @classmethod
    def from_mapping(cls, table: Mapping[A, B]) -> "PartialFunction[A, B]":
        return cls(lambda x: x in table, lambda x: table[x])

    def __repr__(self):
        name = getattr(self._func, "__name__", type(self._func).__name__)
        return f"PartialFunction({name})"


def partial_function(domain: Callable[[A], bool]):
    """Decorator turning a plain function into a ``PartialFunction``.

        @partial_function(lambda s: s == "http")
        def upper(s):
            return s.upper()
    """

    def decorator(func: Callable[[A], B]) -> PartialFunction[A, B]:
        return PartialFunction(domain, func)

    return decorator
