from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


@dataclass(frozen=True)
class Left(Generic[L]):
    value: L

    @property
    def is_left(self) -> bool:
        return True

    @property
    def is_right(self) -> bool:
        return False

    def fold(self, if_left: Callable[[L], U], if_right: Callable[[Any], U]) -> U:
        return if_left(self.value)

    def map(self, f: Callable[[Any], Any]) -> "Left[L]":
        return self

    def get_or_else(self, default: Callable[[], U]) -> U:
        return default()

    def swap(self) -> "Right[L]":
        return Right(self.value)

    def __repr__(self):
        return f"Left({self.value!r})"


@dataclass(frozen=True)
class Right(Generic[R]):
    value: R

    @property
    def is_left(self) -> bool:
        return False

    @property
    def is_right(self) -> bool:
        return True

    def fold(self, if_left: Callable[[Any], U], if_right: Callable[[R], U]) -> U:
        return if_right(self.value)

    def map(self, f: Callable[[R], U]) -> "Right[U]":
        return Right(f(self.value))

    def get_or_else(self, default: Callable[[], Any]) -> R:
        return self.value

    def swap(self) -> "Left[R]":
        return Left(self.value)

    def __repr__(self):
        return f"Right({self.value!r})"


# Right-biased, like the Either of most functional libraries
Either = Union[Left[L], Right[R]]
