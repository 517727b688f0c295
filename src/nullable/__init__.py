from nullable.logging_config import configure_logging
from nullable.core.either import Either, Left, Right
from nullable.core.errors import EmptyValueAccess, NullabilityViolation, NullableError
from nullable.core.evidence import maybe_null, not_null
from nullable.core.nullable import Nullable, none, some
from nullable.core.partial import PartialFunction, partial_function
from nullable import syntax, for_syntax

configure_logging()

__all__ = [
    "Nullable",
    "some",
    "none",
    "Either",
    "Left",
    "Right",
    "PartialFunction",
    "partial_function",
    "not_null",
    "maybe_null",
    "NullableError",
    "EmptyValueAccess",
    "NullabilityViolation",
    "syntax",
    "for_syntax",
    "configure_logging",
]
