from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..logging_config import logger

from .errors import NullabilityViolation


class Nullability(Enum):
    NOT_NULL = "not_null"
    NULLABLE = "nullable"


@dataclass(frozen=True)
class Evidence:
    nullability: Nullability
    reason: Optional[str] = None


def not_null(func=None, *, reason: Optional[str] = None):
    """Declare that ``func`` never returns an absent value (safe for ``map``)."""

    def decorator(f):
        f._nullability = Evidence(Nullability.NOT_NULL, reason)
        return f

    if func is not None:
        return decorator(func)
    return decorator


def maybe_null(func=None, *, reason: Optional[str] = None):
    """Declare that ``func`` may return an absent value (needs ``flat_map``)."""

    def decorator(f):
        f._nullability = Evidence(Nullability.NULLABLE, reason)
        return f

    if func is not None:
        return decorator(func)
    return decorator


def declared(func: Callable[..., Any]) -> Optional[Evidence]:
    return getattr(func, "_nullability", None)


def _violation(operation: str, message: str) -> NullabilityViolation:
    logger.warning("Nullability guard rejected {}: {}", operation, message)
    return NullabilityViolation(operation, message)


def check_map_function(func: Callable[..., Any], operation: str = "map") -> None:
    evidence = declared(func)
    if evidence is not None and evidence.nullability is Nullability.NULLABLE:
        raise _violation(operation, f"{_name(func)} is declared nullable. Use .flat_map instead")


def check_flat_map_function(func: Callable[..., Any], operation: str = "flat_map") -> None:
    evidence = declared(func)
    if evidence is not None and evidence.nullability is Nullability.NOT_NULL:
        raise _violation(operation, f"{_name(func)} is declared not null. Use .map instead")


def require_not_null(result: Any, operation: str = "map") -> Any:
    """Return ``result`` unless it is absent or already an optional value."""
    from .nullable import Nullable

    if result is None:
        raise _violation(operation, "function returned None, which seems to be nullable. Use .flat_map instead")
    if isinstance(result, Nullable):
        raise _violation(operation, f"function returned {result!r}, which seems to be nullable. Use .flat_map instead")
    return result


def require_nullable(result: Any, operation: str = "flat_map") -> Any:
    from .nullable import Nullable

    if not isinstance(result, Nullable):
        raise _violation(operation, f"function returned {result!r}, which doesn't seem to be nullable. Use .map instead")
    return result


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", repr(func))
