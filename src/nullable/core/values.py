from typing import Any


def is_absent(val: Any) -> bool:
    return val is None


def is_present(val: Any) -> bool:
    return val is not None
