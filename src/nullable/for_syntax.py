"""Restricted import exposing only what generator-style chaining needs.

    from nullable import for_syntax as fs

    fs.flat_map(a, lambda x: fs.map(fs.with_filter(b, is_even), lambda y: x + y))
"""
from .syntax import flat_map, map, with_filter

__all__ = ["map", "flat_map", "with_filter"]
