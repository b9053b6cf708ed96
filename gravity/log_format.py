"""Compact text rendering of values and containers for log lines."""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Mapping
from functools import singledispatch


def format_exception(exc: BaseException) -> str:
    """Render an exception as ``EXCEPTION: <type>: <message>``."""
    return f"EXCEPTION: {type(exc).__qualname__}: {exc}"


@singledispatch
def format_value(value: object) -> str:
    """Render a value; containers become ``[a,b]`` and mappings ``[k:v]``."""
    if value is None:
        return "null"
    return str(value)


@format_value.register(BaseException)
def _format_exception_value(value: BaseException) -> str:
    return format_exception(value)


@format_value.register(weakref.ref)
def _format_weak_reference(value: weakref.ref) -> str:
    return format_value(value())


@format_value.register(bytes)
@format_value.register(bytearray)
def _format_bytes(value) -> str:
    return "[" + ",".join(chr(byte) for byte in value) + "]"


@format_value.register(Mapping)
def _format_mapping(value: Mapping) -> str:
    return "[" + ",".join(
        f"{format_value(key)}:{format_value(item)}" for key, item in value.items()
    ) + "]"


@format_value.register(Iterable)
def _format_iterable(value: Iterable) -> str:
    if isinstance(value, str):
        return value
    return "[" + ",".join(format_value(item) for item in value) + "]"