"""Typed field access for decoded Riot JSON."""
from typing import Any


def require_str(data: dict, key: str) -> str:
    """``data[key]`` when it is a string; ``null`` or any other type raises TypeError."""
    value: Any = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value
