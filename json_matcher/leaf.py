"""
json_matcher/leaf.py — walidator liści: rodzaj wartości + nullowalność.

type_of(kind, nullable=False) -> Validator

Komunikat przy niezgodności:
  Field <path> has invalid type (expected <Expected>, received <Actual>)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import Kind, Validator


# ---------------------------------------------------------------------------
# Rozpoznawanie rodzaju wartości
# ---------------------------------------------------------------------------

def is_sequence(value: Any) -> bool:
    """Tablica JSON: list lub tuple (str i bytes się nie liczą)."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def describe_kind(value: Any) -> str:
    """Nazwa rodzaju wartości do komunikatu ("received ...")."""
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Integer"
    if isinstance(value, float):
        return "Float"
    if isinstance(value, str):
        return "String"
    if is_sequence(value):
        return "List"
    if is_mapping(value):
        return "Map"
    return type(value).__name__


def matches_kind(value: Any, kind: Kind) -> bool:
    """Czy wartość (różna od None lub dowolna dla ANY) pasuje do tagu."""
    match kind:
        case Kind.ANY:
            return True
        case Kind.BOOLEAN:
            return isinstance(value, bool)
        case Kind.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        case Kind.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        case Kind.STRING:
            return isinstance(value, str)
        case Kind.LIST:
            return is_sequence(value)
        case Kind.MAP:
            return is_mapping(value)
    return False


def type_error(path: str, expected: str, value: Any) -> str:
    return (
        f"Field {path} has invalid type "
        f"(expected {expected}, received {describe_kind(value)})"
    )


# ---------------------------------------------------------------------------
# type_of
# ---------------------------------------------------------------------------

def type_of(kind: Kind, nullable: bool = False) -> Validator:
    """
    Tworzy walidator sprawdzający rodzaj wartości.

    Przy nullable=True wartość None jest akceptowana bez komunikatu,
    dzięki czemu pole z takim walidatorem jest opcjonalne w json_object.
    Kind.ANY akceptuje wszystko, także None.

    Przykład:
        name  = type_of(Kind.STRING)
        email = type_of(Kind.STRING, nullable=True)   # pole opcjonalne
    """
    if not isinstance(kind, Kind):
        raise TypeError(f"type_of() wymaga Kind, podano {kind!r}")

    expected = f"{kind} or Null" if nullable else str(kind)

    def validate(value: Any, path: str, errors: list[str]) -> None:
        if value is None and nullable:
            return
        if not matches_kind(value, kind):
            errors.append(type_error(path, expected, value))

    return validate
