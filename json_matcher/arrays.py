"""
json_matcher/arrays.py — walidatory tablic JSON.

json_array(fields, strict=False) — tablica obiektów; każdy element
    sprawdzany jak w json_object, niezależnie od pozostałych.
json_array_of(item)              — tablica dowolnych wartości; każdy element
    sprawdzany walidatorem item.

Błędny element nigdy nie przerywa sprawdzania kolejnych indeksów.
"""

from __future__ import annotations

from typing import Any

from .adapter import as_validator
from .leaf import describe_kind, is_mapping, is_sequence, type_error
from .objects import check_fields, compile_fields
from .paths import index_path
from .types import FieldSpec, Predicate, Validator


def json_array(fields: FieldSpec, strict: bool = False) -> Validator:
    """
    Przykład:
        users = json_array({"id": type_of(Kind.INTEGER), "name": type_of(Kind.STRING)})
    """
    compiled = compile_fields(fields)

    def validate(value: Any, path: str, errors: list[str]) -> None:
        if not is_sequence(value):
            errors.append(type_error(path, "List", value))
            return

        for i, item in enumerate(value):
            item_path = index_path(path, i)
            if not is_mapping(item):
                errors.append(
                    f"Item {item_path} has invalid type "
                    f"(expected Map, received {describe_kind(item)})"
                )
                continue
            check_fields(item, compiled, item_path, errors, strict)

    return validate


def json_array_of(item: Validator | Predicate) -> Validator:
    """
    Przykład:
        tags   = json_array_of(type_of(Kind.STRING))
        scores = json_array_of(type_of(Kind.NUMBER, nullable=True))
    """
    item_validator = as_validator(item)

    def validate(value: Any, path: str, errors: list[str]) -> None:
        if not is_sequence(value):
            errors.append(type_error(path, "List", value))
            return

        for i, element in enumerate(value):
            item_validator(element, index_path(path, i), errors)

    return validate
