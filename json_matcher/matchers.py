"""
json_matcher/matchers.py — matchery dla testów.

is_json_object / is_json_array / is_json_array_of zwracają SchemaMatcher,
assert_that() zgłasza AssertionError z pełną listą błędów.

Typowe użycie w pytest:
    assert_that(response.json(), is_json_object({
        "id":   type_of(Kind.INTEGER),
        "tags": json_array_of(type_of(Kind.STRING)),
    }))
"""

from __future__ import annotations

from typing import Any

from .adapter import SchemaMatcher, as_validator
from .arrays import json_array, json_array_of
from .objects import json_object
from .types import FieldSpec, Predicate, Validator


def is_json_object(fields: FieldSpec, strict: bool = False) -> SchemaMatcher:
    return SchemaMatcher(json_object(fields, strict=strict))


def is_json_array(fields: FieldSpec, strict: bool = False) -> SchemaMatcher:
    return SchemaMatcher(json_array(fields, strict=strict))


def is_json_array_of(item: Validator | Predicate) -> SchemaMatcher:
    return SchemaMatcher(json_array_of(item))


def assert_that(value: Any, matcher: Validator | Predicate, reason: str = "") -> None:
    """
    Asercja w stylu hamcrest.

    Zwykły Validator jest najpierw opakowywany w SchemaMatcher. Komunikat:
        <reason>
        Expected: <opis oczekiwania>
          Actual: <repr wartości>
           Which: <opis niedopasowania>
    """
    if not isinstance(matcher, Predicate):
        matcher = SchemaMatcher(as_validator(matcher))

    if matcher.evaluate(value):
        return

    lines = [reason] if reason else []
    lines.append(f"Expected: {matcher.describe_expectation()}")
    lines.append(f"  Actual: {value!r}")
    mismatch = matcher.describe_mismatch(value)
    if mismatch:
        lines.append(f"   Which: {mismatch}")
    raise AssertionError("\n".join(lines))
