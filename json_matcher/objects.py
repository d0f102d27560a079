"""
json_matcher/objects.py — walidator obiektów JSON.

json_object(fields, strict=False) -> Validator

Wymagalność pola nie jest deklarowana, tylko wyprowadzana: pole jest
opcjonalne dokładnie wtedy, gdy jego Validator akceptuje sondę
(None, PROBE_PATH, []) bez żadnego błędu.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .adapter import as_validator
from .leaf import is_mapping, type_error
from .paths import field_path
from .types import FieldSpec, Validator

# Ścieżka sondy — nigdy nie trafia do listy błędów wywołującego.
PROBE_PATH = "[?]"


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def accepts_null(validator: Validator) -> bool:
    """Sonda wymagalności: czy Validator toleruje brak wartości (None)."""
    scratch: list[str] = []
    validator(None, PROBE_PATH, scratch)
    return not scratch


def compile_fields(fields: FieldSpec) -> dict[str, Validator]:
    """Zamienia wpisy FieldSpec na Validatory, zachowując kolejność pól."""
    return {name: as_validator(v) for name, v in fields.items()}


def check_fields(
    value: Mapping[Any, Any],
    fields: dict[str, Validator],
    path: str,
    errors: list[str],
    strict: bool,
) -> None:
    """
    Sprawdza pola mapowania (wspólne dla json_object i json_array).

    Kolejność komunikatów: pola zadeklarowane wg FieldSpec, potem
    (w trybie strict) nadmiarowe klucze wg kolejności w wartości.
    """
    for name, validator in fields.items():
        fpath = field_path(path, name)
        if name not in value:
            if not accepts_null(validator):
                errors.append(f"Field {fpath} is required")
        else:
            validator(value[name], fpath, errors)

    if strict:
        for key in value:
            if key not in fields:
                errors.append(f"Field {field_path(path, str(key))} is not expected")


# ---------------------------------------------------------------------------
# json_object
# ---------------------------------------------------------------------------

def json_object(fields: FieldSpec, strict: bool = False) -> Validator:
    """
    Tworzy walidator obiektu JSON o podanych polach.

    Przykład:
        user = json_object({
            "name":  type_of(Kind.STRING),
            "age":   type_of(Kind.INTEGER),
            "email": type_of(Kind.STRING, nullable=True),   # opcjonalne
        })

        # strict=True — nadmiarowe klucze są błędem
        strict_user = json_object({"name": type_of(Kind.STRING)}, strict=True)
    """
    compiled = compile_fields(fields)

    def validate(value: Any, path: str, errors: list[str]) -> None:
        if not is_mapping(value):
            errors.append(type_error(path, "Map", value))
            return
        check_fields(value, compiled, path, errors, strict)

    return validate
