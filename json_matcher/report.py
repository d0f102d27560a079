"""
json_matcher/report.py — raport walidacji i klasyfikacja komunikatów.

validate(value, schema) -> ValidationReport

ErrorCode — stałe kody klas błędów (rozpoznawane z treści komunikatu)
Issue     — komunikat rozbity na kod, ścieżkę i oryginalny tekst
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .adapter import as_validator
from .paths import ROOT
from .types import Predicate, Validator


class ErrorCode(StrEnum):
    """Klasy błędów zgłaszanych przez walidatory."""

    TYPE_MISMATCH      = "E_TYPE_MISMATCH"
    ITEM_TYPE_MISMATCH = "E_ITEM_TYPE_MISMATCH"
    REQUIRED           = "E_REQUIRED"
    NOT_EXPECTED       = "E_NOT_EXPECTED"
    PREDICATE          = "E_PREDICATE"


# Ścieżka: zero lub więcej segmentów [..]; nazwy pól mogą zawierać spacje
# i nawiasy, więc segment kończy dopiero dopasowanie reszty komunikatu.
_PATH = r"(?P<path>(?:\[.*?\])*?)"

_PATTERNS: list[tuple[ErrorCode, re.Pattern[str]]] = [
    (ErrorCode.TYPE_MISMATCH,      re.compile(rf"^Field {_PATH} has invalid type \(")),
    (ErrorCode.ITEM_TYPE_MISMATCH, re.compile(rf"^Item {_PATH} has invalid type \(")),
    (ErrorCode.REQUIRED,           re.compile(rf"^Field {_PATH} is required$")),
    (ErrorCode.NOT_EXPECTED,       re.compile(rf"^Field {_PATH} is not expected$")),
    (ErrorCode.PREDICATE,          re.compile(rf"^Field {_PATH}: ", re.DOTALL)),
]


@dataclass(slots=True)
class Issue:
    """
    Pojedynczy błąd w postaci strukturalnej.

    - code:    klasa błędu (None gdy komunikat ma nieznany format,
               np. pochodzi z własnego Validatora użytkownika)
    - path:    ścieżka w notacji nawiasowej ("" dla korzenia)
    - message: oryginalny komunikat
    """

    code: ErrorCode | None
    path: str
    message: str


def classify(message: str) -> Issue:
    for code, pattern in _PATTERNS:
        m = pattern.match(message)
        if m:
            return Issue(code=code, path=m.group("path"), message=message)
    return Issue(code=None, path="", message=message)


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji jednej wartości.

    - is_valid: True gdy lista błędów jest pusta
    - errors:   komunikaty w kolejności zgłoszenia
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    @property
    def issues(self) -> list[Issue]:
        return [classify(e) for e in self.errors]


def validate(value: Any, schema: Validator | Predicate) -> ValidationReport:
    """Uruchamia schemat od korzenia na świeżej liście błędów."""
    errors: list[str] = []
    as_validator(schema)(value, ROOT, errors)
    return ValidationReport(is_valid=not errors, errors=errors)
