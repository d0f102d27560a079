"""
json_matcher/adapter.py — most między Validatorami a zewnętrznymi predykatami.

Kierunek predykat -> Validator:
  from_predicate(p)   — porażka evaluate() daje "Field <path>: <opis>"
  as_validator(obj)   — normalizacja wpisu FieldSpec (Validator lub Predicate)

Kierunek Validator -> predykat:
  SchemaMatcher(v)    — evaluate() uruchamia v na świeżej liście błędów

InstanceOf / instance_of() — ogólny predykat "is-instance-of", alternatywa
dla type_of() z tym samym kontraktem sondy None.
"""

from __future__ import annotations

from typing import Any

from .leaf import describe_kind
from .paths import ROOT
from .types import Predicate, Validator


# ---------------------------------------------------------------------------
# Validator -> Predicate
# ---------------------------------------------------------------------------

class SchemaMatcher:
    """
    Validator widziany jako predykat frameworka asercji.

    Opis niedopasowania to nagłówek i po jednej linii "- <błąd>" na każdy
    zebrany błąd.
    """

    __slots__ = ("validator",)

    def __init__(self, validator: Validator) -> None:
        self.validator = validator

    def errors(self, value: Any) -> list[str]:
        errors: list[str] = []
        self.validator(value, ROOT, errors)
        return errors

    def evaluate(self, value: Any) -> bool:
        return not self.errors(value)

    def describe_expectation(self) -> str:
        return "matches JSON schema"

    def describe_mismatch(self, value: Any) -> str:
        lines = ["does not match JSON schema"]
        lines.extend(f"- {e}" for e in self.errors(value))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SchemaMatcher({self.validator!r})"


# ---------------------------------------------------------------------------
# Predicate -> Validator
# ---------------------------------------------------------------------------

def _describe_failure(predicate: Predicate, value: Any) -> str:
    mismatch = predicate.describe_mismatch(value)
    if mismatch:
        return mismatch
    expectation = predicate.describe_expectation()
    if expectation:
        return f"does not match {expectation} (got: {value!r})"
    return f"validation failed (got: {value!r})"


def from_predicate(predicate: Predicate) -> Validator:
    """
    Opakowuje predykat w Validator.

    SchemaMatcher nie jest zwijany do jednej linii — zwracany jest jego
    wewnętrzny Validator, więc zagnieżdżone błędy zachowują pełne ścieżki.
    """
    if isinstance(predicate, SchemaMatcher):
        return predicate.validator

    def validate(value: Any, path: str, errors: list[str]) -> None:
        if not predicate.evaluate(value):
            errors.append(f"Field {path}: {_describe_failure(predicate, value)}")

    return validate


def as_validator(obj: Validator | Predicate) -> Validator:
    """
    Normalizuje wpis FieldSpec; błąd konstrukcji zgłasza od razu (TypeError).

    Goły typ (int, str, ...) oznacza instance_of(typ). Klasa predykatu
    bez instancji (np. InstanceOf) jest błędem.
    """
    if isinstance(obj, type):
        if issubclass(obj, Predicate):
            raise TypeError(
                f"Podano klasę predykatu {obj.__name__} zamiast jej instancji"
            )
        return from_predicate(InstanceOf((obj,)))
    if isinstance(obj, Predicate):
        return from_predicate(obj)
    if callable(obj):
        return obj
    raise TypeError(
        f"Oczekiwano Validatora lub predykatu, podano {type(obj).__name__}: {obj!r}"
    )


# ---------------------------------------------------------------------------
# InstanceOf — ogólny predykat typu
# ---------------------------------------------------------------------------

class InstanceOf:
    """
    Predykat isinstance() dla podanych typów.

    bool nie przechodzi jako int, chyba że typy obejmują bool
    (albo jego nadklasę inną niż int, np. object).
    Przy nullable=True None spełnia predykat — pole staje się opcjonalne.
    """

    __slots__ = ("types", "nullable")

    def __init__(self, types: tuple[type, ...], nullable: bool = False) -> None:
        if not types or not all(isinstance(t, type) for t in types):
            raise TypeError(f"instance_of() wymaga co najmniej jednego typu, podano {types!r}")
        self.types = types
        self.nullable = nullable

    def evaluate(self, value: Any) -> bool:
        if value is None and self.nullable:
            return True
        if isinstance(value, bool):
            return any(issubclass(bool, t) and t is not int for t in self.types)
        return isinstance(value, self.types)

    def describe_expectation(self) -> str:
        names = " or ".join(t.__name__ for t in self.types)
        if self.nullable:
            names += " or None"
        return f"an instance of {names}"

    def describe_mismatch(self, value: Any) -> str:
        return (
            f"expected {self.describe_expectation()}, "
            f"was {describe_kind(value)} {value!r}"
        )

    def __repr__(self) -> str:
        return f"InstanceOf({self.types!r}, nullable={self.nullable})"


def instance_of(*types: type, nullable: bool = False) -> InstanceOf:
    """
    Przykład:
        json_object({"id": instance_of(int), "note": instance_of(str, nullable=True)})
    """
    return InstanceOf(types, nullable=nullable)
