"""
json_matcher/types.py — podstawowe typy silnika walidacji.

Kind      — zamknięty zbiór rodzajów wartości JSON (tag sprawdzany w leaf.py)
Validator — funkcja (value, path, errors) -> None dopisująca błędy do listy
Predicate — zewnętrzny matcher: evaluate / describe_expectation / describe_mismatch
FieldSpec — uporządkowane mapowanie: nazwa pola -> Validator lub Predicate
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any, Protocol, TypeAlias, runtime_checkable


# ---------------------------------------------------------------------------
# Kind — tag rodzaju wartości
# ---------------------------------------------------------------------------

class Kind(StrEnum):
    """
    Rodzaj wartości zdekodowanego JSON-a.

    Wartość enuma jest jednocześnie nazwą wyświetlaną w komunikatach błędów.
    - BOOLEAN: bool
    - INTEGER: int (bez bool)
    - NUMBER:  int lub float (bez bool)
    - STRING:  str
    - LIST:    list / tuple
    - MAP:     dowolne Mapping
    - ANY:     cokolwiek, łącznie z None
    """
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    NUMBER  = "Number"
    STRING  = "String"
    LIST    = "List"
    MAP     = "Map"
    ANY     = "Any"


# ---------------------------------------------------------------------------
# Validator / Predicate
# ---------------------------------------------------------------------------

# Nigdy nie zwraca wyniku — jedynym efektem jest dopisanie do errors.
Validator: TypeAlias = Callable[[Any, str, list[str]], None]


@runtime_checkable
class Predicate(Protocol):
    """
    Zewnętrzny predykat/matcher, np. z frameworka asercji.

    Implementacje w pakiecie: SchemaMatcher (Validator jako predykat)
    oraz InstanceOf (ogólne "is-instance-of").
    """

    def evaluate(self, value: Any) -> bool: ...

    def describe_expectation(self) -> str: ...

    def describe_mismatch(self, value: Any) -> str: ...


FieldSpec: TypeAlias = Mapping[str, Validator | Predicate]
