"""
json_matcher — strukturalna walidacja zdekodowanych wartości JSON.

Interfejs publiczny:
    type_of, Kind                       — walidator liści (rodzaj + nullowalność)
    json_object, json_array,
    json_array_of                       — kombinatory obiektów i tablic
    instance_of, from_predicate,
    SchemaMatcher, Predicate            — most do zewnętrznych predykatów
    is_json_object, is_json_array,
    is_json_array_of, assert_that       — matchery do testów
    validate, ValidationReport, Issue,
    ErrorCode                           — raport walidacji

Typowe użycie:
    from json_matcher import Kind, json_object, json_array_of, type_of, validate

    schema = json_object({
        "id":    type_of(Kind.INTEGER),
        "name":  type_of(Kind.STRING),
        "email": type_of(Kind.STRING, nullable=True),
        "tags":  json_array_of(type_of(Kind.STRING)),
    })

    report = validate(payload, schema)
    if not report.is_valid:
        for e in report.errors:
            print(e)     # np. "Field [tags][1] has invalid type (...)"
"""

from .types import FieldSpec, Kind, Predicate, Validator
from .paths import field_path, index_path
from .leaf import describe_kind, type_of
from .adapter import InstanceOf, SchemaMatcher, as_validator, from_predicate, instance_of
from .objects import accepts_null, json_object
from .arrays import json_array, json_array_of
from .matchers import assert_that, is_json_array, is_json_array_of, is_json_object
from .report import ErrorCode, Issue, ValidationReport, classify, validate

__all__ = [
    # types
    "FieldSpec",
    "Kind",
    "Predicate",
    "Validator",
    # paths
    "field_path",
    "index_path",
    # leaf
    "describe_kind",
    "type_of",
    # adapter
    "InstanceOf",
    "SchemaMatcher",
    "as_validator",
    "from_predicate",
    "instance_of",
    # combinators
    "accepts_null",
    "json_object",
    "json_array",
    "json_array_of",
    # matchers
    "assert_that",
    "is_json_array",
    "is_json_array_of",
    "is_json_object",
    # report
    "ErrorCode",
    "Issue",
    "ValidationReport",
    "classify",
    "validate",
]
