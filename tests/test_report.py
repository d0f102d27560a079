import pytest

from json_matcher import ErrorCode, Kind, classify, instance_of, json_array, json_object, type_of, validate


def test_valid_report() -> None:
    report = validate({"id": 1}, json_object({"id": type_of(Kind.INTEGER)}))
    assert report.is_valid
    assert report.errors == []
    assert report.issues == []


def test_report_accepts_predicates() -> None:
    report = validate("x", instance_of(int))
    assert not report.is_valid
    assert report.errors == ["Field : expected an instance of int, was String 'x'"]
    assert report.issues[0].code is ErrorCode.PREDICATE
    assert report.issues[0].path == ""


@pytest.mark.parametrize(
    ("message", "code", "path"),
    [
        ("Field [a][0][b] has invalid type (expected Integer, received String)", ErrorCode.TYPE_MISMATCH, "[a][0][b]"),
        ("Field  has invalid type (expected Map, received List)", ErrorCode.TYPE_MISMATCH, ""),
        ("Item [rows][3] has invalid type (expected Map, received Null)", ErrorCode.ITEM_TYPE_MISMATCH, "[rows][3]"),
        ("Field [id] is required", ErrorCode.REQUIRED, "[id]"),
        ("Field [first name] is not expected", ErrorCode.NOT_EXPECTED, "[first name]"),
        ("Field [n]: 3 is odd", ErrorCode.PREDICATE, "[n]"),
        ("Field [n]: does not match\n- nested", ErrorCode.PREDICATE, "[n]"),
    ],
)
def test_classify(message: str, code: ErrorCode, path: str) -> None:
    issue = classify(message)
    assert issue.code is code
    assert issue.path == path
    assert issue.message == message


def test_classify_unknown_message() -> None:
    issue = classify("something custom")
    assert issue.code is None
    assert issue.path == ""


def test_issues_follow_error_order() -> None:
    schema = json_array({"id": type_of(Kind.INTEGER)}, strict=True)
    report = validate([{"x": 1}, 5], schema)
    assert [i.code for i in report.issues] == [
        ErrorCode.REQUIRED,
        ErrorCode.NOT_EXPECTED,
        ErrorCode.ITEM_TYPE_MISMATCH,
    ]
    assert [i.path for i in report.issues] == ["[0][id]", "[0][x]", "[1]"]


def test_classify_field_names_with_brackets() -> None:
    issue = classify("Field [a]b] is required")
    assert issue.code is ErrorCode.REQUIRED
    assert issue.path == "[a]b]"

    issue = classify("Field [x]: value [y] rejected")
    assert issue.code is ErrorCode.PREDICATE
    assert issue.path == "[x]"
