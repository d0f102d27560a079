import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from json_matcher import Kind, json_array, json_array_of, json_object, type_of


@pytest.fixture
def user_schema():
    return json_object({
        "id": type_of(Kind.INTEGER),
        "name": type_of(Kind.STRING),
        "email": type_of(Kind.STRING, nullable=True),
    })


@pytest.fixture
def blog_schema():
    return json_object({
        "name": type_of(Kind.STRING),
        "posts": json_array({
            "id": type_of(Kind.INTEGER),
            "title": type_of(Kind.STRING),
            "tags": json_array_of(type_of(Kind.STRING)),
        }),
    })


def run(validator, value, path=""):
    errors: list[str] = []
    validator(value, path, errors)
    return errors
