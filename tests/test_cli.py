import json
import sys
from pathlib import Path

import pytest

from jm.cli import build_parser, main
from jm.commands.check import SCHEMA_ENV

SCHEMA_MODULE = '''
from json_matcher import Kind, json_object, type_of, is_json_object

USER = json_object({"id": type_of(Kind.INTEGER), "name": type_of(Kind.STRING)})
STRICT_USER = is_json_object({"id": type_of(Kind.INTEGER)}, strict=True)
NOT_A_SCHEMA = 42


class Schemas:
    USER = USER
'''


@pytest.fixture
def schema_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "cli_schemas.py").write_text(SCHEMA_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_schemas"


def _write(path: Path, payload) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_check_valid_payload(tmp_path: Path, schema_module: str, capsys) -> None:
    payload = _write(tmp_path / "ok.json", {"id": 1, "name": "Alice"})
    main(["check", payload, "--schema", f"{schema_module}:USER"])
    assert "OK" in capsys.readouterr().out


def test_check_invalid_payload_exits_1(tmp_path: Path, schema_module: str, capsys) -> None:
    payload = _write(tmp_path / "bad.json", {"name": "Alice"})
    with pytest.raises(SystemExit) as exc_info:
        main(["check", payload, "--schema", f"{schema_module}:USER", "--json-output"])
    assert exc_info.value.code == 1

    out = capsys.readouterr().out
    assert "Field [id] is required" in out
    assert '"is_valid": false' in out


def test_check_accepts_matcher_and_nested_attribute(tmp_path: Path, schema_module: str) -> None:
    payload = _write(tmp_path / "extra.json", {"id": 1, "extra": True})
    with pytest.raises(SystemExit):
        main(["check", payload, "--schema", f"{schema_module}:STRICT_USER"])

    payload = _write(tmp_path / "user.json", {"id": 1, "name": "A"})
    main(["check", payload, "--schema", f"{schema_module}:Schemas.USER"])


def test_schema_from_environment(tmp_path: Path, schema_module: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SCHEMA_ENV, f"{schema_module}:USER")
    payload = _write(tmp_path / "ok.json", {"id": 1, "name": "Alice"})
    args = build_parser().parse_args(["check", payload])
    assert args.schema == f"{schema_module}:USER"
    args.func(args)


@pytest.mark.parametrize(
    "ref",
    ["no_colon", "missing_module_xyz:USER", "cli_schemas:MISSING", "cli_schemas:NOT_A_SCHEMA"],
)
def test_bad_schema_reference(tmp_path: Path, schema_module: str, ref: str) -> None:
    payload = _write(tmp_path / "ok.json", {"id": 1, "name": "Alice"})
    with pytest.raises(SystemExit) as exc_info:
        main(["check", payload, "--schema", ref])
    assert exc_info.value.code == 1


def test_missing_schema(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SCHEMA_ENV, raising=False)
    payload = _write(tmp_path / "ok.json", {})
    with pytest.raises(SystemExit):
        main(["check", payload])


def test_missing_and_malformed_files(tmp_path: Path, schema_module: str) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["check", str(tmp_path / "absent.json"), "--schema", f"{schema_module}:USER"])
    with pytest.raises(SystemExit):
        main(["check", str(broken), "--schema", f"{schema_module}:USER"])


def test_schema_module_found_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    (tmp_path / "cwd_schemas.py").write_text(SCHEMA_MODULE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p not in ("", str(tmp_path))])

    payload = _write(tmp_path / "ok.json", {"id": 1, "name": "Alice"})
    main(["check", payload, "--schema", "cwd_schemas:USER"])
    assert "OK" in capsys.readouterr().out


def test_unreadable_payloads_do_not_stop_the_run(tmp_path: Path, schema_module: str, capsys) -> None:
    binary = tmp_path / "binary.json"
    binary.write_bytes(b"\xff\xfe\x00garbage")
    directory = tmp_path / "folder.json"
    directory.mkdir()
    good = _write(tmp_path / "good.json", {"id": 1, "name": "Alice"})

    with pytest.raises(SystemExit) as exc_info:
        main(["check", str(binary), str(directory), good, "--schema", f"{schema_module}:USER"])
    assert exc_info.value.code == 1
    assert "good.json" in capsys.readouterr().out
