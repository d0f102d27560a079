"""Komenda: jm check — waliduje pliki JSON względem schematu z modułu Pythona."""

from __future__ import annotations

import argparse
import importlib
import json
import os
import pathlib
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

SCHEMA_ENV = "JM_SCHEMA"


def load_schema(ref: str) -> Any:
    """
    Wczytuje obiekt schematu wskazany jako "pakiet.moduł:atrybut".

    Atrybut może być zagnieżdżony ("moduł:Klasa.POLE"). Błędy importu
    zamieniane są na SystemExit(1) z komunikatem na konsoli.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        console.print(
            f"[red]Niepoprawne odwołanie do schematu:[/red] {ref!r} "
            f"(oczekiwano 'moduł:atrybut')"
        )
        raise SystemExit(1)

    # Skrypt konsolowy ma w sys.path[0] katalog bin/, nie katalog roboczy.
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        console.print(f"[red]Nie można zaimportować modułu schematu:[/red] {exc}")
        raise SystemExit(1)

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            console.print(
                f"[red]Brak atrybutu[/red] '{part}' w {module_name}:{attr_path}"
            )
            raise SystemExit(1)
    return obj


def run(args: argparse.Namespace) -> None:
    from json_matcher import as_validator, validate

    # --- Schemat ----------------------------------------------------------
    if not args.schema:
        console.print(
            f"[red]Nie podano schematu:[/red] użyj --schema "
            f"lub zmiennej środowiskowej {SCHEMA_ENV}."
        )
        raise SystemExit(1)

    try:
        schema = as_validator(load_schema(args.schema))
    except TypeError as exc:
        console.print(f"[red]Obiekt nie jest schematem:[/red] {exc}")
        raise SystemExit(1)

    # --- Walidacja plików -------------------------------------------------
    results: list[dict] = []
    failed = False

    for name in args.payloads:
        path = pathlib.Path(name)
        if not path.exists():
            console.print(f"[red]Brak pliku:[/red] {path}")
            failed = True
            continue

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            console.print(f"[red]Błąd parsowania JSON[/red] ({path.name}): {exc}")
            failed = True
            continue
        except (UnicodeDecodeError, OSError) as exc:
            console.print(f"[red]Nie można odczytać pliku[/red] ({path.name}): {exc}")
            failed = True
            continue

        report = validate(payload, schema)
        results.append({
            "file": str(path),
            "is_valid": report.is_valid,
            "errors": report.errors,
        })

        if report.is_valid:
            console.print(f"[green]OK[/green]  [bold]{path.name}[/bold] pasuje do schematu.")
            continue

        failed = True
        console.print(
            f"[red]BŁĄD[/red]  [bold]{path.name}[/bold] — "
            f"{len(report.errors)} błąd(ów)."
        )

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Kod",      style="yellow", no_wrap=True)
        table.add_column("Ścieżka", style="cyan",   no_wrap=True)
        table.add_column("Komunikat")

        for issue in report.issues:
            table.add_row(issue.code or "-", escape(issue.path or "(root)"), escape(issue.message))

        console.print(table)

    # --- Wyjście JSON (opcjonalnie) ----------------------------------------
    if args.json_output:
        print(json.dumps(results, ensure_ascii=False, indent=2))

    if failed:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Waliduje pliki JSON względem schematu json_matcher.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Waliduje pliki JSON względem schematu zbudowanego kombinatorami json_matcher
(json_object, json_array, json_array_of, type_of, ...).

Schemat wskazuje się jako 'moduł:atrybut' — moduł musi być importowalny
(np. z bieżącego katalogu lub zainstalowanego pakietu). Domyślna wartość
pochodzi ze zmiennej środowiskowej {SCHEMA_ENV}.

Przykłady:
  jm check odpowiedź.json --schema myapi.schemas:USER
  jm check a.json b.json --schema myapi.schemas:USERS --json-output
  {SCHEMA_ENV}=myapi.schemas:USER jm check odpowiedź.json
        """,
    )
    p.add_argument(
        "payloads",
        nargs="+",
        metavar="PLIK_JSON",
        help="Ścieżki do plików JSON do sprawdzenia.",
    )
    p.add_argument(
        "--schema", "-s",
        default=os.getenv(SCHEMA_ENV),
        metavar="MODUŁ:ATRYBUT",
        help=f"Odwołanie do schematu (domyślnie: ${SCHEMA_ENV}).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz wyniki walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
