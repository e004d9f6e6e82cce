"""Komenda: ja check-rules — sprawdza bezpieczeństwo reguł w pliku wiadomości."""

from __future__ import annotations

import argparse
import json
import pathlib
import sys
from dataclasses import asdict, dataclass

from rich import box
from rich.markup import escape
from rich.table import Table

from ja._config import get_console
from ontology import SafetyError, format_clause
from ontology.loader import fact_from_obj, rule_from_obj, validate_document
from ontology.schema import MESSAGES_SCHEMA

console = get_console()


@dataclass(slots=True)
class RuleProblem:
    """Reguła odrzucona przy wczytywaniu: niebezpieczna albo z błędem składni."""
    path: str
    author: str
    clause: str
    unbound: list[str]
    message: str


def _clause_text(obj: str | dict) -> str:
    if isinstance(obj, str):
        return obj
    head = fact_from_obj(obj["head"])
    body = [fact_from_obj(a) for a in obj.get("body", [])]
    return format_clause(head, body)


def check_document(raw: dict) -> tuple[int, list[RuleProblem]]:
    """Zwraca (liczba reguł, problemy) dla zwalidowanego dokumentu wiadomości."""
    total = 0
    problems: list[RuleProblem] = []
    for i, msg in enumerate(raw["messages"]):
        for j, rule_obj in enumerate(msg.get("rules", [])):
            total += 1
            path = f"/messages/{i}/rules/{j}"
            try:
                rule_from_obj(rule_obj, path)
            except SafetyError as e:
                problems.append(RuleProblem(
                    path=path,
                    author=msg["author"],
                    clause=_clause_text(rule_obj),
                    unbound=sorted(str(v) for v in e.unbound),
                    message=str(e),
                ))
            except ValueError as e:
                problems.append(RuleProblem(
                    path=path,
                    author=msg["author"],
                    clause=rule_obj if isinstance(rule_obj, str) else json.dumps(rule_obj),
                    unbound=[],
                    message=str(e),
                ))
    return total, problems


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.messages)
    if not path.exists():
        console.print(f"[red]Brak pliku wiadomości:[/red] {escape(str(path))}")
        raise SystemExit(1)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        validate_document(raw, MESSAGES_SCHEMA)
    except ValueError as e:
        console.print(f"[red]Błąd wczytywania wiadomości:[/red] {escape(str(e))}")
        raise SystemExit(1)

    total, problems = check_document(raw)

    if args.json_output:
        out = {
            "rules": total,
            "is_valid": not problems,
            "problems": [asdict(p) for p in problems],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
    elif not problems:
        console.print(f"[green]OK[/green]  Wszystkie reguły ({total}) są bezpieczne.")
    else:
        console.print(
            f"[red]BŁĄD[/red]  {len(problems)} z {total} reguł odrzuconych."
        )
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Ścieżka",   style="cyan",   no_wrap=True)
        table.add_column("Autor",     style="bold",   no_wrap=True)
        table.add_column("Zmienne",   style="yellow", no_wrap=True)
        table.add_column("Reguła")
        table.add_column("Komunikat", style="dim")
        for p in problems:
            table.add_row(
                escape(p.path),
                escape(p.author),
                escape(", ".join(p.unbound)) or "—",
                escape(p.clause),
                escape(p.message),
            )
        console.print(table)

    if problems:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check-rules",
        help="Sprawdza bezpieczeństwo (range restriction) reguł w pliku wiadomości.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Reguła jest bezpieczna, gdy każda zmienna głowy występuje w ciele.
Reguły niebezpieczne są odrzucane przy konstrukcji — ta komenda zbiera
wszystkie odrzucenia w pliku zamiast zatrzymać się na pierwszym.

Przykłady:
  ja check-rules wiadomości.json
  ja check-rules wiadomości.json --json-output
        """,
    )
    p.add_argument(
        "messages",
        metavar="PLIK",
        help="Plik JSON z wiadomościami (format jak dla `ja extract`).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.set_defaults(func=run)
