"""Komenda: ja payload — wyświetla kanoniczny ciąg uzasadnienia akcji."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich import box
from rich.markup import escape
from rich.table import Table

from ja._config import get_console
from justification import payload
from ontology import SafetyError, format_rule, load_action_json
from ontology.loader import message_to_obj

console = get_console()


def _role(index: int) -> str:
    match index:
        case 0:
            return "basis"
        case 1:
            return "aktorstwo"
        case _:
            return f"extra[{index - 2}]"


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.action)
    if not path.exists():
        console.print(f"[red]Brak pliku akcji:[/red] {escape(str(path))}")
        raise SystemExit(1)

    try:
        action = load_action_json(path)
    except (SafetyError, ValueError) as e:
        console.print(f"[red]Błąd wczytywania akcji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    messages = payload(action)

    if args.json_output:
        print(json.dumps([message_to_obj(m) for m in messages], ensure_ascii=False, indent=2))
        return

    console.print(
        f"Akcja aktora [bold cyan]{escape(action.actor)}[/bold cyan]: "
        f"payload = [bold]{len(messages)}[/bold] wiadomości (2 + {len(action.extra)} extra)"
    )
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#",     style="dim", justify="right", no_wrap=True)
    table.add_column("ROLA",  style="bold", no_wrap=True)
    table.add_column("AUTOR", style="cyan", no_wrap=True)
    table.add_column("REGUŁY")
    for i, message in enumerate(messages):
        rules = "\n".join(escape(format_rule(r)) for r in message.content) or "[dim](brak)[/dim]"
        table.add_row(str(i), _role(i), escape(message.author), rules)
    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "payload",
        help="Wyświetla payload akcji: basis, aktorstwo, extra.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Format pliku JSON:
  {
    "action": {
      "actor": "Alice",
      "basis": {"author": "consortium", "rules": ["(task_of data1 analysis)."]},
      "extra": [{"author": "Bob", "rules": ["(authorises Bob Alice analysis)."]}]
    }
  }

Przykłady:
  ja payload akcja.json
  ja payload akcja.json --json-output
        """,
    )
    p.add_argument(
        "action",
        metavar="PLIK",
        help="Plik JSON z akcją.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz payload jako JSON na stdout.",
    )
    p.set_defaults(func=run)
