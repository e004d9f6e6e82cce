"""Komenda: ja extract — ekstrahuje politykę z pliku wiadomości."""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from rich import box
from rich.markup import escape
from rich.table import Table

from ja._config import get_console
from justification import extract, extract1
from ontology import Message, SafetyError, format_rule, load_messages_json
from ontology.loader import rule_to_obj

console = get_console()


# ---------------------------------------------------------------------------
# Wyświetlanie wyników
# ---------------------------------------------------------------------------

def _show_policy_table(messages: list[Message]) -> None:
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#",      style="dim", justify="right", no_wrap=True)
    table.add_column("AUTOR",  style="bold cyan", no_wrap=True)
    table.add_column("FORMA",  no_wrap=True)
    table.add_column("REGUŁA", no_wrap=False)

    n = 0
    for message in messages:
        # extract1 emituje pary (goła, says)
        for j, rule in enumerate(extract1(message)):
            n += 1
            form = "[green]says[/green]" if j % 2 else "goła"
            table.add_row(str(n), escape(message.author), form, escape(format_rule(rule)))

    console.print(table)


def _print_horn(messages: list[Message]) -> None:
    """Drukuje politykę jako klauzule (plain text), pogrupowaną po wiadomościach."""
    out: list[str] = []
    for i, message in enumerate(messages):
        out.append(f"% ===== wiadomość {i}: {message.author} =====")
        out.extend(format_rule(rule) for rule in extract1(message))
        out.append("")

    output = "\n".join(out)
    try:
        sys.stdout.buffer.write(output.encode("utf-8"))
        sys.stdout.buffer.flush()
    except AttributeError:
        print(output, end="")


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.messages)
    if not path.exists():
        console.print(f"[red]Brak pliku wiadomości:[/red] {escape(str(path))}")
        raise SystemExit(1)

    try:
        messages = load_messages_json(path)
    except SafetyError as e:
        console.print(f"[red]Reguła niebezpieczna:[/red] {escape(str(e))}")
        for note in getattr(e, "__notes__", []):
            console.print(f"  [dim]{escape(note)}[/dim]")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Błąd wczytywania wiadomości:[/red] {escape(str(e))}")
        raise SystemExit(1)

    policy = extract(messages)

    if args.json_output:
        print(json.dumps([rule_to_obj(r) for r in policy], ensure_ascii=False, indent=2))
        return

    if args.print_horn:
        _print_horn(messages)
        return

    n_rules = sum(len(m.content) for m in messages)
    console.print(
        f"Wiadomości: [bold]{len(messages)}[/bold]  "
        f"reguł: [bold]{n_rules}[/bold]  "
        f"→ polityka: [green]{len(policy)}[/green] reguł"
    )
    if not policy:
        console.print("[yellow]Brak reguł — polityka jest pusta.[/yellow]")
        return
    _show_policy_table(messages)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Ekstrahuje politykę (reguły gołe + says) z pliku wiadomości JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje wiadomości agentów z pliku JSON i dla każdej reguły emituje
dwie: regułę gołą oraz "<autor> says <głowa>" z tym samym ciałem.

Format pliku JSON:
  {
    "messages": [
      {"author": "Alice",
       "rules": [
         {"head": ["reads", "Alice", "?D", "?T"],
          "body": [["authorises", "Bob", "Alice", "?T"], ["task_of", "?D", "?T"]]},
         "(task_of data1 analysis)."
       ]}
    ]
  }

Przykłady:
  ja extract wiadomości.json
  ja extract wiadomości.json --print-horn
  ja extract wiadomości.json --json-output
        """,
    )
    p.add_argument(
        "messages",
        metavar="PLIK",
        help="Plik JSON z wiadomościami.",
    )
    p.add_argument(
        "--print-horn",
        action="store_true",
        dest="print_horn",
        help="Wydrukuj politykę jako klauzule (plain text).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz politykę jako JSON na stdout.",
    )
    p.set_defaults(func=run)
