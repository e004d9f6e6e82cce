"""Komenda: ja audit — audytuje akcję względem uzgodnień i stwierdzeń."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib
import sys

from rich import box
from rich.markup import escape
from rich.table import Table

from audit import ActionAuditor, PolicyEvaluator, load_evaluator
from ja._config import get_console, load_settings
from justification import attribution_chain
from ledger import Agreements, ReplaceAgreements, Statements
from ontology import Policy, SafetyError, WorldDocument, format_fact, format_rule, load_world_json
from ontology.loader import rule_to_obj

console = get_console()


def _build_ledger(world: WorldDocument) -> tuple[Agreements, Statements]:
    agreements = Agreements()
    agreements.apply(ReplaceAgreements(world.agreements))

    statements = Statements()
    for view_id, (messages, actions) in world.statements.items():
        view = statements.of(view_id)
        for message in messages:
            view.state(message)
        for action in actions:
            view.enact(action)
    return agreements, statements


def _show_policy(policy: Policy) -> None:
    console.print("\n[bold]Polityka z payloadu:[/bold]")
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("ATRYBUCJA", style="cyan", no_wrap=True)
    table.add_column("GŁOWA")
    table.add_column("REGUŁA", style="dim")
    for rule in policy:
        authors, inner = attribution_chain(rule.head)
        table.add_row(
            escape(" → ".join(authors)) or "—",
            escape(format_fact(inner)),
            escape(format_rule(rule)),
        )
    console.print(table)


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.world)
    if not path.exists():
        console.print(f"[red]Brak pliku audytu:[/red] {escape(str(path))}")
        raise SystemExit(1)

    try:
        world = load_world_json(path)
    except (SafetyError, ValueError) as e:
        console.print(f"[red]Błąd wczytywania:[/red] {escape(str(e))}")
        raise SystemExit(1)

    evaluator: PolicyEvaluator | None = None
    target = args.evaluator or load_settings().evaluator
    if target:
        try:
            evaluator = load_evaluator(target)
        except (ImportError, AttributeError, TypeError, ValueError) as e:
            console.print(f"[red]Nie można załadować ewaluatora:[/red] {escape(str(e))}")
            raise SystemExit(1)

    agreements, statements = _build_ledger(world)
    view_id = args.view or world.action.actor
    auditor = ActionAuditor(agreements, statements.view(view_id), evaluator)
    report  = auditor.audit(world.action)

    if args.json_output:
        out = {
            "is_valid": report.is_valid,
            "view": view_id,
            "errors": [dataclasses.asdict(e) for e in report.errors],
            "warnings": report.warnings,
            "policy": [rule_to_obj(r) for r in report.policy],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        if not report.is_valid:
            sys.exit(1)
        return

    actor = escape(world.action.actor)
    view  = escape(view_id)
    if view_id not in statements.view_ids():
        console.print(
            f"[yellow]Widok [cyan]{view}[/cyan] nie ma stwierdzeń w pliku — "
            f"traktowany jako pusty.[/yellow]"
        )
    if report.is_valid:
        console.print(
            f"[green]OK[/green]  Akcja aktora [bold]{actor}[/bold] przeszła audyt "
            f"(widok: [cyan]{view}[/cyan])."
        )
    else:
        console.print(
            f"[red]BŁĄD[/red]  Akcja aktora [bold]{actor}[/bold] — "
            f"{len(report.errors)} błąd(ów) (widok: [cyan]{view}[/cyan])."
        )
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Kod",      style="yellow", no_wrap=True)
        table.add_column("Ścieżka", style="cyan",   no_wrap=True)
        table.add_column("Komunikat")
        table.add_column("Poprawka", style="dim")
        for e in report.errors:
            table.add_row(e.code, escape(e.path), escape(e.message), escape(e.expected_fix))
        console.print(table)

    if report.warnings:
        console.print("[yellow]Ostrzeżenia:[/yellow]")
        for w in report.warnings:
            console.print(f"  [yellow]·[/yellow] {escape(w)}")

    if args.show_policy:
        _show_policy(report.policy)

    if not report.is_valid:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "audit",
        help="Audytuje akcję względem uzgodnień i stwierdzeń (etapy A–C).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Audyt akcji (etapy A–C):

  A  Podstawa       basis należy do uzgodnień
  B  Stwierdzenia   wiadomości extra są stwierdzone w widoku lub uzgodnione
  C  Ważność        polityka z payloadu oceniona przez ewaluator
                    (pominięta, gdy brak --evaluator i JA_EVALUATOR)

Format pliku JSON:
  {
    "agreements": [<wiadomość>, ...],
    "statements": {"Alice": {"messages": [...], "actions": [...]}},
    "action":     {"actor": "Alice", "basis": <wiadomość>, "extra": [...]}
  }

Przykłady:
  ja audit świat.json
  ja audit świat.json --view Bob
  ja audit świat.json --evaluator my_solver:Evaluator --show-policy
        """,
    )
    p.add_argument(
        "world",
        metavar="PLIK",
        help="Plik JSON z uzgodnieniami, stwierdzeniami i audytowaną akcją.",
    )
    p.add_argument(
        "--view",
        metavar="AGENT",
        help="Widok stwierdzeń audytora (domyślnie: aktor akcji).",
    )
    p.add_argument(
        "--evaluator", "-e",
        metavar="MODUŁ:ATRYBUT",
        help="Ewaluator polityki (domyślnie: zmienna JA_EVALUATOR).",
    )
    p.add_argument(
        "--show-policy",
        action="store_true",
        help="Wyświetl politykę wyekstrahowaną z payloadu wraz z atrybucją.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport audytu jako JSON na stdout.",
    )
    p.set_defaults(func=run)
