"""
ja — narzędzie CLI ontologii uzasadnień (JustAct).

Użycie:
  ja <komenda> [opcje]

Komendy:
  extract      Ekstrahuje politykę (reguły gołe + "says") z pliku wiadomości.
  check-rules  Sprawdza bezpieczeństwo reguł w pliku wiadomości.
  payload      Wyświetla payload akcji (basis, aktorstwo, extra).
  audit        Audytuje akcję względem uzgodnień i stwierdzeń.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ja._config import configure_logging, load_settings
from ja.commands import extract as cmd_extract
from ja.commands import check_rules as cmd_check_rules
from ja.commands import payload as cmd_payload
from ja.commands import audit as cmd_audit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ja",
        description="JustAct — ontologia uzasadnień, narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ja 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_check_rules.add_parser(subparsers)
    cmd_payload.add_parser(subparsers)
    cmd_audit.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(load_settings())
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
