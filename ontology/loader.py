"""
ontology/loader.py — odczyt i zapis faktów, reguł, wiadomości i akcji.

Publiczne API:
  parse_fact(text)            -> Atom   ("(reads Alice ?D)")
  parse_rule(text)            -> Rule   ("(h ?X) :- (b ?X).")
  fact_from_obj / rule_from_obj / message_from_obj / action_from_obj
  fact_to_obj  / rule_to_obj  / message_to_obj  / action_to_obj
  validate_document(data, schema)   walidacja jsonschema → LoadError
  load_messages_json(path)    -> list[Message]
  load_action_json(path)      -> Action
  load_world_json(path)       -> WorldDocument

Reguły są budowane przez make_safe_rule — reguła niebezpieczna w pliku
kończy wczytywanie wyjątkiem SafetyError (z notatką o ścieżce JSON).
"""

from __future__ import annotations

import json
import pathlib
import re
from dataclasses import dataclass, field
from typing import Any

import jsonschema

from .facts import Atom, Lit, Node, Var, leaf
from .messages import Action, Agent, Message
from .rules import Rule, SafetyError, make_safe_rule
from .schema import ACTION_SCHEMA, MESSAGES_SCHEMA, WORLD_SCHEMA


class LoadError(ValueError):
    """Dokument nie pasuje do schematu; path to JSON Pointer miejsca błędu."""

    def __init__(self, message: str, path: str = "/") -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Parser tekstowy (S-wyrażenia)
# ---------------------------------------------------------------------------

# fakt   := '(' fakt* ')' | słowo | "napis"
# reguła := fakt [':-' fakt (',' fakt)*] ['.']
_TOKEN_RE = re.compile(
    r'\s*(?:'
    r'(?P<open>\()'
    r'|(?P<close>\))'
    r'|(?P<comma>,)'
    r'|(?P<neck>:-)'
    r'|(?P<quoted>"(?:[^"\\]|\\.)*")'
    r'|(?P<bare>(?:[^\s(),":]|:(?!-))+)'
    r')'
)


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        m = _TOKEN_RE.match(text, pos)
        if m is None or m.end() == pos:
            raise ValueError(f"Nieprawidłowy znak na pozycji {pos}: '{text[pos:pos + 10]}'")
        kind = m.lastgroup or ""
        tokens.append((kind, m.group(kind)))
        pos = m.end()
    return tokens


class _Parser:
    def __init__(self, text: str) -> None:
        self._text   = text
        self._tokens = _tokenize(text)
        self._pos    = 0

    def _peek(self) -> str | None:
        return self._tokens[self._pos][0] if self._pos < len(self._tokens) else None

    def _next(self) -> tuple[str, str]:
        if self._pos >= len(self._tokens):
            raise ValueError(f"Nieoczekiwany koniec tekstu: '{self._text}'")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def fact(self) -> Atom:
        kind, value = self._next()
        match kind:
            case "open":
                children: list[Atom] = []
                while self._peek() != "close":
                    if self._peek() is None:
                        raise ValueError(f"Brak nawiasu zamykającego: '{self._text}'")
                    children.append(self.fact())
                self._next()
                return Node(tuple(children))
            case "quoted":
                return Lit(json.loads(value))
            case "bare":
                return leaf(value)
            case _:
                raise ValueError(f"Nieoczekiwany token '{value}' w: '{self._text}'")

    def rule(self) -> Rule:
        head = self.fact()
        body: list[Atom] = []
        if self._peek() == "neck":
            self._next()
            body.append(self.fact())
            while self._peek() == "comma":
                self._next()
                body.append(self.fact())
        self.done()
        return make_safe_rule(head, body)

    def done(self) -> None:
        if self._pos != len(self._tokens):
            raise ValueError(
                f"Nadmiarowy tekst po pozycji tokenu {self._pos}: '{self._text}'"
            )


def _strip_period(text: str) -> str:
    text = text.strip()
    return text[:-1] if text.endswith(".") else text


def parse_fact(text: str) -> Atom:
    """
    Parsuje fakt/atom zapisany jako S-wyrażenie.

    Przykłady::

        "(reads Alice ?D)"            → Node[Lit reads, Lit Alice, Var D]
        "(Bob says (reads Alice ?D))" → węzeł zagnieżdżony
        "?X"                          → Var("X")

    Raises:
        ValueError jeśli format jest nieprawidłowy.
    """
    parser = _Parser(_strip_period(text))
    fact = parser.fact()
    parser.done()
    return fact


def parse_rule(text: str) -> Rule:
    """
    Parsuje klauzulę "head :- b1, b2." (kropka i ciało opcjonalne).

    Raises:
        ValueError przy błędzie składni, SafetyError dla reguły niebezpiecznej.
    """
    return _Parser(_strip_period(text)).rule()


# ---------------------------------------------------------------------------
# JSON → obiekty
# ---------------------------------------------------------------------------

def validate_document(data: Any, schema: dict[str, Any]) -> None:
    """Waliduje dokument jsonschema; pierwszy (najlepszy) błąd → LoadError."""
    validator = jsonschema.Draft202012Validator(schema)
    error = jsonschema.exceptions.best_match(validator.iter_errors(data))
    if error is not None:
        path = (
            "/" + "/".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "/"
        )
        raise LoadError(error.message, path)


def fact_from_obj(obj: str | list | dict[str, str]) -> Atom:
    if isinstance(obj, str):
        return leaf(obj)
    if isinstance(obj, dict):
        return Lit(obj["lit"])
    return Node(tuple(fact_from_obj(child) for child in obj))


def rule_from_obj(obj: str | dict[str, Any], path: str = "/") -> Rule:
    """Buduje regułę z obiektu JSON lub tekstu klauzuli."""
    try:
        if isinstance(obj, str):
            return parse_rule(obj)
        head = fact_from_obj(obj["head"])
        body = [fact_from_obj(a) for a in obj.get("body", [])]
        return make_safe_rule(head, body)
    except SafetyError as exc:
        exc.add_note(f"ścieżka: {path}")
        raise
    except ValueError as exc:
        raise LoadError(str(exc), path) from exc


def message_from_obj(obj: dict[str, Any], path: str = "") -> Message:
    rules = tuple(
        rule_from_obj(r, f"{path}/rules/{i}")
        for i, r in enumerate(obj.get("rules", []))
    )
    return Message(author=obj["author"], content=rules)


def action_from_obj(obj: dict[str, Any], path: str = "") -> Action:
    return Action(
        actor=obj["actor"],
        basis=message_from_obj(obj["basis"], f"{path}/basis"),
        extra=tuple(
            message_from_obj(m, f"{path}/extra/{i}")
            for i, m in enumerate(obj.get("extra", []))
        ),
    )


# ---------------------------------------------------------------------------
# Obiekty → JSON
# ---------------------------------------------------------------------------

def fact_to_obj(tree: Atom) -> str | list | dict[str, str]:
    match tree:
        case Var(name=name):
            return f"?{name}"
        case Lit(name=name) if name.startswith("?"):
            # zwykły napis "?x" wróciłby jako zmienna
            return {"lit": name}
        case Lit(name=name):
            return name
        case Node(children=children):
            return [fact_to_obj(c) for c in children]
    raise TypeError(f"Nieznany węzeł drzewa: {tree!r}")


def rule_to_obj(rule: Rule) -> dict[str, Any]:
    return {"head": fact_to_obj(rule.head), "body": [fact_to_obj(a) for a in rule.body]}


def message_to_obj(message: Message) -> dict[str, Any]:
    return {"author": message.author, "rules": [rule_to_obj(r) for r in message.content]}


def action_to_obj(action: Action) -> dict[str, Any]:
    return {
        "actor": action.actor,
        "basis": message_to_obj(action.basis),
        "extra": [message_to_obj(m) for m in action.extra],
    }


# ---------------------------------------------------------------------------
# Pliki
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class WorldDocument:
    """
    Stan widziany przez audytora, wczytany z jednego pliku.

    - agreements: wiadomości uzgodnione
    - statements: widok → (wiadomości stwierdzone, akcje wykonane)
    - action:     audytowana akcja
    """
    action: Action
    agreements: list[Message] = field(default_factory=list)
    statements: dict[Agent, tuple[list[Message], list[Action]]] = field(default_factory=dict)


def _read_json(path: pathlib.Path) -> Any:
    return json.loads(pathlib.Path(path).read_text(encoding="utf-8"))


def load_messages_json(path: pathlib.Path) -> list[Message]:
    """
    Wczytuje wiadomości z pliku JSON.

    Oczekiwany format::

        {
            "messages": [
                {"author": "Alice",
                 "rules": [{"head": ["reads", "Alice", "?D"],
                            "body": [["authorises", "Bob", "Alice", "?T"],
                                     ["task_of", "?D", "?T"]]}]}
            ]
        }
    """
    raw = _read_json(path)
    validate_document(raw, MESSAGES_SCHEMA)
    return [message_from_obj(m, f"/messages/{i}") for i, m in enumerate(raw["messages"])]


def load_action_json(path: pathlib.Path) -> Action:
    """Wczytuje akcję z pliku JSON: {"action": {"actor": ..., "basis": ..., "extra": [...]}}."""
    raw = _read_json(path)
    validate_document(raw, ACTION_SCHEMA)
    return action_from_obj(raw["action"], "/action")


def load_world_json(path: pathlib.Path) -> WorldDocument:
    """
    Wczytuje dokument audytu.

    Oczekiwany format::

        {
            "agreements": [<wiadomość>, ...],
            "statements": {"Bob": {"messages": [...], "actions": [...]}},
            "action":     <akcja>
        }
    """
    raw = _read_json(path)
    validate_document(raw, WORLD_SCHEMA)

    statements: dict[Agent, tuple[list[Message], list[Action]]] = {}
    for view_id, view in raw.get("statements", {}).items():
        base = f"/statements/{view_id}"
        statements[view_id] = (
            [message_from_obj(m, f"{base}/messages/{i}") for i, m in enumerate(view.get("messages", []))],
            [action_from_obj(a, f"{base}/actions/{i}") for i, a in enumerate(view.get("actions", []))],
        )

    return WorldDocument(
        action=action_from_obj(raw["action"], "/action"),
        agreements=[
            message_from_obj(m, f"/agreements/{i}")
            for i, m in enumerate(raw.get("agreements", []))
        ],
        statements=statements,
    )
