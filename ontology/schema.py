"""
ontology/schema.py — schematy JSON (Draft 2020-12) dokumentów wejściowych.

Reprezentacja JSON:
  fakt       napis (liść: '?X' zmienna, inaczej stała), tablica (węzeł)
             albo {"lit": "?x"} (stała zaczynająca się od '?')
  reguła     {"head": <fakt>, "body": [<fakt>, ...]} albo tekst klauzuli
             "(reads Alice ?D) :- (authorises Bob Alice ?T)."
  wiadomość  {"author": "Alice", "rules": [<reguła>, ...]}
  akcja      {"actor": "Bob", "basis": <wiadomość>, "extra": [<wiadomość>, ...]}

Stała zaczynająca się od '?' zapisana jako zwykły napis zostałaby odczytana
jako zmienna, dlatego koder zapisuje ją w postaci {"lit": ...}.

Dokumenty:
  MESSAGES_SCHEMA  {"messages": [<wiadomość>, ...]}
  ACTION_SCHEMA    {"action": <akcja>}
  WORLD_SCHEMA     {"agreements": [...], "statements": {<widok>: {...}}, "action": <akcja>}
"""

from __future__ import annotations

from typing import Any

_DRAFT = "https://json-schema.org/draft/2020-12/schema"

_DEFS: dict[str, Any] = {
    "fact": {
        "oneOf": [
            {"type": "string"},
            {"type": "array", "items": {"$ref": "#/$defs/fact"}},
            {
                "type": "object",
                "properties": {"lit": {"type": "string"}},
                "required": ["lit"],
                "additionalProperties": False,
            },
        ],
    },
    "rule": {
        "oneOf": [
            {"type": "string", "minLength": 1},
            {
                "type": "object",
                "properties": {
                    "head": {"$ref": "#/$defs/fact"},
                    "body": {"type": "array", "items": {"$ref": "#/$defs/fact"}},
                },
                "required": ["head"],
                "additionalProperties": False,
            },
        ],
    },
    "message": {
        "type": "object",
        "properties": {
            "author": {"type": "string", "minLength": 1},
            "rules":  {"type": "array", "items": {"$ref": "#/$defs/rule"}},
        },
        "required": ["author"],
        "additionalProperties": False,
    },
    "action": {
        "type": "object",
        "properties": {
            "actor": {"type": "string", "minLength": 1},
            "basis": {"$ref": "#/$defs/message"},
            "extra": {"type": "array", "items": {"$ref": "#/$defs/message"}},
        },
        "required": ["actor", "basis"],
        "additionalProperties": False,
    },
    "view": {
        "type": "object",
        "properties": {
            "messages": {"type": "array", "items": {"$ref": "#/$defs/message"}},
            "actions":  {"type": "array", "items": {"$ref": "#/$defs/action"}},
        },
        "additionalProperties": False,
    },
}


def _document(body: dict[str, Any]) -> dict[str, Any]:
    return {"$schema": _DRAFT, "$defs": _DEFS, **body}


MESSAGES_SCHEMA: dict[str, Any] = _document({
    "type": "object",
    "properties": {
        "messages": {"type": "array", "items": {"$ref": "#/$defs/message"}},
    },
    "required": ["messages"],
})

ACTION_SCHEMA: dict[str, Any] = _document({
    "type": "object",
    "properties": {
        "action": {"$ref": "#/$defs/action"},
    },
    "required": ["action"],
})

WORLD_SCHEMA: dict[str, Any] = _document({
    "type": "object",
    "properties": {
        "agreements": {"type": "array", "items": {"$ref": "#/$defs/message"}},
        "statements": {
            "type": "object",
            "additionalProperties": {"$ref": "#/$defs/view"},
        },
        "action": {"$ref": "#/$defs/action"},
    },
    "required": ["action"],
})
