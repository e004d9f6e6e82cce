"""
justification — przypisanie autorstwa, ekstrakcja polityki i payload akcji.

Przepływ:
  wiadomości (reguły agentów) → extract() → Policy z regułami gołymi i "says"
  akcja → payload() → (basis, actorship, *extra) → extract() → Policy
"""

from .says import (
    SAYS,
    to_says_atom,
    to_says_rule,
    add_says_head,
    split_says_atom,
    attribution_chain,
)
from .extraction import extract1, extract
from .payload import ACTOR, reflect_actorship, payload

__all__ = [
    "SAYS",
    "to_says_atom",
    "to_says_rule",
    "add_says_head",
    "split_says_atom",
    "attribution_chain",
    "extract1",
    "extract",
    "ACTOR",
    "reflect_actorship",
    "payload",
]
