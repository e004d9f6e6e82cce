"""
ledger — zbiory stwierdzeń (lokalne) i uzgodnień (zsynchronizowane).

Moduły:
  statements — Statements, AgentStatements, StatementsView
  agreements — Agreements, ReplaceAgreements, shared_agreements
"""

from .statements import AgentStatements, Statements, StatementsView
from .agreements import (
    Agreements,
    ReplaceAgreements,
    shared_agreements,
    reset_shared_agreements,
)

__all__ = [
    "AgentStatements",
    "Statements",
    "StatementsView",
    "Agreements",
    "ReplaceAgreements",
    "shared_agreements",
    "reset_shared_agreements",
]
