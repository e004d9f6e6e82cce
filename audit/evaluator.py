"""
audit/evaluator.py — interfejs zewnętrznego ewaluatora polityki.

Solver oceniający ważność polityki nie jest częścią tego pakietu; audyt
korzysta z dowolnego obiektu z metodą judge(policy) -> Judgement.

  load_evaluator("pakiet.moduł:atrybut")   import implementacji po ścieżce
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ontology.messages import Policy


@dataclass(frozen=True, slots=True)
class Judgement:
    """Werdykt ewaluatora; explanation opisuje powód odrzucenia."""
    is_valid: bool
    explanation: str | None = None


@runtime_checkable
class PolicyEvaluator(Protocol):
    def judge(self, policy: Policy) -> Judgement: ...


def load_evaluator(target: str) -> PolicyEvaluator:
    """
    Importuje ewaluator wskazany jako "moduł:atrybut".

    Atrybut będący klasą jest instancjonowany bez argumentów.

    Raises:
        ValueError  — zły format ścieżki
        ImportError / AttributeError — brak modułu lub atrybutu
        TypeError   — obiekt nie ma metody judge()
    """
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise ValueError(f"Nieprawidłowa ścieżka ewaluatora: '{target}' (oczekiwano 'moduł:atrybut')")

    obj = getattr(importlib.import_module(module_name), attr)
    evaluator = obj() if isinstance(obj, type) else obj
    if not isinstance(evaluator, PolicyEvaluator):
        raise TypeError(f"Obiekt '{target}' nie implementuje judge(policy).")
    return evaluator
