"""
ontology/rules.py — reguły Horna nad drzewami atomów i warunek bezpieczeństwa.

Reguła: head :- body[0], body[1], ..., body[n]

Bezpieczeństwo (range restriction): każda zmienna głowy musi wystąpić
w co najmniej jednym atomie ciała. Warunek jest sprawdzany raz, przy
konstrukcji — nie da się zbudować niebezpiecznej reguły, więc dalsze
transformacje (says-rewriting) nie muszą go powtarzać.

Publiczne API:
  Rule(head, body)                    reguła (bezpieczna z konstrukcji)
  make_safe_rule(head, body)          -> SafeRule   (lub SafetyError)
  unbound_head_variables(head, body)  -> frozenset[Var]
  format_rule(rule)                   -> str   ("(h ?X) :- (b ?X).")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .facts import Atom, Var, format_fact, variables


# ---------------------------------------------------------------------------
# Błąd bezpieczeństwa
# ---------------------------------------------------------------------------

class SafetyError(ValueError):
    """
    Głowa reguły wprowadza zmienne nieobecne w ciele.

    Atrybuty:
      head    — głowa odrzuconej reguły
      unbound — zbiór zmiennych głowy niezwiązanych przez ciało
    """

    def __init__(self, head: Atom, unbound: frozenset[Var]) -> None:
        self.head    = head
        self.unbound = unbound
        names = ", ".join(sorted(str(v) for v in unbound))
        super().__init__(
            f"Reguła niebezpieczna: zmienne {names} w głowie {format_fact(head)} "
            f"nie występują w ciele."
        )


def unbound_head_variables(head: Atom, body: Iterable[Atom]) -> frozenset[Var]:
    """vars(head) \\ vars(body) — pusty zbiór oznacza regułę bezpieczną."""
    bound: set[Var] = set()
    for body_atom in body:
        bound |= variables(body_atom)
    return variables(head) - bound


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rule:
    """
    Reguła Horna: head :- body.

    - head: atom w głowie (konkluzja)
    - body: krotka atomów ciała (przesłanki); pusta → bezwarunkowy fakt

    Konstrukcja podnosi SafetyError, gdy reguła nie jest bezpieczna.
    """
    head: Atom
    body: tuple[Atom, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.body, tuple):
            object.__setattr__(self, "body", tuple(self.body))
        unbound = unbound_head_variables(self.head, self.body)
        if unbound:
            raise SafetyError(self.head, unbound)

    def __str__(self) -> str:
        return format_rule(self)

    @property
    def is_fact(self) -> bool:
        """True gdy ciało jest puste."""
        return len(self.body) == 0


# Każda instancja Rule jest bezpieczna; alias nazywa tę gwarancję w sygnaturach.
type SafeRule = Rule


def make_safe_rule(head: Atom, body: Iterable[Atom] = ()) -> SafeRule:
    """
    Buduje bezpieczną regułę.

    Raises:
        SafetyError z kompletem niezwiązanych zmiennych (atrybut unbound).
    """
    return Rule(head=head, body=tuple(body))


# ---------------------------------------------------------------------------
# Formatowanie
# ---------------------------------------------------------------------------

def format_clause(head: Atom, body: Iterable[Atom]) -> str:
    """Zapis klauzuli bez sprawdzania bezpieczeństwa (także dla reguł odrzuconych)."""
    body_str = ", ".join(format_fact(a) for a in body)
    if body_str:
        return f"{format_fact(head)} :- {body_str}."
    return f"{format_fact(head)}."


def format_rule(rule: Rule) -> str:
    return format_clause(rule.head, rule.body)
