"""
ontology/facts.py — drzewa różane (rose trees) faktów i atomów.

Liście:
  Var(name)  zmienna; w tekście i JSON zapisywana z prefiksem '?' (np. '?D')
  Lit(name)  stała (literał)

Drzewo:
  Tree[L] = L | Node[L]   Node przechowuje uporządkowaną krotkę dzieci
  Fact    = Tree[Lit]     fakt uziemiony (bez zmiennych)
  Atom    = Tree[Leaf]    atom: liście mogą być zmiennymi

Wszystkie wartości są niemutowalne; równość i hash są strukturalne (głębokie),
więc poddrzewa można bezpiecznie współdzielić.

Publiczne API:
  leaf(text)                 -> Leaf   ('?X' → Var("X"), inaczej Lit)
  atom(functor, *args)       -> Node   (atom("reads", "Alice", "?D"))
  variables(tree)            -> frozenset[Var]
  substitute(tree, mapping)  -> Tree   (niezmapowane zmienne zostają bez zmian)
  is_ground(tree)            -> bool
  format_fact(tree)          -> str    (S-wyrażenia: "(reads Alice ?D)")
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Liście
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Var:
    """Zmienna (nazwany placeholder), bez prefiksu '?' w polu name."""
    name: str

    def __str__(self) -> str:
        return f"?{self.name}"


@dataclass(frozen=True, slots=True)
class Lit:
    """Stała (nazwany literał)."""
    name: str

    def __str__(self) -> str:
        return _format_literal(self.name)


type Leaf = Var | Lit


# ---------------------------------------------------------------------------
# Drzewo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Node[L]:
    """Węzeł wewnętrzny: uporządkowana krotka dzieci (liści lub węzłów)."""
    children: tuple[Tree[L], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __str__(self) -> str:
        return format_fact(self)

    def __len__(self) -> int:
        return len(self.children)

    @classmethod
    def of(cls, *children: Tree[L]) -> Node[L]:
        return cls(children)


type Tree[L] = L | Node[L]

# Fakt uziemiony i atom to ta sama struktura, różni się tylko rodzaj liści.
type Fact = Tree[Lit]
type Atom = Tree[Leaf]

# Podstawienie: zmienna -> liść
type Substitution = Mapping[Var, Leaf]


# ---------------------------------------------------------------------------
# Konstruktory pomocnicze
# ---------------------------------------------------------------------------

def leaf(text: str) -> Leaf:
    """Zamienia napis na liść: '?X' → Var("X"), każdy inny napis → Lit."""
    if text.startswith("?") and len(text) > 1:
        return Var(text[1:])
    return Lit(text)


def atom(functor: str, *args: str | Atom) -> Node[Leaf]:
    """
    Buduje atom postaci functor(args...) jako Node[Lit(functor), *args].

    Argumenty będące napisami są zamieniane przez leaf() ('?' → zmienna);
    argumenty będące już drzewami są wstawiane bez zmian.
    """
    children: list[Atom] = [Lit(functor)]
    for arg in args:
        children.append(leaf(arg) if isinstance(arg, str) else arg)
    return Node(tuple(children))


# ---------------------------------------------------------------------------
# Przechodzenie i podstawianie
# ---------------------------------------------------------------------------

def _iter_variables(tree: Atom) -> Iterator[Var]:
    match tree:
        case Var():
            yield tree
        case Node(children=children):
            for child in children:
                yield from _iter_variables(child)


def variables(tree: Atom) -> frozenset[Var]:
    """Zbiór wszystkich liści Var osiągalnych z korzenia."""
    return frozenset(_iter_variables(tree))


def is_ground(tree: Atom) -> bool:
    """True gdy drzewo nie zawiera żadnej zmiennej."""
    return next(_iter_variables(tree), None) is None


def substitute(tree: Atom, mapping: Substitution) -> Atom:
    """
    Zwraca nowe drzewo, w którym zmienne z mapping zastąpiono liśćmi.

    Zmienne nieobecne w mapping pozostają bez zmian (brak częściowej
    aplikacji, brak błędu). Wejściowe drzewo nie jest modyfikowane.
    """
    match tree:
        case Var():
            return mapping.get(tree, tree)
        case Node(children=children):
            return Node(tuple(substitute(child, mapping) for child in children))
        case _:
            return tree


# ---------------------------------------------------------------------------
# Formatowanie (S-wyrażenia)
# ---------------------------------------------------------------------------

# Literały wymagające cudzysłowu, żeby parser odczytał je z powrotem
# (także kończące się kropką, którą parser zdejmuje jako koniec klauzuli)
_NEEDS_QUOTES_RE = re.compile(r'[\s(),"]|:-')


def _format_literal(name: str) -> str:
    if not name or name.startswith("?") or name.endswith(".") or _NEEDS_QUOTES_RE.search(name):
        return json.dumps(name, ensure_ascii=False)
    return name


def format_fact(tree: Atom) -> str:
    """Zapis drzewa jako S-wyrażenie, np. (Alice says (reads Alice ?D))."""
    match tree:
        case Node(children=children):
            return "(" + " ".join(format_fact(c) for c in children) + ")"
        case _:
            return str(tree)
