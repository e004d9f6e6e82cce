"""
ontology — algebra faktów, reguł, wiadomości i akcji.

Użycie:
  from ontology import atom, make_safe_rule, Message, Action

Moduły:
  facts         — Var, Lit, Node, Tree, Fact, Atom; variables, substitute, ...
  rules         — Rule, SafeRule, SafetyError, make_safe_rule
  messages      — Agent, Policy, Message, Action
  authorization — authorises/3, reads/3, task_of/2, reads_authorised_by
  schema        — schematy JSON dokumentów wejściowych
  loader        — parse_fact, parse_rule, load_*_json, *_to_obj
"""

from .facts import (
    Var,
    Lit,
    Leaf,
    Node,
    Tree,
    Fact,
    Atom,
    Substitution,
    leaf,
    atom,
    variables,
    is_ground,
    substitute,
    format_fact,
)
from .rules import (
    Rule,
    SafeRule,
    SafetyError,
    make_safe_rule,
    unbound_head_variables,
    format_clause,
    format_rule,
)
from .messages import (
    Agent,
    Policy,
    Message,
    Action,
)
from .authorization import (
    authorises,
    reads,
    task_of,
    reads_authorised_by,
)
from .loader import (
    LoadError,
    WorldDocument,
    parse_fact,
    parse_rule,
    load_messages_json,
    load_action_json,
    load_world_json,
)

__all__ = [
    # facts
    "Var",
    "Lit",
    "Leaf",
    "Node",
    "Tree",
    "Fact",
    "Atom",
    "Substitution",
    "leaf",
    "atom",
    "variables",
    "is_ground",
    "substitute",
    "format_fact",
    # rules
    "Rule",
    "SafeRule",
    "SafetyError",
    "make_safe_rule",
    "unbound_head_variables",
    "format_clause",
    "format_rule",
    # messages
    "Agent",
    "Policy",
    "Message",
    "Action",
    # authorization
    "authorises",
    "reads",
    "task_of",
    "reads_authorised_by",
    # loader
    "LoadError",
    "WorldDocument",
    "parse_fact",
    "parse_rule",
    "load_messages_json",
    "load_action_json",
    "load_world_json",
]
