"""Testy drzew faktów: liście, zmienne, podstawienia, formatowanie."""

from ontology import Lit, Node, Var, atom, format_fact, is_ground, leaf, substitute, variables


class TestLeaves:
    def test_question_mark_prefix_makes_variable(self):
        assert leaf("?D") == Var("D")
        assert leaf("Alice") == Lit("Alice")

    def test_lone_question_mark_is_literal(self):
        assert leaf("?") == Lit("?")

    def test_atom_builds_node_with_functor_first(self):
        a = atom("reads", "Alice", "?D")
        assert a == Node((Lit("reads"), Lit("Alice"), Var("D")))
        assert len(a) == 3

    def test_atom_keeps_tree_arguments(self):
        inner = atom("reads", "Alice", "?D")
        outer = atom("says", inner)
        assert outer.children[1] is inner

    def test_structural_equality_and_hash(self):
        a = atom("p", "x", atom("q", "?Y"))
        b = atom("p", "x", atom("q", "?Y"))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_node_coerces_children_to_tuple(self):
        n = Node([Lit("a"), Lit("b")])
        assert n.children == (Lit("a"), Lit("b"))
        assert Node.of(Lit("a"), Lit("b")) == n


class TestVariables:
    def test_collects_nested_variables(self):
        a = atom("p", "?X", atom("q", "?Y", "c"), "?X")
        assert variables(a) == {Var("X"), Var("Y")}

    def test_ground_fact_has_no_variables(self):
        a = atom("task_of", "data1", "analysis")
        assert variables(a) == frozenset()
        assert is_ground(a)

    def test_leaf_variable_is_not_ground(self):
        assert not is_ground(Var("X"))
        assert is_ground(Lit("X"))


class TestSubstitute:
    def test_replaces_mapped_variables(self):
        a = atom("reads", "?A", "?D")
        result = substitute(a, {Var("A"): Lit("Alice"), Var("D"): Lit("data1")})
        assert result == atom("reads", "Alice", "data1")

    def test_unmapped_variables_unchanged(self):
        a = atom("reads", "?A", "?D")
        result = substitute(a, {Var("A"): Lit("Alice")})
        assert result == atom("reads", "Alice", "?D")

    def test_input_tree_not_modified(self):
        a = atom("p", "?X")
        substitute(a, {Var("X"): Lit("c")})
        assert a == atom("p", "?X")

    def test_variable_may_map_to_variable(self):
        assert substitute(atom("p", "?X"), {Var("X"): Var("Z")}) == atom("p", "?Z")


class TestFormat:
    def test_s_expression(self):
        assert format_fact(atom("reads", "Alice", "?D")) == "(reads Alice ?D)"

    def test_nested(self):
        a = Node((Lit("Bob"), Lit("says"), atom("p", "x")))
        assert format_fact(a) == "(Bob says (p x))"
        assert str(a) == "(Bob says (p x))"

    def test_literals_needing_quotes(self):
        assert str(Lit("two words")) == '"two words"'
        assert str(Lit("?x")) == '"?x"'
        assert str(Lit("")) == '""'
        assert str(Lit("a:-b")) == '"a:-b"'

    def test_empty_node(self):
        assert format_fact(Node(())) == "()"
