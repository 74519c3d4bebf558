"""
Tests for the Graph value and its structural queries.

These tests verify that:
1. Graphs canonicalize once, at construction
2. Graph values are immutable and compare by canonical form
3. Containment, member addressing and path search are correct
"""

import dataclasses

import pytest

from aegraph.errors import InvalidPath, MalformedInput
from aegraph.grammar import parse, parse_cut
from aegraph.graph import Graph, equals


# =============================================================================
# CONSTRUCTION & CANONICAL FORM
# =============================================================================

class TestConstruction:
    """Test Graph construction invariants."""
    
    def test_atoms_are_sorted_and_trimmed(self):
        graph = Graph.sheet(atoms=[" b", "a ", "C"])
        assert graph.atoms == ("C", "a", "b")
    
    def test_children_are_sorted_by_text(self):
        graph = Graph.sheet(children=[Graph.cut(atoms=["B"]), Graph.cut(atoms=["A"])])
        assert [str(child) for child in graph.children] == ["[A]", "[B]"]
    
    def test_invalid_atom_is_rejected(self):
        with pytest.raises(MalformedInput, match="reserved"):
            Graph.sheet(atoms=["A,B"])
    
    def test_sheet_cannot_be_nested(self):
        with pytest.raises(MalformedInput, match="cannot be nested"):
            Graph.cut(children=[Graph.sheet()])
    
    def test_children_must_be_graphs(self):
        with pytest.raises(MalformedInput):
            Graph.sheet(children=["[A]"])
    
    def test_graph_is_frozen(self):
        graph = parse("(A)")
        with pytest.raises(dataclasses.FrozenInstanceError):
            graph.atoms = ("B",)


class TestEquality:
    """Graphs compare by canonical form."""
    
    def test_equal_graphs(self):
        assert parse("(A, [B, C])") == parse("([C, B], A)")
        assert equals(parse("(A, [B, C])"), parse("([C, B], A)"))
    
    def test_sheet_differs_from_cut(self):
        assert parse("(A)") != parse_cut("[A]")
        assert not equals(parse("(A)"), parse_cut("[A]"))
    
    def test_hash_follows_equality(self):
        graphs = {parse("(A, B)"), parse("(B, A)"), parse("(A)")}
        assert len(graphs) == 2
    
    def test_ordering_uses_text(self):
        assert parse_cut("[A]") < parse_cut("[B]")
        assert sorted([parse_cut("[[A]]"), parse_cut("[A]")])[0] == parse_cut("[A]")
    
    def test_graph_never_equals_string(self):
        assert parse("(A)") != "(A)"


# =============================================================================
# SIZE ACCESSORS
# =============================================================================

class TestSize:
    """size == num_atoms + num_subgraphs."""
    
    @pytest.mark.parametrize("text,atoms,subgraphs", [
        ("()", 0, 0),
        ("(A)", 1, 0),
        ("(A, [B])", 1, 1),
        ("([A], [B], [[C]], D, E)", 2, 3),
    ])
    def test_counts(self, text, atoms, subgraphs):
        graph = parse(text)
        assert graph.num_atoms == atoms
        assert graph.num_subgraphs == subgraphs
        assert graph.size == atoms + subgraphs
    
    def test_size_counts_direct_members_only(self):
        graph = parse("([A, B, C])")
        assert graph.size == 1
        assert graph.children[0].size == 3


# =============================================================================
# CONTAINMENT
# =============================================================================

class TestContains:
    """Test recursive containment."""
    
    def test_atom_at_any_depth(self):
        graph = parse("(A, [B, [C]])")
        assert graph.contains("A")
        assert graph.contains("B")
        assert graph.contains("C")
        assert not graph.contains("D")
    
    def test_cut_at_any_depth(self):
        graph = parse("(A, [B, [C]])")
        assert graph.contains(parse_cut("[C]"))
        assert graph.contains(parse_cut("[B, [C]]"))
        assert graph.contains(parse_cut("[[C], B]"))
        assert not graph.contains(parse_cut("[B]"))
    
    def test_node_does_not_contain_itself(self):
        cut = parse_cut("[B, [C]]")
        assert not cut.contains(cut)
    
    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            parse("(A)").contains(1)


# =============================================================================
# MEMBER ADDRESSING
# =============================================================================

class TestAddressing:
    """Cuts are addressed first, atoms after them."""
    
    def test_member_indices(self):
        graph = parse("([A, B], C)")
        assert graph.member(0) == parse_cut("[A, B]")
        assert graph.member(1) == "C"
    
    def test_members_iterates_in_address_order(self):
        graph = parse("(D, [B], [A], C)")
        assert [member for _, member in graph.members()] == [
            parse_cut("[A]"), parse_cut("[B]"), "C", "D",
        ]
        assert [index for index, _ in graph.members()] == [0, 1, 2, 3]
    
    def test_member_out_of_range(self):
        graph = parse("([A, B], C)")
        with pytest.raises(InvalidPath, match="out of range"):
            graph.member(2)
        with pytest.raises(InvalidPath, match="out of range"):
            graph.member(-1)
    
    def test_resolve(self):
        graph = parse("([A, B], C)")
        assert graph.resolve(()) is graph
        assert graph.resolve((0, 1)) == "B"
        assert graph.resolve([1]) == "C"
    
    def test_resolve_through_atom(self):
        graph = parse("([A, B], C)")
        with pytest.raises(InvalidPath, match="cannot descend into atom"):
            graph.resolve((1, 0))
    
    def test_resolve_out_of_range_reports_full_path(self):
        graph = parse("([A, B], C)")
        with pytest.raises(InvalidPath) as excinfo:
            graph.resolve((0, 5))
        assert excinfo.value.path == (0, 5)


# =============================================================================
# PATH SEARCH
# =============================================================================

class TestPathsTo:
    """Test paths_to for atoms and cuts."""
    
    def test_atom_paths_skip_singleton_levels(self):
        # ([A, B], [[A]], A): the A in [A] is alone at its level
        graph = parse("(A, [A, B], [[A]])")
        assert graph.paths_to("A") == [(0, 0), (2,)]
    
    def test_atom_paths_including_singletons(self):
        graph = parse("(A, [A, B], [[A]])")
        assert graph.paths_to("A", skip_singletons=False) == [(0, 0), (1, 0, 0), (2,)]
    
    def test_cut_paths(self):
        # ([B], [[B], C])
        graph = parse("([B], [C, [B]])")
        assert graph.paths_to(parse_cut("[B]")) == [(0,), (1, 0)]
    
    def test_paths_resolve_to_target(self):
        graph = parse("(A, [A, B], [[A]], [C, [A, D]])")
        for path in graph.paths_to("A", skip_singletons=False):
            assert graph.resolve(path) == "A"
    
    def test_missing_target(self):
        assert parse("(A, [B])").paths_to("Z") == []
    
    def test_sole_member_of_sheet_is_skipped(self):
        assert parse("(A)").paths_to("A") == []
        assert parse("(A)").paths_to("A", skip_singletons=False) == [(0,)]


# =============================================================================
# RUN TESTS
# =============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
