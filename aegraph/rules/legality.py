"""
Rule legality enumerators.

Each enumerator walks the whole tree and returns every path at which its
rule may legally be applied. Paths come back in traversal order with no
duplicates, and are only meaningful against the graph they came from.

Rules:
    Double cut  — an atom-free cut whose only content is one inner cut
    Erasure     — an element in a positive (evenly enclosed) context
    Deiteration — a copy of an element that also sits in an enclosing level
"""

from __future__ import annotations

import logging

from ..graph import Graph, Member, Path

logger = logging.getLogger(__name__)


# =============================================================================
# DOUBLE CUT
# =============================================================================

def is_double_cut(node: Member) -> bool:
    """
    Check the double-cut shape: a cut with no atoms holding exactly one
    nested cut. The two cuts together enclose the inner content twice.
    """
    return (
        isinstance(node, Graph)
        and not node.is_sheet
        and node.num_atoms == 0
        and node.num_subgraphs == 1
    )


def _collect_double_cuts(node: Graph, path: Path, found: list[Path]) -> None:
    if is_double_cut(node):
        found.append(path)
    
    for index, child in enumerate(node.children):
        _collect_double_cuts(child, path + (index,), found)


def possible_double_cuts(graph: Graph) -> list[Path]:
    """Return the path of every removable double cut in the graph."""
    found: list[Path] = []
    _collect_double_cuts(graph, (), found)
    logger.debug("%d double cut(s) in %s", len(found), graph)
    return found


# =============================================================================
# ERASURE
# =============================================================================

def is_positive_context(path: Path) -> bool:
    """
    Check whether the element at path sits in an evenly enclosed context.
    
    An element at path length n is enclosed by n - 1 cuts, so odd lengths
    are positive: the Sheet itself is depth 0.
    """
    return len(path) % 2 == 1


def _collect_erasures(node: Graph, path: Path, found: list[Path]) -> None:
    siblings = node.size - 1
    
    for index, member in node.members():
        member_path = path + (index,)
        
        # The sole member of an enclosed level is never erasable on its own
        if is_positive_context(member_path) and (siblings >= 1 or node.is_sheet):
            found.append(member_path)
        
        if isinstance(member, Graph):
            _collect_erasures(member, member_path, found)


def possible_erasures(graph: Graph) -> list[Path]:
    """
    Return the path of every element that may be erased.
    
    An element is erasable when it is in a positive context and either
    has at least one sibling at its level or sits directly on the Sheet.
    """
    found: list[Path] = []
    _collect_erasures(graph, (), found)
    logger.debug("%d erasure(s) in %s", len(found), graph)
    return found


# =============================================================================
# DEITERATION
# =============================================================================

def _collect_deiterations(
    node: Graph,
    path: Path,
    found: list[Path],
    seen: set[Path],
) -> None:
    for element_index, element in node.members():
        for scope_index, scope in enumerate(node.children):
            if scope_index == element_index:
                continue
            if not scope.contains(element):
                continue
            
            for sub_path in scope.paths_to(element, skip_singletons=False):
                target = path + (scope_index,) + sub_path
                if target not in seen:
                    seen.add(target)
                    found.append(target)
    
    for index, child in enumerate(node.children):
        _collect_deiterations(child, path + (index,), found, seen)


def possible_deiterations(graph: Graph) -> list[Path]:
    """
    Return the path of every element that may be deiterated.
    
    At every level of the tree, each element of that level is looked up
    inside the sibling cuts of the same level. Every copy found there is
    a target: the element at the enclosing level stays as the witness.
    """
    found: list[Path] = []
    _collect_deiterations(graph, (), found, set())
    logger.debug("%d deiteration(s) in %s", len(found), graph)
    return found
