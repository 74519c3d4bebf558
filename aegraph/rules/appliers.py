"""
Rule appliers.

Every applier is a pure function (Graph, Path) -> Graph. The path is
resolved by walking the tree; the owning parent node is rebuilt with its
member collection spliced, and every ancestor on the way back to the root
is rebuilt around it. Untouched subtrees are reused as-is, which is safe
because Graph values are frozen. New nodes canonicalize on construction.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from ..errors import InvalidPath
from ..graph import Graph, Path
from .legality import is_double_cut

logger = logging.getLogger(__name__)


# =============================================================================
# TREE SURGERY
# =============================================================================

def _as_path(path: Sequence[int]) -> Path:
    for index in path:
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidPath(f"path indices must be ints, got {index!r}", None)
    return tuple(path)


def _rebuild(graph: Graph, path: Path, edit: Callable[[Graph], Graph]) -> Graph:
    """Replace the node at an already-validated path with edit(node)."""
    if not path:
        return edit(graph)
    
    index = path[0]
    children = list(graph.children)
    children[index] = _rebuild(children[index], path[1:], edit)
    return graph.replace_members(graph.atoms, children)


def _split_members(node: Graph, indices: Iterable[int]) -> tuple[Graph, Graph]:
    """
    Partition a node's members by index.
    
    Returns two cuts: one holding the selected members, one holding the
    rest. Only their atoms and children are used by callers.
    """
    selected = set(indices)
    picked_atoms, picked_children = [], []
    kept_atoms, kept_children = [], []
    
    for index, member in node.members():
        if isinstance(member, Graph):
            (picked_children if index in selected else kept_children).append(member)
        else:
            (picked_atoms if index in selected else kept_atoms).append(member)
    
    return Graph.cut(picked_atoms, picked_children), Graph.cut(kept_atoms, kept_children)


def _parent_path(graph: Graph, path: Path, action: str) -> Path:
    """Validate a member path and return the path of its parent."""
    if not path:
        raise InvalidPath(f"cannot {action} the sheet of assertion", path)
    graph.resolve(path)
    return path[:-1]


# =============================================================================
# DOUBLE CUT
# =============================================================================

def double_cut(graph: Graph, path: Sequence[int]) -> Graph:
    """
    Remove the double cut at path.
    
    The two wrapping cuts disappear and the content of the inner cut is
    spliced into the level that held the outer one, beside its siblings.
    
    Raises:
        InvalidPath: If path is out of range or does not address a
                     double cut
    """
    path = _as_path(path)
    parent_path = _parent_path(graph, path, "remove a double cut around")
    outer = graph.resolve(path)
    
    if not is_double_cut(outer):
        raise InvalidPath(f"'{outer}' is not a double cut", path)
    
    inner = outer.children[0]
    
    def splice(parent: Graph) -> Graph:
        _, rest = _split_members(parent, [path[-1]])
        return parent.replace_members(
            rest.atoms + inner.atoms,
            rest.children + inner.children,
        )
    
    result = _rebuild(graph, parent_path, splice)
    logger.debug("double cut at %s: %s -> %s", list(path), graph, result)
    return result


def insert_double_cut(
    graph: Graph,
    path: Sequence[int] = (),
    members: Optional[Iterable[int]] = None,
) -> Graph:
    """
    Wrap members of the level at path in a new double cut.
    
    By default every member of that level is enclosed. The inverse of
    double_cut(): removing the new double cut gives back the input graph.
    
    Raises:
        InvalidPath: If path addresses an atom, or a member index is out
                     of range or repeated
    """
    path = _as_path(path)
    node = graph.resolve(path)
    if not isinstance(node, Graph):
        raise InvalidPath(f"cannot insert a double cut inside atom '{node}'", path)
    
    if members is None:
        indices = list(range(node.size))
    else:
        indices = list(members)
        for index in indices:
            try:
                node.member(index)
            except InvalidPath as e:
                raise InvalidPath(e.reason, path + (index,)) from e
        if len(set(indices)) != len(indices):
            raise InvalidPath(f"repeated member index in {indices}", path)
    
    def wrap(level: Graph) -> Graph:
        enclosed, rest = _split_members(level, indices)
        double = Graph.cut(children=[Graph.cut(enclosed.atoms, enclosed.children)])
        return level.replace_members(rest.atoms, rest.children + (double,))
    
    result = _rebuild(graph, path, wrap)
    logger.debug("double cut inserted at %s: %s -> %s", list(path), graph, result)
    return result


# =============================================================================
# ERASURE / DEITERATION
# =============================================================================

def _remove_member(graph: Graph, path: Path, action: str) -> Graph:
    parent_path = _parent_path(graph, path, action)
    
    def remove(parent: Graph) -> Graph:
        _, rest = _split_members(parent, [path[-1]])
        return parent.replace_members(rest.atoms, rest.children)
    
    return _rebuild(graph, parent_path, remove)


def erase(graph: Graph, path: Sequence[int]) -> Graph:
    """
    Remove the element at path from its parent level.
    
    Legality is not checked here; validate against possible_erasures().
    
    Raises:
        InvalidPath: If path is empty or out of range
    """
    path = _as_path(path)
    result = _remove_member(graph, path, "erase")
    logger.debug("erase at %s: %s -> %s", list(path), graph, result)
    return result


def deiterate(graph: Graph, path: Sequence[int]) -> Graph:
    """
    Remove a duplicate element at path.
    
    Same mechanics as erase(); path should come from possible_deiterations().
    
    Raises:
        InvalidPath: If path is empty or out of range
    """
    path = _as_path(path)
    result = _remove_member(graph, path, "deiterate")
    logger.debug("deiterate at %s: %s -> %s", list(path), graph, result)
    return result
