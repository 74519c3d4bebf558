"""
Core graph value for Alpha Existential Graphs.

A Graph node is either the Sheet of Assertion (the root, positive
context) or a Cut (a negation boundary). Each node owns a tuple of atoms
and a tuple of child cuts.

INVARIANT:
    Canonical form is unique per logical graph. Atoms are sorted
    lexicographically and children by their own canonical text. This is
    done exactly once, in the constructor; children are canonical before
    they are handed to a parent, so the whole tree is canonical.

Graph values are frozen. Rule appliers build new values and never
mutate an existing one, so a graph can be shared freely between callers
and threads.

Members of a node are addressed by index: 0..num_subgraphs-1 select a
child cut, num_subgraphs..size-1 select an atom. A Path is a sequence of
such indices followed from the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union

from .errors import InvalidPath, MalformedInput
from .grammar import check_atom, render_node


Path = tuple[int, ...]
Member = Union["Graph", str]


@dataclass(frozen=True, eq=False)
class Graph:
    """
    An immutable Sheet of Assertion or Cut node.
    
    Equality, hashing and ordering use the canonical text, so two graphs
    compare equal iff they are the same logical graph.
    """
    is_sheet: bool = False
    atoms: tuple[str, ...] = ()
    children: tuple[Graph, ...] = ()
    
    # Canonical serialization, computed once at construction
    text: str = field(init=False, repr=False)
    
    def __post_init__(self):
        """Validate members and canonicalize."""
        atoms = tuple(sorted(check_atom(atom) for atom in self.atoms))
        
        for child in self.children:
            if not isinstance(child, Graph):
                raise MalformedInput(
                    f"children must be Graph values, got {type(child).__name__}"
                )
            if child.is_sheet:
                raise MalformedInput(
                    "the sheet of assertion cannot be nested", child.text
                )
        children = tuple(sorted(self.children, key=lambda child: child.text))
        
        object.__setattr__(self, "atoms", atoms)
        object.__setattr__(self, "children", children)
        object.__setattr__(
            self,
            "text",
            render_node(self.is_sheet, [child.text for child in children] + list(atoms)),
        )
    
    @classmethod
    def sheet(cls, atoms: Sequence[str] = (), children: Sequence[Graph] = ()) -> Graph:
        """Build a Sheet of Assertion."""
        return cls(is_sheet=True, atoms=tuple(atoms), children=tuple(children))
    
    @classmethod
    def cut(cls, atoms: Sequence[str] = (), children: Sequence[Graph] = ()) -> Graph:
        """Build a Cut."""
        return cls(is_sheet=False, atoms=tuple(atoms), children=tuple(children))
    
    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.text == other.text
    
    def __lt__(self, other: Graph) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.text < other.text
    
    def __hash__(self) -> int:
        return hash(self.text)
    
    def __str__(self) -> str:
        return self.text
    
    # -------------------------------------------------------------------------
    # Size accessors
    # -------------------------------------------------------------------------
    
    @property
    def num_atoms(self) -> int:
        return len(self.atoms)
    
    @property
    def num_subgraphs(self) -> int:
        return len(self.children)
    
    @property
    def size(self) -> int:
        """Number of direct members (child cuts plus atoms)."""
        return len(self.atoms) + len(self.children)
    
    # -------------------------------------------------------------------------
    # Member addressing
    # -------------------------------------------------------------------------
    
    def members(self) -> Iterator[tuple[int, Member]]:
        """Yield (index, member) pairs in address order: cuts, then atoms."""
        yield from enumerate(self.children)
        offset = len(self.children)
        for i, atom in enumerate(self.atoms):
            yield offset + i, atom
    
    def member(self, index: int) -> Member:
        """
        Return the child cut or atom at a member index.
        
        Raises:
            InvalidPath: If index is out of range
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidPath(f"member index must be an int, got {index!r}")
        if index < 0 or index >= self.size:
            raise InvalidPath(
                f"member index {index} out of range for level of size {self.size}",
                (index,),
            )
        if index < len(self.children):
            return self.children[index]
        return self.atoms[index - len(self.children)]
    
    def resolve(self, path: Sequence[int]) -> Member:
        """
        Follow a path from this node and return what it addresses.
        
        The empty path addresses this node itself.
        
        Raises:
            InvalidPath: If an index is out of range or the path
                         continues past an atom
        """
        node: Member = self
        for depth, index in enumerate(path):
            if not isinstance(node, Graph):
                raise InvalidPath(
                    f"cannot descend into atom '{node}'", path[:depth + 1]
                )
            try:
                node = node.member(index)
            except InvalidPath as e:
                raise InvalidPath(e.reason, path) from e
        return node
    
    def replace_members(
        self,
        atoms: Sequence[str],
        children: Sequence[Graph],
    ) -> Graph:
        """Build a node of the same kind with new members."""
        return Graph(is_sheet=self.is_sheet, atoms=tuple(atoms), children=tuple(children))
    
    # -------------------------------------------------------------------------
    # Structural queries
    # -------------------------------------------------------------------------
    
    def contains(self, item: Member) -> bool:
        """
        Check whether an atom or a cut occurs anywhere below this node.
        
        Atoms match by name; cuts match by canonical structural equality.
        A node does not contain itself.
        """
        if isinstance(item, str):
            if item in self.atoms:
                return True
        elif isinstance(item, Graph):
            if item in self.children:
                return True
        else:
            raise TypeError(f"can only search for atoms or graphs, got {type(item).__name__}")
        
        return any(child.contains(item) for child in self.children)
    
    def paths_to(self, target: Member, skip_singletons: bool = True) -> list[Path]:
        """
        Return every path at which target is a direct member of some node.
        
        With skip_singletons, an occurrence that is the only member of its
        level is not reported: on its own it cannot be told apart from the
        level that holds it.
        """
        if not isinstance(target, (str, Graph)):
            raise TypeError(f"can only search for atoms or graphs, got {type(target).__name__}")
        
        found = []
        reportable = self.size > 1 or not skip_singletons
        
        for index, member in self.members():
            if reportable and member == target:
                found.append((index,))
            if isinstance(member, Graph) and member.contains(target):
                for sub_path in member.paths_to(target, skip_singletons):
                    found.append((index,) + sub_path)
        
        return found


def equals(first: Graph, second: Graph) -> bool:
    """Compare two graphs by canonical form."""
    return first.text == second.text
