"""
Textual grammar for Alpha Existential Graphs.

    graph   := '(' level ')' | '[' level ']'
    level   := element (',' element)*        (possibly empty)
    element := atom | graph

The outermost pair is always the Sheet of Assertion '( )'; every nested
graph is a Cut '[ ]'. Atoms are trimmed tokens that may not be empty,
may not contain square brackets or commas, and may not start with '('
(that would be a nested sheet). Parentheses inside an atom, as in
"f(x)", are plain characters.

Text is read once, here. Everything downstream works on Graph values,
which canonicalize themselves on construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .errors import MalformedInput

if TYPE_CHECKING:
    from .graph import Graph


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

SHEET_BRACKETS = ("(", ")")
CUT_BRACKETS = ("[", "]")
ELEMENT_DELIMITER = ","
MEMBER_SEPARATOR = ", "

# Characters an atom token may never contain
RESERVED_ATOM_CHARS = frozenset("[],")

WHITESPACE = " \n\r\t"


# =============================================================================
# TOKENS
# =============================================================================

def check_atom(token: str) -> str:
    """
    Validate an atom token and return it trimmed.
    
    Raises:
        MalformedInput: If the token is empty or uses a reserved character
    """
    if not isinstance(token, str):
        raise MalformedInput(f"atom must be a string, got {type(token).__name__}")
    
    atom = token.strip(WHITESPACE)
    if not atom:
        raise MalformedInput("empty atom token", token)
    
    reserved = sorted(RESERVED_ATOM_CHARS.intersection(atom))
    if reserved:
        raise MalformedInput(
            f"atom contains reserved character(s) {''.join(reserved)}",
            token,
        )
    if atom.startswith(SHEET_BRACKETS[0]):
        raise MalformedInput("the sheet of assertion cannot be nested", token)
    return atom


def split_level(content: str) -> list[str]:
    """
    Split the content of one level into its element strings.
    
    A comma separates elements only at bracket depth zero; commas inside
    nested cuts belong to those cuts. Returned elements are trimmed.
    
    Raises:
        MalformedInput: If brackets are unbalanced
    """
    if not content.strip(WHITESPACE):
        return []
    
    elements = []
    depth = 0
    start = 0
    
    for i, char in enumerate(content):
        if char == CUT_BRACKETS[0]:
            depth += 1
        elif char == CUT_BRACKETS[1]:
            depth -= 1
            if depth < 0:
                raise MalformedInput(f"unexpected '{char}' at offset {i}", content)
        elif char == ELEMENT_DELIMITER and depth == 0:
            elements.append(content[start:i].strip(WHITESPACE))
            start = i + 1
    
    if depth != 0:
        raise MalformedInput("unbalanced brackets", content)
    
    elements.append(content[start:].strip(WHITESPACE))
    return elements


def render_node(is_sheet: bool, members: Iterable[str]) -> str:
    """Wrap already-rendered members in the bracket pair of the node kind."""
    left, right = SHEET_BRACKETS if is_sheet else CUT_BRACKETS
    return left + MEMBER_SEPARATOR.join(members) + right


# =============================================================================
# PARSER
# =============================================================================

def _parse_node(text: str, is_sheet: bool) -> Graph:
    """Parse one bracketed node whose kind is fixed by its context."""
    from .graph import Graph
    
    left, right = SHEET_BRACKETS if is_sheet else CUT_BRACKETS
    kind = "sheet of assertion" if is_sheet else "cut"
    
    if len(text) < 2 or text[0] != left or text[-1] != right:
        raise MalformedInput(f"{kind} must be enclosed in '{left} {right}'", text)
    
    atoms = []
    children = []
    for element in split_level(text[1:-1]):
        if element.startswith(CUT_BRACKETS[0]):
            children.append(_parse_node(element, is_sheet=False))
        else:
            atoms.append(check_atom(element))
    
    return Graph(is_sheet=is_sheet, atoms=tuple(atoms), children=tuple(children))


def parse(text: str) -> Graph:
    """
    Parse a whole graph, which must be a Sheet of Assertion.
    
    Example:
        >>> serialize(parse("( B, [A],A )"))
        '([A], A, B)'
    
    Raises:
        MalformedInput: On unbalanced or mismatched brackets, or a bad atom
    """
    if not isinstance(text, str):
        raise MalformedInput(f"graph text must be a string, got {type(text).__name__}")
    
    stripped = text.strip(WHITESPACE)
    if not stripped:
        raise MalformedInput("empty graph text", text)
    return _parse_node(stripped, is_sheet=True)


def parse_cut(text: str) -> Graph:
    """Parse a standalone cut, e.g. an operand for Graph.contains()."""
    if not isinstance(text, str):
        raise MalformedInput(f"cut text must be a string, got {type(text).__name__}")
    
    stripped = text.strip(WHITESPACE)
    if not stripped:
        raise MalformedInput("empty cut text", text)
    return _parse_node(stripped, is_sheet=False)


# =============================================================================
# SERIALIZER
# =============================================================================

def serialize(graph: Graph) -> str:
    """
    Canonical text of a graph: child cuts first, then atoms, joined by
    ", " and wrapped in the bracket pair of the node kind.
    """
    members = [serialize(child) for child in graph.children]
    members.extend(graph.atoms)
    return render_node(graph.is_sheet, members)
