# aegraph
# Alpha Existential Graphs: representation and single-step inference rules

"""
Peirce's Alpha Existential Graphs as immutable, canonical tree values.

Text is parsed once into a Graph; rule enumerators list every path at
which double cut, erasure or deiteration legally applies, and rule
appliers produce new graphs from a graph and a path.
"""

from .errors import AEGraphError, InvalidPath, MalformedInput
from .grammar import parse, parse_cut, serialize, split_level
from .graph import Graph, Path, equals
from .rules import (
    Rule,
    apply_rule,
    deiterate,
    double_cut,
    enumerate_moves,
    erase,
    insert_double_cut,
    possible_deiterations,
    possible_double_cuts,
    possible_erasures,
)

__version__ = "0.1.0"
