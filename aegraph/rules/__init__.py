# Inference rules for Alpha Existential Graphs
"""
Rule registry.

Groups each rule's legality enumerator with its applier so a driver can
list every legal move on a graph and apply one by name.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence, Union

from ..errors import InvalidPath
from ..graph import Graph, Path
from .appliers import deiterate, double_cut, erase, insert_double_cut
from .legality import (
    is_double_cut,
    is_positive_context,
    possible_deiterations,
    possible_double_cuts,
    possible_erasures,
)

logger = logging.getLogger(__name__)


class Rule(Enum):
    """Single-step inference rules that can be enumerated and applied."""
    DOUBLE_CUT = "double_cut"
    ERASURE = "erasure"
    DEITERATION = "deiteration"


ENUMERATORS = {
    Rule.DOUBLE_CUT: possible_double_cuts,
    Rule.ERASURE: possible_erasures,
    Rule.DEITERATION: possible_deiterations,
}

APPLIERS = {
    Rule.DOUBLE_CUT: double_cut,
    Rule.ERASURE: erase,
    Rule.DEITERATION: deiterate,
}


def enumerate_moves(graph: Graph) -> dict[Rule, list[Path]]:
    """Return the legal paths of every rule, keyed by rule."""
    return {rule: enumerate_fn(graph) for rule, enumerate_fn in ENUMERATORS.items()}


def apply_rule(
    graph: Graph,
    rule: Union[Rule, str],
    path: Sequence[int],
    check: bool = True,
) -> Graph:
    """
    Apply a rule at path.
    
    With check, the path must be one the rule's enumerator reports for
    this graph. Without it the applier's own structural checks still run.
    
    Raises:
        ValueError: If rule is not a known rule name
        InvalidPath: If the path is not a legal application of the rule
    """
    rule = Rule(rule)
    path = tuple(path)
    
    if check and path not in ENUMERATORS[rule](graph):
        raise InvalidPath(f"{rule.value} does not apply here", path)
    
    logger.debug("applying %s at %s", rule.value, list(path))
    return APPLIERS[rule](graph, path)


__all__ = [
    "APPLIERS",
    "ENUMERATORS",
    "Rule",
    "apply_rule",
    "deiterate",
    "double_cut",
    "enumerate_moves",
    "erase",
    "insert_double_cut",
    "is_double_cut",
    "is_positive_context",
    "possible_deiterations",
    "possible_double_cuts",
    "possible_erasures",
]
