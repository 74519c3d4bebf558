"""
aegraph CLI — Read-Only Interface for Existential Graph Exercises.

Commands:
    aegraph show GRAPH                — Canonical form and sizes
    aegraph moves GRAPH [--rule R]    — Legal paths for each rule
    aegraph apply RULE GRAPH PATH     — Apply a rule and print the result

Graphs are given in the textual grammar, e.g. "(A, [B, [A]])".
Paths are comma-separated member indices, e.g. "0,1"; "-" is the
empty path. Every command parses its input fresh: nothing is stored
between invocations.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..errors import AEGraphError
from ..grammar import parse
from ..graph import Graph, Path
from ..rules import Rule, apply_rule, enumerate_moves

logger = logging.getLogger(__name__)

EMPTY_PATH_TOKENS = ("", "-")


# =============================================================================
# INPUT / OUTPUT FORMATTING
# =============================================================================

def parse_path(text: str) -> Path:
    """
    Parse a comma-separated path such as "0,2,1".
    
    Raises:
        ValueError: If any index is not a non-negative integer
    """
    text = text.strip()
    if text in EMPTY_PATH_TOKENS:
        return ()
    
    indices = []
    for token in text.split(","):
        token = token.strip()
        if not token.isdigit():
            raise ValueError(f"invalid path index: {token!r}")
        indices.append(int(token))
    return tuple(indices)


def format_path(path: Path) -> str:
    """Format a path the way parse_path() reads it."""
    if not path:
        return "-"
    return ",".join(str(index) for index in path)


def format_summary(graph: Graph) -> str:
    """Format a graph with its size accessors."""
    lines = [
        f"Graph:     {graph}",
        f"Size:      {graph.size}",
        f"Atoms:     {graph.num_atoms}",
        f"Subgraphs: {graph.num_subgraphs}",
    ]
    return "\n".join(lines)


def format_move(graph: Graph, path: Path) -> str:
    """Format one legal path with the member it addresses."""
    return f"  {format_path(path):<12} {graph.resolve(path)}"


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_show(args: argparse.Namespace) -> int:
    """Show a graph in canonical form."""
    try:
        graph = parse(args.graph)
    except AEGraphError as e:
        print("ERROR: Could not parse graph")
        print(f"Reason: {e}")
        return 1
    
    print(format_summary(graph))
    return 0


def cmd_moves(args: argparse.Namespace) -> int:
    """List every legal rule application."""
    try:
        graph = parse(args.graph)
    except AEGraphError as e:
        print("ERROR: Could not parse graph")
        print(f"Reason: {e}")
        return 1
    
    moves = enumerate_moves(graph)
    if args.rule is not None:
        moves = {Rule(args.rule): moves[Rule(args.rule)]}
    
    print(f"Legal moves for {graph}")
    print("=" * 50)
    
    for rule, paths in moves.items():
        print()
        print(f"{rule.value.upper()} ({len(paths)}):")
        if not paths:
            print("  (none)")
        for path in paths:
            print(format_move(graph, path))
    
    return 0


def cmd_apply(args: argparse.Namespace) -> int:
    """Apply one rule at a path and print the result."""
    try:
        graph = parse(args.graph)
        path = parse_path(args.path)
        result = apply_rule(graph, args.rule, path, check=not args.unchecked)
    except (AEGraphError, ValueError) as e:
        print(f"ERROR: Could not apply {args.rule}")
        print(f"Reason: {e}")
        return 1
    
    print(f"Before: {graph}")
    print(f"Rule:   {args.rule} at {format_path(path)}")
    print(f"After:  {result}")
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="aegraph",
        description="aegraph — Alpha Existential Graph inference rules",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    
    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )
    rule_names = [rule.value for rule in Rule]
    
    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Show a graph in canonical form",
    )
    show_parser.add_argument(
        "graph",
        help='Graph text, e.g. "(A, [B])"',
    )
    show_parser.set_defaults(func=cmd_show)
    
    # Moves command
    moves_parser = subparsers.add_parser(
        "moves",
        help="List every legal rule application",
    )
    moves_parser.add_argument(
        "graph",
        help='Graph text, e.g. "(A, [B])"',
    )
    moves_parser.add_argument(
        "--rule",
        choices=rule_names,
        help="Only list paths for this rule",
    )
    moves_parser.set_defaults(func=cmd_moves)
    
    # Apply command
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply a rule at a path",
    )
    apply_parser.add_argument(
        "rule",
        choices=rule_names,
        help="Rule to apply",
    )
    apply_parser.add_argument(
        "graph",
        help='Graph text, e.g. "(A, [B])"',
    )
    apply_parser.add_argument(
        "path",
        help='Comma-separated member indices, e.g. "0,1" ("-" for the root)',
    )
    apply_parser.add_argument(
        "--unchecked",
        action="store_true",
        help="Skip the legality check and only enforce the path's shape",
    )
    apply_parser.set_defaults(func=cmd_apply)
    
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
    
    if args.command is None:
        parser.print_help()
        return 0
    
    logger.debug("running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
