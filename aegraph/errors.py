"""
Error types for the aegraph engine.

Two failure kinds exist, both caused by bad caller input:
    MalformedInput — text (or atom token) that does not match the grammar
    InvalidPath    — a path that does not address a suitable member

All operations are deterministic pure computations, so there is nothing
to retry. Errors propagate to the caller; only the CLI catches them.
"""

from __future__ import annotations

from typing import Optional, Sequence


class AEGraphError(Exception):
    """Base class for all aegraph errors."""
    pass


class MalformedInput(AEGraphError):
    """Raised when graph text or an atom token violates the grammar."""
    
    def __init__(self, reason: str, text: Optional[str] = None):
        self.reason = reason
        self.text = text
        if text is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason}: {text!r}")


class InvalidPath(AEGraphError):
    """
    Raised when a path is out of range for a graph, descends through an
    atom, or does not satisfy a rule's structural precondition.
    """
    
    def __init__(self, reason: str, path: Optional[Sequence[int]] = None):
        self.reason = reason
        self.path = tuple(path) if path is not None else None
        if self.path is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (path: {list(self.path)})")
