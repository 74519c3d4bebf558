# CLI package for aegraph
"""
Read-only command-line interface for exploring inference rules.

Commands:
    aegraph show   — Show a graph in canonical form
    aegraph moves  — List every legal rule application
    aegraph apply  — Apply one rule at a path
"""
