"""
Tests for the aegraph CLI.

These tests verify:
1. CLI command correctness
2. Bad input is reported, not raised
3. Path text round-trips
"""

import argparse

import pytest

from aegraph.cli.main import (
    cmd_apply,
    cmd_moves,
    cmd_show,
    create_parser,
    format_path,
    main,
    parse_path,
)


# =============================================================================
# PATH TEXT
# =============================================================================

class TestPathText:
    """Test path parsing and formatting."""
    
    def test_parse_path(self):
        assert parse_path("0,1") == (0, 1)
        assert parse_path(" 2 , 0 ") == (2, 0)
        assert parse_path("3") == (3,)
    
    def test_empty_path(self):
        assert parse_path("-") == ()
        assert parse_path("") == ()
    
    @pytest.mark.parametrize("text", ["a", "0,,1", "-1", "1.5"])
    def test_invalid_path(self, text):
        with pytest.raises(ValueError):
            parse_path(text)
    
    def test_format_round_trips(self):
        for path in [(), (0,), (1, 0, 2)]:
            assert parse_path(format_path(path)) == path


# =============================================================================
# CLI COMMANDS
# =============================================================================

class TestCLICommands:
    """Test CLI commands."""
    
    def test_show(self, capsys):
        args = argparse.Namespace(graph="(A, [B])")
        
        assert cmd_show(args) == 0
        
        captured = capsys.readouterr()
        assert "([B], A)" in captured.out
        assert "Size:      2" in captured.out
    
    def test_show_malformed(self, capsys):
        args = argparse.Namespace(graph="(A, [B)")
        
        assert cmd_show(args) == 1
        
        captured = capsys.readouterr()
        assert "ERROR" in captured.out
    
    def test_moves(self, capsys):
        args = argparse.Namespace(graph="(A, [A])", rule=None)
        
        assert cmd_moves(args) == 0
        
        captured = capsys.readouterr()
        assert "DOUBLE_CUT (0)" in captured.out
        assert "ERASURE (2)" in captured.out
        assert "DEITERATION (1)" in captured.out
        assert "0,0" in captured.out
    
    def test_moves_single_rule(self, capsys):
        args = argparse.Namespace(graph="([[A]])", rule="double_cut")
        
        assert cmd_moves(args) == 0
        
        captured = capsys.readouterr()
        assert "DOUBLE_CUT (1)" in captured.out
        assert "ERASURE" not in captured.out
    
    def test_apply(self, capsys):
        args = argparse.Namespace(
            rule="double_cut", graph="([[A]])", path="0", unchecked=False,
        )
        
        assert cmd_apply(args) == 0
        
        captured = capsys.readouterr()
        assert "After:  (A)" in captured.out
    
    def test_apply_illegal(self, capsys):
        args = argparse.Namespace(
            rule="erasure", graph="([A, B])", path="0,0", unchecked=False,
        )
        
        assert cmd_apply(args) == 1
        
        captured = capsys.readouterr()
        assert "ERROR" in captured.out
    
    def test_apply_unchecked(self, capsys):
        args = argparse.Namespace(
            rule="erasure", graph="([A, B])", path="0,0", unchecked=True,
        )
        
        assert cmd_apply(args) == 0
        
        captured = capsys.readouterr()
        assert "After:  ([B])" in captured.out
    
    def test_apply_bad_path_text(self, capsys):
        args = argparse.Namespace(
            rule="erasure", graph="(A)", path="x", unchecked=False,
        )
        
        assert cmd_apply(args) == 1


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

class TestMain:
    """Test argument parsing and dispatch."""
    
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        
        captured = capsys.readouterr()
        assert "aegraph" in captured.out
    
    def test_main_dispatches(self, capsys):
        assert main(["apply", "deiteration", "(A, [A])", "0,0"]) == 0
        
        captured = capsys.readouterr()
        assert "After:  ([], A)" in captured.out
    
    def test_main_verbose(self, capsys):
        assert main(["-v", "show", "(A)"]) == 0
    
    def test_unknown_rule_is_rejected(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["apply", "iteration", "(A)", "0"])
    
    def test_apply_requires_path(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["apply", "erasure", "(A)"])


# =============================================================================
# RUN TESTS
# =============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
