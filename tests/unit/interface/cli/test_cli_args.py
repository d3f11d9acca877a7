from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI options to configuration keys.
2. Defaults for unset options.
3. Part selection choices.
"""

import pytest

from shelltree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_threshold_mapping():
    args = parse_args([
        "input.txt",
        "--ceiling", "10",
        "--capacity", "100",
        "--headroom", "20",
        "--max-depth", "8",
    ])

    assert args_to_overrides(args) == {
        "ceiling": 10,
        "capacity": 100,
        "headroom": 20,
        "max_depth": 8,
    }


def test_cli_defaults_are_none_in_overrides():
    args = parse_args(["input.txt"])

    assert args.transcript == "input.txt"
    assert args.part == "both"
    assert args.json_output is False
    assert args.print_tree is False
    assert set(args_to_overrides(args).values()) == {None}


def test_cli_flags():
    args = parse_args(["-", "-p", "two", "--json", "--print-tree", "--debug", "--use-defaults"])

    assert args.transcript == "-"
    assert args.part == "two"
    assert args.json_output is True
    assert args.print_tree is True
    assert args.debug is True
    assert args.use_defaults is True


def test_cli_rejects_unknown_part():
    with pytest.raises(SystemExit):
        parse_args(["input.txt", "--part", "three"])
