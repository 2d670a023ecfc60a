"""CLI parser construction for ``callai``.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse
from typing import Union

ThinkArg = Union[bool, int, str]


def parse_think(value: str) -> ThinkArg:
    """Convert a ``--think`` string into the generic thinking dial value.

    ``true``/``on``/``yes`` → ``True``, ``false``/``off``/``no`` → ``False``,
    digits → ``int``; anything else is passed through as a level name.
    """
    val = value.strip().lower()
    if val in {"true", "on", "yes"}:
        return True
    if val in {"false", "off", "no"}:
        return False
    if val.lstrip("-").isdigit():
        return int(val)
    return val


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser with ``ask`` and ``models`` subcommands."""
    p = argparse.ArgumentParser(prog="callai", description="Call chat models from several providers")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_ask = sub.add_parser("ask", help="Send a prompt to a model")
    p_ask.add_argument("prompt", help="User prompt text")
    p_ask.add_argument("--model", default=None, help="Model alias (default: mistral-small)")
    p_ask.add_argument("--provider", default=None, help="Provider id; resolved from the alias when omitted")
    p_ask.add_argument("--system", default=None, help="System instructions")
    p_ask.add_argument("--think", type=parse_think, default=None, help="true|false|low|medium|high|<budget>")
    p_ask.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    p_ask.add_argument("--temperature", type=float, default=None)
    p_ask.add_argument("--timeout", type=int, default=None, help="Timeout in milliseconds")
    p_ask.add_argument("--image", action="append", default=[], help="Image file to attach (repeatable)")
    p_ask.add_argument("--json", action="store_true", help="Print the full result as JSON")

    p_models = sub.add_parser("models", help="List model aliases")
    grp = p_models.add_mutually_exclusive_group()
    grp.add_argument("--vision", action="store_true", help="Only vision-capable models")
    grp.add_argument("--thinking", action="store_true", help="Only thinking-capable models")
    p_models.add_argument("--available", action="store_true", help="Only providers with a configured API key")
    p_models.add_argument("--json", action="store_true")
    return p


__all__ = ["build_parser", "parse_think"]
