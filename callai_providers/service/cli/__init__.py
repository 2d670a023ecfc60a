"""Command-line entrypoint (``callai`` / ``python -m callai_providers``).

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

from typing import Optional

from .cli_actions import handle_ask, handle_models
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 on error).
    """
    args = build_parser().parse_args(argv)
    if args.cmd == "models":
        return handle_models(args)
    return handle_ask(args)


__all__ = ["main"]
