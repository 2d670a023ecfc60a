"""CLI action handlers.

Handlers take parsed ``argparse`` namespaces and return process exit codes.
Failures are reported as one line on stderr with exit status 1; they never
raise. The caller/registry can be injected for tests.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...api import ChatCaller, build_request
from ...base.errors import ProviderError
from ...base.registry import ModelRegistry, get_registry


def build_messages(prompt: str, system: Optional[str] = None, images: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    """Build the message list for ``ask``; image files are attached as raw bytes."""
    messages: List[Dict[str, Any]] = []
    if system:
        messages.append({"role": "system", "content": system})
    if images:
        content: List[Any] = [{"type": "text", "text": prompt}]
        content.extend({"type": "image", "url": Path(p).read_bytes()} for p in images)
        messages.append({"role": "user", "content": content})
    else:
        messages.append({"role": "user", "content": prompt})
    return messages


def _option_fields(args: argparse.Namespace) -> Dict[str, Any]:
    fields = {
        "max_tokens": args.max_tokens,
        "temperature": args.temperature,
        "think": args.think,
        "timeout": args.timeout,
    }
    return {k: v for k, v in fields.items() if v is not None}


def handle_ask(args: argparse.Namespace, caller: Optional[ChatCaller] = None) -> int:
    """Run one call and print the reply text (or the JSON result)."""
    try:
        messages = build_messages(args.prompt, args.system, args.image)
        request = build_request(args.model, messages, provider=args.provider, **_option_fields(args))
        result = (caller or ChatCaller()).call(request)
    except (ProviderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(result.text)
    return 0


def handle_models(args: argparse.Namespace, registry: Optional[ModelRegistry] = None) -> int:
    """Print one alias per distinct model, optionally filtered."""
    reg = registry or get_registry()
    if args.vision:
        aliases = reg.available_vision_models() if args.available else reg.vision_models()
    elif args.thinking:
        aliases = reg.available_thinking_models() if args.available else reg.thinking_models()
    else:
        aliases = reg.available_models() if args.available else reg.unique_models()
    if args.json:
        print(json.dumps([{"alias": a, "provider": reg.resolve(a)} for a in aliases], indent=2))
    else:
        for alias in aliases:
            print(f"{alias}\t{reg.resolve(alias)}")
    return 0


__all__ = ["build_messages", "handle_ask", "handle_models"]
