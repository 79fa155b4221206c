"""Terminal prompts and rendering of selection decisions."""

import sys
from typing import Callable, Iterable, Optional, Sequence

from ..core.selection import Decision, DecisionReason


def prompt_identifier(input_func: Callable[[str], str] = input) -> str:
    try:
        return input_func("Enter YouTube URL or Video ID: ").strip()
    except EOFError:
        return ""


def terminal_chooser(title: str, options: Sequence[str], default: int,
                     input_func: Callable[[str], str] = input, out=None) -> str:
    """Print a numbered menu and return the raw line typed by the user."""
    out = out or sys.stdout
    print(f"{title}:", file=out)
    for i, label in enumerate(options, start=1):
        print(f"{i}) {label}", file=out)
    try:
        return input_func(f"Select [1-{len(options)}, default: {default}]: ")
    except EOFError:
        return ""


def format_decision(decision: Decision) -> Optional[str]:
    """One user-facing line for a decision, or None if it needs no comment."""
    stream = decision.stream
    if decision.kind == "video":
        if decision.reason is DecisionReason.NO_VIDEO:
            return "No video streams available, defaulting to audio only."
        if decision.reason is DecisionReason.FALLBACK:
            return (f"Warning: Could not parse quality '{decision.requested}'. "
                    f"Playing highest available quality ('{stream.quality}') instead.")
        if decision.reason is DecisionReason.CLOSEST:
            return (f"Warning: Quality '{decision.requested}' not found. "
                    f"Playing closest available quality ('{stream.quality}') instead.")
        return None

    if decision.reason is DecisionReason.FALLBACK:
        return (f"Warning: Audio language '{decision.requested}' not found. "
                f"Using '{stream.name}' ({stream.language}) instead.")
    return None


def render_decisions(decisions: Iterable[Decision], out=None):
    out = out or sys.stdout
    for decision in decisions:
        line = format_decision(decision)
        if line:
            print(line, file=out)
