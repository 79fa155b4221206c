"""Terminal UI for mpvyt."""

from .prompt import prompt_identifier, terminal_chooser, format_decision, render_decisions

__all__ = ["prompt_identifier", "terminal_chooser", "format_decision", "render_decisions"]
