"""Interactive prompt flow for collecting setup answers."""

from .flow import PromptCancelled, PromptFlow, Prompter, Question, build_questions, collect_answers
from .terminal import TerminalPrompter

__all__ = [
    "PromptCancelled",
    "PromptFlow",
    "Prompter",
    "Question",
    "TerminalPrompter",
    "build_questions",
    "collect_answers",
]
