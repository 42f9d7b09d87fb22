"""Sequential question flow that collects setup answers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Sequence

from ..config import DEFAULT_INSTALL_COMMAND
from ..logging import get_logger
from ..models import PromptAnswers, RepositoryInfo
from .validators import (
    Validator,
    capital_case,
    parse_categories,
    required,
    split_list,
    validate_categories,
    validate_display_name,
    validate_keywords,
    validate_name,
)

Results = Mapping[str, Any]


class PromptCancelled(Exception):
    """Raised when the user aborts the prompt flow.

    ``results`` holds whatever was answered before the cancel so callers can
    decide which follow-up hints to show; the answers themselves are discarded.
    """

    def __init__(self, results: Optional[Results] = None) -> None:
        super().__init__("Operation cancelled.")
        self.results: Dict[str, Any] = dict(results or {})


class Prompter(Protocol):
    """Interactive input capability used by :class:`PromptFlow`."""

    def text(self, message: str, *, default: Optional[str] = None) -> str: ...

    def confirm(self, message: str, *, default: bool = True) -> bool: ...

    def error(self, message: str) -> None: ...


@dataclass(frozen=True)
class Question:
    """A single prompt with its initial value, validation and skip rule."""

    key: str
    message: str
    kind: str = "text"
    initial: Optional[Callable[[Results], Any]] = None
    validate: Optional[Validator] = None
    parse: Optional[Callable[[str], Any]] = None
    skip: Optional[Callable[[Results], bool]] = None


class PromptFlow:
    """Asks questions in order, re-asking until each answer validates."""

    def __init__(self, questions: Sequence[Question], prompter: Prompter) -> None:
        self.questions = tuple(questions)
        self.prompter = prompter
        self.logger = get_logger("prompting.flow")

    def run(self) -> Dict[str, Any]:
        results: Dict[str, Any] = {}
        for question in self.questions:
            try:
                results[question.key] = self._ask(question, results)
            except PromptCancelled as exc:
                raise PromptCancelled(results) from exc
        return results

    def _ask(self, question: Question, results: Results) -> Any:
        if question.skip is not None and question.skip(results):
            self.logger.debug("Skipping question %s", question.key)
            return False

        initial = question.initial(results) if question.initial else None
        if question.kind == "confirm":
            default_choice = True if initial is None else bool(initial)
            return self.prompter.confirm(question.message, default=default_choice)

        default = initial if initial else None
        while True:
            value = self.prompter.text(question.message, default=default)
            message = question.validate(value) if question.validate else None
            if message is None:
                break
            self.prompter.error(message)
            # re-offer the rejected input for editing
            default = value or None
        return question.parse(value) if question.parse else value


def build_questions(
    info: RepositoryInfo,
    *,
    installed: bool,
    install_command: str = DEFAULT_INSTALL_COMMAND,
) -> tuple[Question, ...]:
    """Return the setup questions for a repository."""

    return (
        Question(
            key="name",
            message="The name of the extension",
            initial=lambda _: info.repo_name,
            validate=validate_name,
        ),
        Question(
            key="display_name",
            message="The display name for the extension used in the Marketplace",
            initial=lambda results: capital_case(results["name"]),
            validate=validate_display_name,
        ),
        Question(
            key="description",
            message="A short description of what your extension is and does.",
            validate=required("description can't be empty"),
        ),
        Question(
            key="author_name",
            message="The name of author",
            initial=lambda _: info.author_name,
            validate=required("author name can't be empty"),
        ),
        Question(
            key="author_email",
            message="The email of author",
            initial=lambda _: info.author_email,
            validate=required("author email can't be empty"),
        ),
        Question(
            key="author_url",
            message="The personal homepage url of author",
            initial=lambda _: info.author_url,
            validate=required("author url can't be empty"),
        ),
        Question(
            key="keywords",
            message='An array of keywords to make it easier to find the extension, separated by comma: ","',
            validate=validate_keywords,
            parse=split_list,
        ),
        Question(
            key="categories",
            message="The categories you want to use for the extensions",
            initial=lambda _: "Other",
            validate=validate_categories,
            parse=parse_categories,
        ),
        Question(
            key="install_deps",
            message=f"{install_command.capitalize()}?",
            kind="confirm",
            skip=lambda _: installed,
        ),
        Question(
            key="update_deps",
            message="Upgrade deps?",
            kind="confirm",
            skip=lambda results: not (installed or results.get("install_deps")),
        ),
        Question(key="commit", message="Git commit?", kind="confirm"),
    )


def collect_answers(
    prompter: Prompter,
    info: RepositoryInfo,
    *,
    installed: bool,
    install_command: str = DEFAULT_INSTALL_COMMAND,
) -> PromptAnswers:
    """Run the full prompt flow and return typed answers."""
    questions = build_questions(info, installed=installed, install_command=install_command)
    results = PromptFlow(questions, prompter).run()
    return PromptAnswers(**results)


__all__ = [
    "PromptCancelled",
    "PromptFlow",
    "Prompter",
    "Question",
    "build_questions",
    "collect_answers",
]
