"""Runs the boilerplate setup steps in order."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from .config import SetupConfig, load_config
from .context import SetupContext
from .dependencies import DependencyManager
from .errors import UncommittedChangesError
from .files import reset_changelog, update_license
from .git import GitCommitter, resolve_repository_info
from .logging import get_logger
from .manifest import load_manifest, rewrite_manifest, sync_engine_version, write_manifest
from .models import PromptAnswers
from .notes import NoteRenderer
from .prompting import PromptCancelled, TerminalPrompter, collect_answers
from .prompting.terminal import link
from .shell import CommandRunner, run_command

TITLE = "Setup for Awesome VSCode Boilerplate"
UNCOMMITTED_MESSAGE = "please commit the git changes before you run setup!"


@dataclass
class SetupOutcome:
    """Result of a setup run."""

    cancelled: bool
    answers: Optional[PromptAnswers] = None
    steps: List[str] = field(default_factory=list)


class Orchestrator:
    """Coordinates the prompt flow and the file, dependency and git steps."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        prompter: TerminalPrompter | None = None,
        committer: GitCommitter | None = None,
        notes: NoteRenderer | None = None,
        *,
        block_on_uncommitted: bool | None = None,
    ) -> None:
        self.runner = runner or run_command
        self.prompter = prompter or TerminalPrompter()
        self.committer = committer or GitCommitter(self.runner)
        self.notes = notes or NoteRenderer(link=link)
        self.block_on_uncommitted = block_on_uncommitted
        self.logger = get_logger("orchestrator")

    def run(self, path: str = ".") -> SetupOutcome:
        """Customize the boilerplate repository at ``path``."""
        root = Path(path).expanduser().resolve()
        self.logger.info("Starting setup for %s", root)
        config = load_config(root)
        if self.block_on_uncommitted is not None:
            config.block_on_uncommitted = self.block_on_uncommitted

        self._check_working_tree(root, config)
        context = self._build_context(root, config)

        self.prompter.intro(TITLE)
        try:
            answers = collect_answers(
                self.prompter,
                context.repository,
                installed=context.installed,
                install_command=config.commands.install,
            )
        except PromptCancelled as exc:
            self._report_cancellation(exc)
            return SetupOutcome(cancelled=True)

        outcome = SetupOutcome(cancelled=False, answers=answers)
        self._run_steps(context, answers, outcome.steps)

        self.prompter.note(self.notes.next_steps(), "Check following before publish")
        self.prompter.outro(f"Problems? {link(context.bugs_url)}")
        self.logger.info("Setup finished after %d steps", len(outcome.steps))
        return outcome

    # ------------------------------------------------------------------
    # Steps

    def _check_working_tree(self, root: Path, config: SetupConfig) -> None:
        if not self.committer.has_uncommitted_changes(root):
            return
        if config.block_on_uncommitted:
            raise UncommittedChangesError(UNCOMMITTED_MESSAGE)
        self.prompter.warn(UNCOMMITTED_MESSAGE)
        self.logger.warning("Working tree has uncommitted changes; continuing")

    def _build_context(self, root: Path, config: SetupConfig) -> SetupContext:
        repository = resolve_repository_info(root, self.runner)
        manifest = load_manifest(config.manifest_path)
        dependencies = self._dependencies(root, config)
        return SetupContext(
            root=root,
            config=config,
            repository=repository,
            manifest=manifest,
            installed=dependencies.installed(),
            runner=self.runner,
        )

    def _dependencies(
        self,
        root: Path,
        config: SetupConfig,
        runner: CommandRunner | None = None,
    ) -> DependencyManager:
        return DependencyManager(
            root,
            runner or self.runner,
            install_command=config.commands.install,
            upgrade_command=config.commands.upgrade,
        )

    def _run_steps(
        self,
        context: SetupContext,
        answers: PromptAnswers,
        completed: List[str],
    ) -> None:
        config = context.config
        dependencies = self._dependencies(context.root, config, context.runner)

        def rewrite() -> None:
            context.manifest = rewrite_manifest(context.manifest, answers, context.repository)
            write_manifest(config.manifest_path, context.manifest)

        self._run_step(completed, "replace boilerplate code in package.json", rewrite)
        self._run_step(
            completed,
            f"empty the {config.files.changelog}",
            lambda: reset_changelog(config.changelog_path),
        )
        self._run_step(
            completed,
            f"update year and owner in {config.files.license}",
            lambda: update_license(config.license_path, context.repository.author_name),
        )

        if answers.install_deps:
            self._run_step(
                completed,
                f"install deps by {config.commands.install}",
                dependencies.install,
            )

        if answers.update_deps:
            self._run_step(
                completed,
                f"update deps by {config.commands.upgrade}",
                dependencies.upgrade,
            )
            self._run_step(
                completed,
                "sync engines.vscode with upgraded deps",
                lambda: self._sync_engine(context),
            )

        if answers.commit:
            self._run_step(
                completed,
                "git add and git commit",
                lambda: self.committer.commit_all(context.root, message=config.commit_message),
            )

    def _sync_engine(self, context: SetupContext) -> None:
        path = context.config.manifest_path
        manifest = load_manifest(path)
        if sync_engine_version(manifest, context.config.engine_dependency):
            write_manifest(path, manifest)
        context.manifest = manifest

    def _run_step(self, completed: List[str], message: str, task: Callable[[], object]) -> None:
        self.prompter.step_started(message)
        self.logger.debug("Step started: %s", message)
        task()
        self.prompter.step_finished(message)
        completed.append(message)

    def _report_cancellation(self, exc: PromptCancelled) -> None:
        if not isinstance(exc.results.get("install_deps"), bool):
            self.prompter.note(self.notes.useful_links(), "Some useful Links")
        self.prompter.cancel("Operation cancelled.")
        self.logger.info("Setup cancelled by user")


__all__ = ["Orchestrator", "SetupOutcome"]
