"""Tests for extsetup.orchestrator."""

from __future__ import annotations

import json
from datetime import date

import pytest

from extsetup.errors import CommandError, RemoteURLError, UncommittedChangesError
from extsetup.orchestrator import Orchestrator
from tests._fixtures.boilerplate import BoilerplateRepo, RecordingRunner, ScriptedPrompter

CANCEL = ScriptedPrompter.CANCEL


def _full_answers(*, install: bool = False, update: bool = False, commit: bool = False) -> list:
    answers: list = [None, None, "Says hello", None, None, None, "hello, greeting", "Themes", install]
    if install:
        # the upgrade question is only asked when dependencies will be installed
        answers.append(update)
    answers.append(commit)
    return answers


def test_run_rewrites_files_and_commits(boilerplate: BoilerplateRepo) -> None:
    runner = RecordingRunner()
    prompter = ScriptedPrompter(_full_answers(install=False, commit=True))

    outcome = Orchestrator(runner=runner, prompter=prompter).run(str(boilerplate.root))

    assert outcome.cancelled is False
    assert outcome.steps == [
        "replace boilerplate code in package.json",
        "empty the CHANGELOG.md",
        "update year and owner in LICENSE",
        "git add and git commit",
    ]

    manifest = boilerplate.manifest()
    assert manifest["name"] == "hello-ext"
    assert manifest["displayName"] == "Hello Ext"
    assert manifest["keywords"] == ["hello", "greeting"]
    assert manifest["categories"] == ["Themes"]
    assert manifest["repository"]["url"] == "https://github.com/octocat/hello-ext"
    assert boilerplate.read("package.json").startswith('{\n    "name"')

    assert boilerplate.read("CHANGELOG.md") == (
        "<!-- markdownlint-disable MD024 -->\n<!-- generated by changelogithub -->\n"
    )
    assert f"Copyright (c) {date.today().year} Octo Cat" in boilerplate.read("LICENSE")

    assert runner.commands()[-2:] == ["git add -A", "git commit -m chore: setup boilerplate"]
    assert "pnpm install" not in runner.commands()


def test_run_installs_upgrades_and_syncs_engine(boilerplate: BoilerplateRepo) -> None:
    def simulate_upgrade() -> None:
        manifest = boilerplate.manifest()
        manifest["devDependencies"]["@types/vscode"] = "^1.84.0"
        boilerplate.write_manifest(manifest)

    runner = RecordingRunner(on_call={("npx", "--yes", "taze"): simulate_upgrade})
    prompter = ScriptedPrompter(_full_answers(install=True, update=True, commit=False))

    outcome = Orchestrator(runner=runner, prompter=prompter).run(str(boilerplate.root))

    assert "install deps by pnpm install" in outcome.steps
    assert "update deps by npx --yes taze" in outcome.steps
    assert runner.commands().index("pnpm install") < runner.commands().index("npx --yes taze")
    assert boilerplate.manifest()["engines"]["vscode"] == "^1.84.0"
    assert not any(command.startswith("git commit") for command in runner.commands())


def test_cancel_leaves_files_untouched(boilerplate: BoilerplateRepo) -> None:
    before = boilerplate.snapshot()
    runner = RecordingRunner()
    prompter = ScriptedPrompter([None, None, "desc", CANCEL])

    outcome = Orchestrator(runner=runner, prompter=prompter).run(str(boilerplate.root))

    assert outcome.cancelled is True
    assert outcome.steps == []
    assert boilerplate.snapshot() == before
    assert not any(command.startswith("git add") for command in runner.commands())


def test_cancel_shows_links_only_before_install_choice(boilerplate: BoilerplateRepo) -> None:
    notes: list[str] = []

    class NotingPrompter(ScriptedPrompter):
        def note(self, body: str, title: str) -> None:
            notes.append(title)

    early = NotingPrompter([None, CANCEL])
    Orchestrator(runner=RecordingRunner(), prompter=early).run(str(boilerplate.root))
    assert notes == ["Some useful Links"]

    notes.clear()
    late = NotingPrompter([None, None, "d", None, None, None, "k", None, True, CANCEL])
    Orchestrator(runner=RecordingRunner(), prompter=late).run(str(boilerplate.root))
    assert notes == []


def test_invalid_remote_aborts_before_prompts(boilerplate: BoilerplateRepo) -> None:
    before = boilerplate.snapshot()
    prompter = ScriptedPrompter([])

    with pytest.raises(RemoteURLError):
        Orchestrator(runner=RecordingRunner(remote="https://github.com/o/r.git"), prompter=prompter).run(
            str(boilerplate.root)
        )

    assert prompter.asked == []
    assert boilerplate.snapshot() == before


def test_uncommitted_changes_warn_by_default(boilerplate: BoilerplateRepo) -> None:
    warnings: list[str] = []

    class WarningPrompter(ScriptedPrompter):
        def warn(self, message: str) -> None:
            warnings.append(message)

    prompter = WarningPrompter([None, CANCEL])
    runner = RecordingRunner(status=" M package.json\n")

    outcome = Orchestrator(runner=runner, prompter=prompter).run(str(boilerplate.root))

    assert outcome.cancelled is True
    assert warnings == ["please commit the git changes before you run setup!"]


def test_uncommitted_changes_block_when_configured(boilerplate: BoilerplateRepo) -> None:
    boilerplate.write({".extsetup.yml": "block_on_uncommitted: true\n"})
    runner = RecordingRunner(status="?? notes.txt\n")

    with pytest.raises(UncommittedChangesError):
        Orchestrator(runner=runner, prompter=ScriptedPrompter([])).run(str(boilerplate.root))

    # flag override wins over the config file
    outcome = Orchestrator(
        runner=runner,
        prompter=ScriptedPrompter([CANCEL]),
        block_on_uncommitted=False,
    ).run(str(boilerplate.root))
    assert outcome.cancelled is True


def test_failing_step_stops_later_steps(boilerplate: BoilerplateRepo) -> None:
    def fail_install() -> None:
        raise CommandError(["pnpm", "install"], 1, "network down")

    runner = RecordingRunner(on_call={("pnpm", "install"): fail_install})
    prompter = ScriptedPrompter(_full_answers(install=True, update=True, commit=True))

    with pytest.raises(CommandError, match="network down"):
        Orchestrator(runner=runner, prompter=prompter).run(str(boilerplate.root))

    assert "npx --yes taze" not in runner.commands()
    assert not any(command.startswith("git add") for command in runner.commands())
    # earlier writes are not rolled back
    assert json.loads(boilerplate.read("package.json"))["name"] == "hello-ext"


def test_installed_dependencies_skip_install_question(boilerplate: BoilerplateRepo) -> None:
    (boilerplate.root / "node_modules").mkdir()
    prompter = ScriptedPrompter([None, None, "d", None, None, None, "k", None, False, False])

    outcome = Orchestrator(runner=RecordingRunner(), prompter=prompter).run(str(boilerplate.root))

    assert outcome.answers is not None
    assert outcome.answers.install_deps is False
    assert all(message != "Pnpm install?" for message, _ in prompter.asked)
