"""Terminal prompts and progress output backed by typer."""

from __future__ import annotations

from typing import Optional

import typer

from .flow import PromptCancelled

SUCCESS_SYMBOL = "✔"
STEP_SYMBOL = "◇"
BAR = "│"


def link(url: str) -> str:
    """Style a URL for terminal display."""
    return typer.style(url, fg=typer.colors.CYAN, underline=True)


class TerminalPrompter:
    """Interactive prompter; Ctrl-C or EOF at any prompt cancels the flow."""

    def text(self, message: str, *, default: Optional[str] = None) -> str:
        try:
            value = typer.prompt(
                typer.style(message, bold=True),
                default=default if default is not None else "",
                show_default=bool(default),
            )
        except typer.Abort as exc:
            raise PromptCancelled() from exc
        return str(value)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        try:
            return typer.confirm(typer.style(message, bold=True), default=default)
        except typer.Abort as exc:
            raise PromptCancelled() from exc

    def error(self, message: str) -> None:
        typer.secho(f"{BAR}  {message}", fg=typer.colors.YELLOW, err=True)

    # ------------------------------------------------------------------
    # Presentation

    def intro(self, title: str) -> None:
        typer.secho(f"┌  {title}", fg=typer.colors.CYAN, bold=True)

    def note(self, body: str, title: str) -> None:
        typer.echo(BAR)
        typer.secho(f"{STEP_SYMBOL}  {title}", bold=True)
        for line in body.splitlines():
            typer.echo(f"{BAR}  {line}")

    def step_started(self, message: str) -> None:
        typer.echo(f"{STEP_SYMBOL}  {message}...")

    def step_finished(self, message: str) -> None:
        typer.echo(f"{STEP_SYMBOL}  {message} " + typer.style(SUCCESS_SYMBOL, fg=typer.colors.GREEN))

    def warn(self, message: str) -> None:
        typer.secho(f"▲  {message}", fg=typer.colors.YELLOW, err=True)

    def cancel(self, message: str) -> None:
        typer.secho(f"└  {message}", fg=typer.colors.RED)

    def outro(self, message: str) -> None:
        typer.echo(f"└  {message}")


__all__ = ["TerminalPrompter", "link"]
