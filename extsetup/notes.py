"""Rendering of the informational notes shown around a setup run."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from jinja2 import Environment, FileSystemLoader

USEFUL_LINKS: tuple[str, ...] = (
    "https://code.visualstudio.com/api/references/extension-manifest",
    "https://docs.npmjs.com/cli/v7/configuring-npm/package-json",
)
PUBLISH_GUIDE_URL = "https://github.com/tjx666/awesome-vscode-extension-boilerplate#publish"
RELEASE_PERMISSION_URL = "https://github.com/antfu/changelogithub/issues/24"


class NoteRenderer:
    """Renders note bodies from the bundled Jinja templates."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        link: Callable[[str], str] | None = None,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        self._env.filters["link"] = link or (lambda url: url)

    def useful_links(self, links: Sequence[str] = USEFUL_LINKS) -> str:
        return self._render("useful_links.j2", links=list(links))

    def next_steps(
        self,
        *,
        publish_url: str = PUBLISH_GUIDE_URL,
        release_permission_url: str = RELEASE_PERMISSION_URL,
    ) -> str:
        return self._render(
            "next_steps.j2",
            publish_url=publish_url,
            release_permission_url=release_permission_url,
        )

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context).strip("\n")


__all__ = ["NoteRenderer", "PUBLISH_GUIDE_URL", "RELEASE_PERMISSION_URL", "USEFUL_LINKS"]
