"""CLI entrypoint for extsetup."""

from __future__ import annotations

import argparse
from pathlib import Path

from .errors import SetupError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extsetup",
        description="Customize a cloned VS Code extension boilerplate repository.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write detailed logs to this file.",
    )
    dirty = parser.add_mutually_exclusive_group()
    dirty.add_argument(
        "--block-on-uncommitted",
        dest="block_on_uncommitted",
        action="store_true",
        default=None,
        help="Abort when the working tree has uncommitted changes.",
    )
    dirty.add_argument(
        "--allow-uncommitted",
        dest="block_on_uncommitted",
        action="store_false",
        default=None,
        help="Only warn about uncommitted changes (default unless configured).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for extsetup."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator(block_on_uncommitted=args.block_on_uncommitted)
    try:
        orchestrator.run(args.path)
    except (SetupError, OSError) as exc:
        parser.exit(1, f"extsetup failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
