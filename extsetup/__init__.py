"""Interactive setup for VS Code extension boilerplate repositories."""

__version__ = "0.1.0"
