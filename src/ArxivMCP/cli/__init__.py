"""CLI package for arxiv-mcp.

Click command definitions live in `ui`; `runner` handles logging, component
lifecycle and error handling for each command.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from ArxivMCP.cli.runner import CommandRunner
from ArxivMCP.cli.ui import cli


def main() -> None:
    """Run the arxiv-mcp CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
