"""Command runner for coordinating CLI execution.

Manages logging configuration, component lifecycle and error handling for
each CLI action.
"""

from __future__ import annotations

from pathlib import Path

import click

from ArxivMCP.config import AppConfig
from ArxivMCP.core.query import SearchCriteria
from ArxivMCP.renderers.json import dumps_results
from ArxivMCP.services import create_search_service
from ArxivMCP.utils.log import configure_logging, log


class CommandRunner:
    """Runs CLI actions with logging set up and failures mapped to `click.Abort`."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if path is not None:
            log.debug("Logging %s to %s", action, path)

    def run_serve(self, action: str) -> None:
        """Start the MCP server and block until it stops.

        Raises:
            click.Abort: When the server fails to start or crashes.
        """
        from ArxivMCP.server import create_server, run_server

        self._configure_logging(action)
        service = create_search_service(self.config)
        try:
            server = create_server(self.config, service)
            run_server(server, self.config)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
        finally:
            service.close()

    def run_search(self, action: str, criteria: SearchCriteria) -> str:
        """Run one search and return the JSON result envelope.

        Raises:
            click.Abort: When composing or executing the search fails.
        """
        self._configure_logging(action)
        service = create_search_service(self.config)
        try:
            views = service.search(criteria)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
        finally:
            service.close()
        return dumps_results(views)

    def run_scrape_taxonomy(self, action: str, output: Path) -> None:
        """Regenerate the taxonomy JSON from the arXiv website.

        Raises:
            click.Abort: When fetching, parsing or writing fails.
        """
        from ArxivMCP.taxonomy.scraper import scrape_taxonomy

        self._configure_logging(action)
        try:
            scrape_taxonomy(output, timeout=self.config.arxiv.timeout)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
