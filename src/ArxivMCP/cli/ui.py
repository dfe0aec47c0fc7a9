"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from ArxivMCP.cli.runner import CommandRunner
from ArxivMCP.config import load_config
from ArxivMCP.core.query import SearchCriteria


@click.group(help="arxiv-mcp: arXiv search over the Model Context Protocol.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML file overriding the packaged defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config, so
    PORT and ARXIV_MCP_LOG_LEVEL can be set there.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("serve")
@click.pass_context
def serve_cmd(ctx: click.Context) -> None:
    """Run the MCP server on the configured transport."""
    CommandRunner(ctx.obj).run_serve(action=ctx.command.name)


@cli.command("search")
@click.option("--title", default="", help="Search within titles.")
@click.option("--author", default="", help="Search within author names.")
@click.option("--abstract", default="", help="Search within abstracts.")
@click.option("--category", "subject_category", default="", help="arXiv category tag, e.g. cs.AI.")
@click.option("--all", "all_text", default="", help="Search within title, author, abstract and category.")
@click.option("--id", "id_list", multiple=True, help="arXiv id to fetch; repeatable.")
@click.option("--since", "submitted_since", default="", help="Submitted on or after YYYY-MM-DD.")
@click.option("--before", "submitted_before", default="", help="Submitted before YYYY-MM-DD.")
@click.option("--relative", "submitted_relative", default="", help="Submitted within e.g. '7 days'.")
@click.option("--max", "max_results", type=int, default=0, help="Maximum results (default 20).")
@click.option("--field", "return_fields", multiple=True, help="Field to return; repeatable. Default: all.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    title: str,
    author: str,
    abstract: str,
    subject_category: str,
    all_text: str,
    id_list: tuple[str, ...],
    submitted_since: str,
    submitted_before: str,
    submitted_relative: str,
    max_results: int,
    return_fields: tuple[str, ...],
) -> None:
    """Run one arXiv search and print the JSON result."""
    criteria = SearchCriteria(
        title=title,
        author=author,
        abstract=abstract,
        subject_category=subject_category,
        all=all_text,
        id_list=id_list,
        submitted_since=submitted_since,
        submitted_before=submitted_before,
        submitted_relative=submitted_relative,
        max_results=max_results,
        return_fields=return_fields,
    )
    payload = CommandRunner(ctx.obj).run_search(action=ctx.command.name, criteria=criteria)
    click.echo(payload)


@cli.command("scrape-taxonomy")
@click.argument(
    "output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("arxiv-taxonomy.json"),
)
@click.pass_context
def scrape_taxonomy_cmd(ctx: click.Context, output: Path) -> None:
    """Fetch the arXiv category taxonomy page and write it as JSON."""
    CommandRunner(ctx.obj).run_scrape_taxonomy(action=ctx.command.name, output=output)
