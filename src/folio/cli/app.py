"""Typer application for Folio."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from folio.core.config import FolioConfig
from folio.core.config_loader import ConfigLoader
from folio.core.exceptions import FolioError
from folio.core.logging import setup_logging
from folio.core.types import Source
from folio.pagination.generator import PaginationGenerator
from folio.pagination.permalinks import rewrite_permalink
from folio.permalinks.factory import SourcePermalinkFactory
from folio.providers.builtin import StaticDataProvider
from folio.providers.manager import DataProviderManager

app = typer.Typer(
    name="folio",
    help="Pagination for static-content build pipelines",
    add_completion=False,
)

console = Console()

SiteRootOption = Annotated[
    Path | None,
    typer.Option("--site-root", help="Site root containing .folio/config.yml (defaults to cwd)."),
]


def _load_config(site_root: Path | None) -> FolioConfig:
    try:
        config = ConfigLoader(site_root).load()
    except FolioError as exc:
        console.print(f"[bold red]Error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    setup_logging(config.logging.level, config.logging.file, console=console)
    return config


@app.command()
def preview(
    items: Annotated[int, typer.Option("--items", min=0, help="Number of synthetic items to paginate.")] = 25,
    per_page: Annotated[
        int | None, typer.Option("--per-page", help="Items per page (defaults to the configured value).")
    ] = None,
    permalink: Annotated[str, typer.Option("--permalink", help="Output path of the first page.")] = "index.html",
    site_root: SiteRootOption = None,
) -> None:
    """
    Paginate synthetic items and show the resulting pages.
    """
    config = _load_config(site_root)

    providers = DataProviderManager({"posts": StaticDataProvider(f"item-{n}" for n in range(1, items + 1))})
    pagination: dict[str, object] = {}
    if per_page is not None:
        pagination["max_per_page"] = per_page
    source = Source("preview", permalink, data={"permalink": permalink, "pagination": pagination})

    try:
        generator = PaginationGenerator(
            providers,
            SourcePermalinkFactory(config.permalinks.default),
            config.pagination.max_per_page,
            default_provider=config.pagination.default_provider,
        )
        pages = generator.generate(source)
    except FolioError as exc:
        console.print(f"[bold red]Error:[/] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"{len(pages)} page(s)")
    table.add_column("Page", justify="right")
    table.add_column("Permalink")
    table.add_column("Items", justify="right")
    table.add_column("Previous")
    table.add_column("Next")
    for page in pages:
        state = page.data.pagination
        table.add_row(
            str(state.page),
            page.data.get("permalink"),
            str(len(state.items or {})),
            state.previous_page.source_id if state.previous_page else "-",
            state.next_page.source_id if state.next_page else "-",
        )
    console.print(table)


@app.command()
def rewrite(
    permalink: Annotated[str, typer.Argument(help="Output path of the first page.")],
    page: Annotated[int, typer.Argument(min=2, help="Page number (2 or more).")],
) -> None:
    """
    Print the output path of a later page.
    """
    console.print(rewrite_permalink(permalink, page), highlight=False)


@app.command("config")
def show_config(site_root: SiteRootOption = None) -> None:
    """
    Show the effective configuration.
    """
    config = _load_config(site_root)
    table = Table(title="Effective configuration")
    table.add_column("Setting")
    table.add_column("Value")
    for section, values in config.model_dump(mode="json").items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
