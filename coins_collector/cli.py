"""CLI interface for coins-collector."""

import json
import logging
from typing import Optional

import requests
import typer
from rich.console import Console

from .collector import Collector
from .config import Config
from .errors import CoinsError

app = typer.Typer(
    name="coins-collector",
    help="Extract COinS citation metadata from HTML and XML pages.",
    no_args_is_help=True,
)
console = Console()

SOURCE_HELP = "Path or http(s) URL of the page to scan."
XML_HELP = "Parse the source as XML instead of HTML."
LENIENT_HELP = "Skip malformed ContextObject pairs instead of failing."
VERBOSE_HELP = "Verbose logging."
OUTPUT_FORMATS = ("json", "text")


def _setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _collect(source: str, xml: bool, lenient: bool, config: Config) -> Collector:
    """Load ``source`` into a collector, exiting with code 1 on failure."""
    collector = Collector(strict=config.strict and not lenient)
    try:
        if source.startswith(("http://", "https://")):
            collector.load_url(source, xml=xml, timeout=config.timeout)
        else:
            collector.load_file(source, xml=xml)
    except (CoinsError, OSError, requests.RequestException) as e:
        console.print(f"[red]Failed to load {source}: {e}[/red]")
        raise typer.Exit(1)

    if not len(collector):
        console.print("[yellow]No COinS spans found.[/yellow]")
    return collector


def _emit(text: str):
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


@app.command()
def raw(
    source: str = typer.Argument(help=SOURCE_HELP),
    xml: bool = typer.Option(False, "--xml", help=XML_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Print the raw ContextObject of each COinS span."""
    _setup_logging(verbose)
    collector = _collect(source, xml, False, Config.load())
    for ctx in collector.get_raw_context_objects():
        _emit(ctx)


@app.command()
def openurls(
    source: str = typer.Argument(help=SOURCE_HELP),
    resolver: str = typer.Option("", "--resolver", "-r", help="OpenURL resolver base URL."),
    xml: bool = typer.Option(False, "--xml", help=XML_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Print an OpenURL for each COinS span."""
    _setup_logging(verbose)
    config = Config.load()
    base_url = resolver or config.resolver_url
    if not base_url:
        console.print("[red]No resolver configured. Pass --resolver or set it with:[/red]")
        console.print("  coins-collector config-cmd --resolver https://resolver.example.edu/openurl")
        raise typer.Exit(1)

    collector = _collect(source, xml, False, config)
    for url in collector.get_open_urls(base_url):
        _emit(url)


@app.command()
def fields(
    source: str = typer.Argument(help=SOURCE_HELP),
    xml: bool = typer.Option(False, "--xml", help=XML_HELP),
    lenient: bool = typer.Option(False, "--lenient", help=LENIENT_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Print the decoded key-value pairs of each COinS span as JSON."""
    _setup_logging(verbose)
    collector = _collect(source, xml, lenient, Config.load())
    try:
        decoded = collector.get_decoded_fields()
    except CoinsError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    _emit(json.dumps(decoded, indent=2, ensure_ascii=False))


@app.command()
def metadata(
    source: str = typer.Argument(help=SOURCE_HELP),
    format: str = typer.Option("json", "--format", "-f", help="Output format: json, text."),
    xml: bool = typer.Option(False, "--xml", help=XML_HELP),
    lenient: bool = typer.Option(False, "--lenient", help=LENIENT_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_HELP),
):
    """Print the referent metadata of each COinS span."""
    _setup_logging(verbose)
    if format not in OUTPUT_FORMATS:
        console.print(f"[red]Unknown format: {format}. Use 'json' or 'text'.[/red]")
        raise typer.Exit(1)

    collector = _collect(source, xml, lenient, Config.load())
    try:
        records = collector.get_metadata_records()
    except CoinsError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if format == "text":
        _emit("\n\n".join(record.to_text() for record in records))
    else:
        _emit(json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False))


@app.command()
def config_cmd(
    show: bool = typer.Option(True, "--show", help="Show current config."),
    set_resolver: str = typer.Option("", "--resolver", help="Set default OpenURL resolver base URL."),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Fail on, or skip, malformed ContextObject pairs."
    ),
):
    """View or update configuration."""
    cfg = Config.load()

    if set_resolver:
        cfg.resolver_url = set_resolver
        cfg.save()
        console.print(f"[green]Resolver set to: {set_resolver}[/green]")

    if strict is not None:
        cfg.strict = strict
        cfg.save()
        console.print(f"[green]Strict decoding: {strict}[/green]")

    if show and not set_resolver and strict is None:
        console.print("[bold]Current configuration:[/bold]")
        console.print(f"  Resolver:  {cfg.resolver_url or '(not set)'}")
        console.print(f"  Strict:    {cfg.strict}")
        console.print(f"  Timeout:   {cfg.timeout}")


if __name__ == "__main__":
    app()
