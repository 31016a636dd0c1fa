"""Click CLI for the Habbo furnidata decoder."""
from __future__ import annotations

import logging
import time
from collections import Counter
from pathlib import Path
from typing import Optional

import click

from furnidata.furni.records import FurniItem
from furnidata.profiles import (
    load_config,
    resolve_url,
    save_config,
    validate_profile_name,
    Config,
    Profile,
)

OUTPUT_FORMATS = ["table", "json", "csv"]


class Context:
    """Holds the selected profile; the URL is resolved lazily per command."""

    def __init__(self, profile: str | None = None):
        self.profile = profile

    def url(self, explicit: str | None = None) -> str:
        return resolve_url(explicit, self.profile)


pass_ctx = click.make_pass_decorator(Context)


@click.group()
@click.option(
    "--profile", "-p", default=None, type=str,
    help="Named profile to use (from furnidata init)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="furnidata")
@click.pass_context
def cli(ctx, profile: Optional[str], verbose: bool):
    """furnidata - Habbo furnidata downloader and decoder.

    Fetch furnidata in either the XML or the legacy chunked text format
    and decode it into one uniform item list.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj = Context(profile=profile)


def _format_table(items: list[FurniItem]) -> str:
    lines = [f"{'ID':>7}  {'Kind':<4}  {'Class':<32}  {'Name'}", "-" * 80]
    for item in items:
        lines.append(f"{item.id:>7}  {item.kind:<4}  {item.class_id:<32}  {item.name}")
    return "\n".join(lines)


def _render(items: list[FurniItem], fmt: str) -> str:
    if fmt == "json":
        from furnidata.export.json_export import export_json
        return export_json(items)
    if fmt == "csv":
        from furnidata.export.csv_export import export_csv
        return export_csv(items)
    return _format_table(items)


def _emit(items: list[FurniItem], fmt: str, output: Optional[Path]):
    text = _render(items, fmt)
    if output is None:
        click.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    click.echo(f"Wrote {len(items):,} items to {output}")


def _decode_text(text: str) -> list[FurniItem]:
    from furnidata.furni.decoders import decode
    from furnidata.furni.errors import UndecodableDocument

    try:
        return decode(text)
    except UndecodableDocument as e:
        raise click.ClickException(str(e))


def _fetch(url: str) -> list[FurniItem]:
    from furnidata.fetch import FetchError, fetch_text

    try:
        text = fetch_text(url)
    except FetchError as e:
        raise click.ClickException(str(e))
    return _decode_text(text)


def _load(ctx: Context, file, url: Optional[str]) -> list[FurniItem]:
    """Items from a local file if given, else from the resolved URL."""
    if file is not None:
        return _decode_text(file.read())
    return _fetch(ctx.url(url))


@cli.command()
def init():
    """Set up config profiles for furnidata URLs (interactive)."""
    from furnidata.config import derive_furnidata_url

    config = load_config()

    if config.profiles:
        click.echo("Current profiles:")
        for name, p in config.profiles.items():
            default_marker = " (default)" if name == config.default_profile else ""
            click.echo(f"  {name}: {p.url}{default_marker}")
        click.echo()
        if not click.confirm("Overwrite existing configuration?", default=False):
            click.echo("Aborted.")
            return
        config = Config()

    click.echo("Set up furnidata profiles. Each profile stores a furnidata URL.\n")

    while True:
        default_name = "default" if not config.profiles else None
        name = click.prompt("Profile name", default=default_name).strip()
        if not validate_profile_name(name):
            click.echo(f"Invalid profile name '{name}'. Use letters, digits, hyphens, underscores.")
            continue

        url = click.prompt("Furnidata URL", default=derive_furnidata_url()).strip()
        config.profiles[name] = Profile(name=name, url=url)

        if len(config.profiles) == 1:
            config.default_profile = name
        else:
            if click.confirm(f"Set '{name}' as the default profile?", default=False):
                config.default_profile = name

        if not click.confirm("\nAdd another profile?", default=False):
            break
        click.echo()

    saved_path = save_config(config)
    click.echo(f"\nConfig saved to {saved_path}")


@cli.command()
@click.argument("url", required=False)
@click.option("--hotel", default=None, help="Hotel code (com, nl, de, ...) instead of a URL")
@click.option("--fmt", "wire_format", type=click.Choice(["xml", "txt"]), default="xml",
              show_default=True, help="Furnidata wire format to request with --hotel")
@click.option("--format", "-f", "fmt", type=click.Choice(OUTPUT_FORMATS), default="table")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
@pass_ctx
def fetch(ctx: Context, url: Optional[str], hotel: Optional[str], wire_format: str,
          fmt: str, output: Optional[Path]):
    """Download furnidata and decode it."""
    if url and hotel:
        raise click.UsageError("Cannot use both URL and --hotel. Choose one.")
    if hotel:
        from furnidata.config import derive_furnidata_url
        try:
            url = derive_furnidata_url(hotel, wire_format)
        except ValueError as e:
            raise click.UsageError(str(e))

    url = ctx.url(url)
    click.echo(f"Fetching {url}...", nl=False, err=True)
    t0 = time.perf_counter()
    items = _fetch(url)
    click.echo(f" {len(items):,} items in {time.perf_counter() - t0:.1f}s", err=True)
    _emit(items, fmt, output)


@cli.command("decode")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option("--format", "-f", "fmt", type=click.Choice(OUTPUT_FORMATS), default="table")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
def decode_file(file, fmt: str, output: Optional[Path]):
    """Decode a local furnidata file (XML or chunked text, '-' for stdin)."""
    items = _decode_text(file.read())
    _emit(items, fmt, output)


@cli.command()
@click.argument("item_id", type=int)
@click.argument("file", type=click.File("r", encoding="utf-8"), required=False)
@click.option("--url", default=None, help="Fetch from this URL instead of the profile")
@pass_ctx
def show(ctx: Context, item_id: int, file, url: Optional[str]):
    """Show full detail for every item with the given ID."""
    from furnidata.furni.mapping import FIELD_NAMES

    matches = [item for item in _load(ctx, file, url) if item.id == item_id]
    if not matches:
        click.echo(f"Item {item_id} not found.")
        return

    for item in matches:
        click.echo(f"Item {item.id} ({'floor' if item.is_floor_item else 'wall'})")
        for name in FIELD_NAMES:
            click.echo(f"  {name:<30} = {getattr(item, name)!r}")
        if item.file_name != item.class_id:
            click.echo(f"  {'file_name':<30} = {item.file_name!r}")


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), required=False)
@click.option("--url", default=None, help="Fetch from this URL instead of the profile")
@click.option("--top", default=10, show_default=True, help="Number of categories to list")
@pass_ctx
def stats(ctx: Context, file, url: Optional[str], top: int):
    """Summarize a furnidata catalog by kind and category."""
    items = _load(ctx, file, url)

    kinds = Counter("floor" if i.is_floor_item else "wall" if i.is_wall_item else i.kind or "(none)"
                    for i in items)
    categories = Counter(i.category or "(none)" for i in items)

    click.echo(f"Items: {len(items):,}")
    for kind, count in kinds.most_common():
        click.echo(f"  {kind:<10} {count:>8,}")
    click.echo(f"Rares: {sum(1 for i in items if i.is_rare):,}")

    click.echo(f"\nTop {top} categories:")
    for category, count in categories.most_common(top):
        click.echo(f"  {category:<30} {count:>8,}")


if __name__ == "__main__":
    cli()
