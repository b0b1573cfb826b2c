"""CLI commands for the record catalog."""

from __future__ import annotations

import json

import click

from recordstore.application.create_record import CreateRecordHandler
from recordstore.application.delete_record import DeleteRecordHandler
from recordstore.application.dto import RecordDTO
from recordstore.application.list_records import ListRecordsHandler
from recordstore.application.lookup_release import LookupReleaseHandler
from recordstore.application.query import RecordQuery
from recordstore.application.show_record import ShowRecordHandler
from recordstore.application.update_record import UpdateRecordHandler
from recordstore.application.validation import parse_create_record, parse_update_record
from recordstore.domain.exceptions import DomainException
from recordstore.infrastructure.bootstrap import metadata_provider, record_repository


def _display_record(dto: RecordDTO) -> None:
    """Shared formatting for displaying one record."""
    click.echo(f"Record {dto.id}")
    click.echo(f"  Artist:    {dto.artist}")
    click.echo(f"  Album:     {dto.album}")
    click.echo(f"  Format:    {dto.format}")
    click.echo(f"  Category:  {dto.category}")
    click.echo(f"  Price:     ${dto.price:.2f}")
    click.echo(f"  In stock:  {dto.qty}")
    click.echo(f"  MBID:      {dto.mbid or '-'}")
    click.echo(f"  Modified:  {dto.last_modified:%Y-%m-%d %H:%M UTC}")
    if dto.tracklist:
        click.echo("  Tracks:")
        for number, title in enumerate(dto.tracklist, start=1):
            click.echo(f"    {number:>2}. {title}")


@click.command("add")
@click.option("--artist", required=True, help="Artist or band name.")
@click.option("--album", required=True, help="Album title.")
@click.option("--price", required=True, help="Unit price (e.g. 29.99).")
@click.option("--qty", required=True, help="Units in stock.")
@click.option("--format", "fmt", required=True, help="Vinyl, CD, Cassette or Digital.")
@click.option("--category", required=True, help="Genre, e.g. Rock or Jazz.")
@click.option("--mbid", default=None, help="MusicBrainz release ID to fetch tracks from.")
def record_add(
    artist: str, album: str, price: str, qty: str, fmt: str, category: str, mbid: str | None
) -> None:
    """Add a new record to the catalog."""
    handler = CreateRecordHandler(
        record_repo=record_repository(),
        metadata_provider=metadata_provider(),
    )

    try:
        command = parse_create_record({
            "artist": artist, "album": album, "price": price, "qty": qty,
            "format": fmt, "category": category, "mbid": mbid,
        })
        dto = handler.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record {dto.id} added: {dto.artist} - {dto.album} ({dto.format}), "
               f"{len(dto.tracklist)} track(s)")


@click.command("list")
@click.option("--artist", default=None, help="Artist contains (case-insensitive).")
@click.option("--album", default=None, help="Album contains (case-insensitive).")
@click.option("--format", "fmt", default=None, help="Exact format.")
@click.option("--category", default=None, help="Exact category.")
@click.option("--min-price", default=None, help="Lowest price, inclusive.")
@click.option("--max-price", default=None, help="Highest price, inclusive.")
@click.option("--in-stock", is_flag=True, default=False, help="Only records with stock.")
@click.option("--page", default=None, help="Page number (default 1).")
@click.option("--limit", default=None, help="Records per page (default 10, max 100).")
@click.option("--sort-by", default=None, help="Field to sort by (default lastModified).")
@click.option("--sort-order", default=None, help="asc or desc (default desc).")
def record_list(**options: str | bool | None) -> None:
    """List catalog records with filters, paging and sorting."""
    query = RecordQuery.from_params({
        "artist": options["artist"],
        "album": options["album"],
        "format": options["fmt"],
        "category": options["category"],
        "minPrice": options["min_price"],
        "maxPrice": options["max_price"],
        "inStock": "true" if options["in_stock"] else None,
        "page": options["page"],
        "limit": options["limit"],
        "sortBy": options["sort_by"],
        "sortOrder": options["sort_order"],
    })  # type: ignore[arg-type]
    result = ListRecordsHandler(record_repo=record_repository()).handle(query)

    if not result.data:
        click.echo("No records found.")
        return

    click.echo(f"{'ID':<24} {'Artist':<20} {'Album':<24} {'Format':<9} {'Price':>8} {'Qty':>5}")
    click.echo("-" * 95)
    for r in result.data:
        click.echo(
            f"{r.id:<24} {r.artist[:20]:<20} {r.album[:24]:<24} {r.format:<9} "
            f"{'$' + format(r.price, '.2f'):>8} {r.qty:>5}"
        )
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total} record(s))")


@click.command("show")
@click.option("--id", "record_id", required=True, help="Record ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
def record_show(record_id: str, as_json: bool) -> None:
    """Show details of one record."""
    handler = ShowRecordHandler(record_repo=record_repository())

    try:
        dto = handler.handle(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        _display_record(dto)


@click.command("update")
@click.option("--id", "record_id", required=True, help="Record ID to update.")
@click.option("--artist", default=None, help="New artist.")
@click.option("--album", default=None, help="New album title.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--qty", default=None, help="New stock level.")
@click.option("--format", "fmt", default=None, help="New format.")
@click.option("--category", default=None, help="New category.")
@click.option("--mbid", default=None, help="New MusicBrainz release ID.")
def record_update(record_id: str, fmt: str | None, **changes: str | None) -> None:
    """Update some fields of a record."""
    handler = UpdateRecordHandler(
        record_repo=record_repository(),
        metadata_provider=metadata_provider(),
    )

    try:
        command = parse_update_record({**changes, "format": fmt})
        dto = handler.handle(record_id, command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record {dto.id} updated.")


@click.command("delete")
@click.option("--id", "record_id", required=True, help="Record ID to delete.")
def record_delete(record_id: str) -> None:
    """Remove a record from the catalog."""
    handler = DeleteRecordHandler(record_repo=record_repository())

    try:
        handler.handle(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record {record_id} deleted.")


@click.command("lookup")
@click.option("--mbid", required=True, help="MusicBrainz release ID to look up.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
def record_lookup(mbid: str, as_json: bool) -> None:
    """Fetch a release from MusicBrainz without touching the catalog."""
    result = LookupReleaseHandler(metadata_provider=metadata_provider()).handle(mbid)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.success:
            click.get_current_context().exit(1)
        return

    if not result.success:
        raise click.ClickException(f"Lookup of {mbid} failed: {result.error}")

    click.echo(f"{result.artist or '?'} - {result.album or '?'} ({result.release_date or 'n.d.'})")
    for number, title in enumerate(result.tracks, start=1):
        click.echo(f"  {number:>2}. {title}")
    click.echo(f"{result.count} track(s) in {result.duration_ms} ms")
