"""CLI for standalone crawler testing."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import date

import click

from flight_finder_core.schemas import FilterState, SearchResult
from flight_finder_ml import filter_flights, price_range, price_stats

from .aviationstack.crawler import AviationStackCrawler

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def _run_search(origin: str, destination: str, departure_date: str) -> SearchResult:
    async def _run() -> SearchResult:
        crawler = AviationStackCrawler()
        try:
            return await crawler.search(
                origin.upper(),
                destination.upper(),
                date.fromisoformat(departure_date),
            )
        finally:
            await crawler.close()

    return asyncio.run(_run())


def _print_results(flights: list) -> None:  # type: ignore[type-arg]
    if not flights:
        click.echo("No flights match.")
        return
    click.echo(f"\nFound {len(flights)} flight(s):\n")
    for i, f in enumerate(flights, 1):
        click.echo(
            f"  {i}. {f.flight_number} {f.airline} | "
            f"{f.origin.code} → {f.destination.code} | "
            f"{f.departure_time:%H:%M} - {f.arrival_time:%H:%M} | "
            f"{f.duration}min | {f.stops} stop(s) | "
            f"{f.price:.0f} {f.currency} | {f.seats_available} seats"
        )


@click.group()
def cli() -> None:
    """Flight Finder Crawler CLI."""


@cli.command("search")
@click.argument("origin")
@click.argument("destination")
@click.argument("departure_date")
@click.option("--max-price", type=float, default=None, help="Price ceiling")
@click.option(
    "--stops",
    type=click.IntRange(0, 2),
    multiple=True,
    help="Stop bucket (2 means 2+); repeatable",
)
@click.option("--airline", multiple=True, help="Airline IATA code; repeatable")
@click.option("--json-output", is_flag=True, help="Output as JSON")
def search(
    origin: str,
    destination: str,
    departure_date: str,
    max_price: float | None,
    stops: tuple[int, ...],
    airline: tuple[str, ...],
    json_output: bool,
) -> None:
    """Search AviationStack for ORIGIN → DESTINATION on DEPARTURE_DATE."""
    result = _run_search(origin, destination, departure_date)

    filters = FilterState(
        max_price=price_range(result.flights).max if max_price is None else max_price,
        stops=frozenset(stops),
        airlines=frozenset(code.upper() for code in airline),
    )
    flights = filter_flights(result.flights, filters)

    if json_output:
        payload = result.model_dump(mode="json", by_alias=True)
        payload["flights"] = [f.to_wire() for f in flights]
        payload["stats"] = price_stats(flights).model_dump()
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Source: {result.source.value} | Duration: {result.duration_ms}ms")
    if result.error:
        click.echo(f"{result.outcome.value}: {result.error}", err=True)
    _print_results(flights)
    if flights:
        stats = price_stats(flights)
        click.echo(
            f"\nPrice avg {stats.avg} | min {stats.min} | "
            f"max {stats.max} | median {stats.median}"
        )


@cli.command("health")
def health() -> None:
    """Check that the AviationStack key is set and the API answers."""

    async def _run() -> bool:
        crawler = AviationStackCrawler()
        try:
            return await crawler.health_check()
        finally:
            await crawler.close()

    healthy = asyncio.run(_run())
    click.echo("AviationStack: OK" if healthy else "AviationStack: unavailable")
    if not healthy:
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
