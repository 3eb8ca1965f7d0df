"""
Interactive console for the F1 lap time analyzer.

Usage:
    f1laps
    f1laps --season 2023 --round 1
    python -m f1laps --season 2024
"""
from __future__ import annotations

import click

from f1laps.aggregation import DriverSummary, fastest_drivers, find_driver
from f1laps.api_logging import configure_log_dir, get_logger
from f1laps.client import OpenF1Client
from f1laps.config import Settings, load_directory
from f1laps.exceptions import F1LapsError, MissingSectorDataError, OpenF1Error, SessionNotFoundError
from f1laps.formatters import format_difference, format_lap_time, format_sector_time
from f1laps.sectors import compare_sectors
from f1laps.service import LapTimeService
from f1laps.sessions import SessionIdentity

MENU = """
=== Analysis Menu ===
1. Display Top 3 Fastest Laps
2. View Average Lap Times for Specific Driver
3. Compare Sector Times Between Two Drivers
4. Exit"""


def _prompt_int(text: str) -> int:
    return click.prompt(text, type=int)


# ── Session selection ─────────────────────────────────────────


def choose_round(service: LapTimeService, season: int) -> int:
    """Show the season's races and ask for a round; manual entry if listing fails."""
    click.echo(f"\nFetching available races for {season}...")
    try:
        races = service.list_races(season)
    except OpenF1Error as exc:
        click.echo(f"Error fetching races: {exc}")
        return _prompt_int("Enter race round number manually")

    if not races:
        click.echo("No races found for this season.")
        return _prompt_int("Enter race round number manually")

    click.echo(f"\n=== Available Races for {season} ===")
    click.echo(f"{'Round':<5} {'Circuit':<30} {'Date':<20}")
    click.echo("-" * 55)
    for race in races:
        click.echo(f"{race.round:<5d} {race.circuit_name:<30} {race.date:<20}")
    return _prompt_int("\nEnter race round number")


def load_session(
    service: LapTimeService,
    season: int,
    round_number: int,
) -> tuple[SessionIdentity, list[DriverSummary]] | None:
    """Resolve and aggregate a race, re-prompting on unknown rounds.

    Returns None when the user gives up after a transport failure.
    """
    while True:
        click.echo("\nFetching race data...")
        try:
            identity = service.resolve_session(season, round_number)
            return identity, service.load_driver_summaries(identity)
        except SessionNotFoundError as exc:
            click.echo(f"Error: {exc}")
            round_number = _prompt_int("Enter race round number manually")
        except OpenF1Error as exc:
            click.echo(f"Error fetching race data: {exc}")
            if not click.confirm("Try again?", default=False):
                return None


# ── Output ────────────────────────────────────────────────────


def show_results(summaries: list[DriverSummary]) -> None:
    click.echo("\n=== Race Results (Final Positions) ===")
    click.echo(f"{'Pos':<5} {'No.':<5} {'Driver':<30}")
    click.echo("-" * 35)
    for driver in summaries:
        if driver.is_classified:
            click.echo(
                f"{driver.finishing_position:<5d} {driver.driver_number:<5d} "
                f"{driver.driver_name:<30}"
            )


def show_fastest_laps(summaries: list[DriverSummary]) -> None:
    click.echo("\n=== Top 3 Fastest Laps ===")
    for rank, driver in enumerate(fastest_drivers(summaries, 3), start=1):
        click.echo(
            f"{rank}. {driver.driver_name} - {format_lap_time(driver.fastest_duration)} "
            f"(Lap {driver.fastest_lap_number})"
        )


def show_driver_statistics(summaries: list[DriverSummary], driver_number: int) -> None:
    driver = find_driver(summaries, driver_number)
    if driver is None:
        click.echo("Driver not found.")
        return
    click.echo("\n=== Driver Statistics ===")
    click.echo(f"Driver: {driver.driver_name}")
    click.echo(f"Number: {driver.driver_number}")
    click.echo(f"Total Laps: {driver.total_laps}")
    click.echo(
        f"Fastest Lap: {format_lap_time(driver.fastest_duration)} "
        f"(Lap {driver.fastest_lap_number})"
    )
    click.echo(f"Average Lap Time: {format_lap_time(driver.average_lap_time)}")


def show_sector_comparison(
    service: LapTimeService,
    identity: SessionIdentity,
    summaries: list[DriverSummary],
    first_driver: int,
    second_driver: int,
) -> None:
    try:
        splits = service.fetch_sector_splits(identity, [first_driver, second_driver])
    except OpenF1Error as exc:
        click.echo(f"Error fetching sector times: {exc}")
        return

    click.echo("\n=== Fastest Lap Sector Comparison ===")
    click.echo(f"{'Driver':<20} {'Sector 1':<15} {'Sector 2':<15} {'Sector 3':<15} {'Total':<15}")
    click.echo("-" * 81)
    for number in (first_driver, second_driver):
        split = splits.get(number)
        if split is None:
            continue
        summary = find_driver(summaries, number)
        name = summary.driver_name if summary else service.directory.name_for(number)
        cells = " ".join(f"{format_sector_time(s):<15}" for s in split.sectors)
        click.echo(f"{name:<20} {cells} {format_sector_time(split.total):<15}")

    try:
        comparison = compare_sectors(splits, first_driver, second_driver)
    except MissingSectorDataError as exc:
        for number in exc.driver_numbers:
            click.echo(f"Sector data not available for driver #{number}.")
        return

    click.echo("\n=== Sector Differences (Driver 1 - Driver 2) ===")
    for index, delta in enumerate(comparison.deltas, start=1):
        click.echo(f"Sector {index}: {format_difference(delta)}")


def run_menu(
    service: LapTimeService,
    identity: SessionIdentity,
    summaries: list[DriverSummary],
) -> bool:
    """Run one menu action; False once the user chooses to exit."""
    click.echo(MENU)
    choice = click.prompt("Choose an option", type=click.IntRange(1, 4))
    if choice == 1:
        show_fastest_laps(summaries)
    elif choice == 2:
        show_driver_statistics(
            summaries, _prompt_int("\nEnter driver number (e.g., 1 for Verstappen)")
        )
    elif choice == 3:
        first = _prompt_int("\nEnter first driver number")
        second = _prompt_int("Enter second driver number")
        show_sector_comparison(service, identity, summaries, first, second)
    else:
        click.echo("Exiting...")
        return False
    return True


# ── Entry point ───────────────────────────────────────────────


@click.command()
@click.option("--season", type=int, default=None, help="F1 season year, e.g. 2023.")
@click.option("--round", "round_number", type=int, default=None, help="Race round (1-based).")
def main(season: int | None, round_number: int | None) -> None:
    """F1 Lap Time Analyzer backed by the OpenF1 API."""
    settings = Settings()
    configure_log_dir(settings.log_dir)
    try:
        get_logger()
    except OSError as exc:
        raise click.ClickException(f"Cannot write API log to {settings.log_dir}: {exc}") from exc
    try:
        directory = load_directory(settings)
    except F1LapsError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo("=== F1 Lap Time Analyzer ===")
    with OpenF1Client(base_url=settings.base_url, timeout=settings.timeout) as client:
        service = LapTimeService(client, directory)
        if season is None:
            season = _prompt_int("Enter season (e.g., 2023 or 2024)")
        if round_number is None:
            round_number = choose_round(service, season)

        loaded = load_session(service, season, round_number)
        if loaded is None:
            return
        identity, summaries = loaded
        if not summaries:
            click.echo("No data available for this race.")
            return

        show_results(summaries)
        while run_menu(service, identity, summaries):
            pass
