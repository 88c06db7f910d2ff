# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import random
from pathlib import Path

import click

from isobot.errors import ConfigError
from isobot.input.recording import RecordingDispatcher, RecordingSender
from isobot.logging import configure_logging
from isobot.navigation.grid import BLOCKED_CHAR
from isobot.navigation.objects import has_door_between
from isobot.navigation.pathfinding import find_path
from isobot.navigation.planner import MovementPlanner
from isobot.navigation.rooms import order_rooms
from isobot.scenario import Scenario
from isobot.settings import Settings


def _load(scenario_path: str) -> tuple[Scenario, Settings]:
    settings = Settings()
    try:
        return Scenario.from_yaml(scenario_path), settings
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--debug/--no-debug", default=False, show_default=True, help="Log planner decisions to stderr.")
def cli(debug: bool) -> None:
    """isobot navigation command line interface."""
    configure_logging(Settings(), debug=debug)


@cli.command("path")
@click.argument("scenario", type=click.Path(exists=True, dir_okay=False))
@click.option("--draw/--no-draw", default=False, show_default=True, help="Print the grid with the route marked.")
def path_cmd(scenario: str, draw: bool) -> None:
    """Find a route from the player to the destination of SCENARIO."""
    sc, _settings = _load(scenario)
    grid = sc.collision_grid()
    if grid is None:
        raise click.ClickException("scenario has no grid")

    path, found = find_path(grid, sc.player, sc.destination)
    if not found:
        click.echo("no route")
        snapshot = sc.to_snapshot()
        blocked, door = has_door_between(snapshot, sc.player, sc.destination)
        if blocked and door is not None:
            click.echo(f"nearest door: {door.name or door.id} at {door.position}")
        return

    click.echo(f"route: {len(path)} points")
    click.echo(" ".join(str(p) for p in path))
    if draw:
        on_path = {(p.x - grid.offset_x, p.y - grid.offset_y) for p in path}
        for row, line in enumerate(grid.to_strings()):
            click.echo("".join("*" if (col, row) in on_path and ch != BLOCKED_CHAR else ch for col, ch in enumerate(line)))


@cli.command("plan")
@click.argument("scenario", type=click.Path(exists=True, dir_okay=False))
@click.option("--walk-duration", type=float, default=0.0, show_default=True, help="Seconds of walking per tick (0 = unlimited).")
@click.option("--seed", type=int, default=1, show_default=True, help="Seed for recovery moves.")
@click.option("--protocol/--no-protocol", default=False, show_default=True, help="Attach a protocol sender.")
@click.option("--recover/--no-recover", default=True, show_default=True, help="Use stuck recovery when there is no route.")
def plan_cmd(scenario: str, walk_duration: float, seed: int, protocol: bool, recover: bool) -> None:
    """Run one planner tick for SCENARIO and print the input it would send."""
    sc, settings = _load(scenario)
    try:
        config = settings.navigation_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    dispatcher = RecordingDispatcher(seed=seed)
    sender = RecordingSender() if protocol else None
    planner = MovementPlanner(
        sc.to_viewport(),
        config,
        dispatcher,
        sender,
        sleep=lambda _s: None,
        rng=random.Random(seed),
    )
    snapshot = sc.to_snapshot()

    click.echo(f"strategy: {planner.select_strategy(snapshot)}")
    command = planner.move_to(snapshot, sc.destination, walk_duration=walk_duration, recover=recover)
    if command is None:
        click.echo("no movement")
        return
    click.echo(f"command: {command.model_dump_json()}")
    for event in dispatcher.events:
        click.echo("  " + " ".join(str(part) for part in event))
    if sender is not None:
        for pos in sender.teleports:
            click.echo(f"  protocol teleport {pos}")


@cli.command("rooms")
@click.argument("scenario", type=click.Path(exists=True, dir_okay=False))
def rooms_cmd(scenario: str) -> None:
    """Print the order the rooms of SCENARIO would be visited in."""
    sc, _settings = _load(scenario)
    for i, room in enumerate(order_rooms(sc.rooms, sc.player), start=1):
        click.echo(f"{i:>3}. {room.name} {room.center}")


@cli.command("config")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write to a file instead of stdout.")
def config_cmd(output: Path | None) -> None:
    """Dump the effective navigation configuration as YAML."""
    try:
        config = Settings().navigation_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if output is None:
        click.echo(config.dump_yaml(), nl=False)
    else:
        config.to_yaml(output)
        click.echo(f"wrote {output}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
