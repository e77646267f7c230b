# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
from __future__ import annotations
"""
gradetrack CLI

Command-line interface for the student grade tracker.

Commands:
    shell       Interactive menu for editing a roster
    summary     Per-student and overall statistics for a roster file
    list        Students in a roster file, sorted by name
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click
import toml

from gradetrack.report import C, format_listing, format_summary, summary_dict
from gradetrack.roster import Roster
from gradetrack.shell import GradeShell
from gradetrack.store import RosterIOError, import_file


# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger('gradetrack')


def load_config(config_path: Path) -> dict[str, Any]:
    """Load TOML configuration file."""
    if not config_path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    with open(config_path) as f:
        try:
            return toml.load(f)
        except toml.TomlDecodeError as e:
            raise click.ClickException(f"Invalid config file {config_path}: {e}")


def resolve_config_path() -> str:
    """Find config file: user path first, then system path."""
    user_config = Path.home() / '.config' / 'gradetrack' / 'gradetrack.toml'
    system_config = Path('/etc/gradetrack/gradetrack.toml')
    if user_config.exists():
        return str(user_config)
    if system_config.exists():
        return str(system_config)
    return str(user_config)  # Default to user path even if missing


def get_data_file(config: dict[str, Any]) -> Optional[str]:
    """Default roster file from config, if any."""
    return config.get('general', {}).get('data_file')


def get_decimals(config: dict[str, Any]) -> int:
    return int(config.get('display', {}).get('decimals', 2))


def load_roster(path: str) -> Roster:
    """Read a roster file into a fresh Roster."""
    roster = Roster()
    try:
        import_file(path, roster)
    except RosterIOError as e:
        raise click.ClickException(f"Could not read roster: {e}")
    return roster


def _roster_path(ctx: click.Context, file: Optional[str]) -> str:
    if file:
        return file
    data_file = get_data_file(ctx.obj['config'])
    if not data_file:
        raise click.UsageError("No FILE given and no [general] data_file configured")
    return data_file


@click.group()
@click.option('-c', '--config', 'config_path',
              type=click.Path(),
              default=None,
              help='Path to config file')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool, no_color: bool) -> None:
    """gradetrack - Student Grade Tracker

    Track students and their grades, with per-student and overall
    statistics and plain-text import/export.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # An explicit --config must exist; the default location is optional
    if config_path is not None:
        ctx.obj['config'] = load_config(Path(config_path))
        ctx.obj['config_path'] = config_path
    else:
        config_file = Path(resolve_config_path())
        try:
            ctx.obj['config'] = load_config(config_file)
            ctx.obj['config_path'] = str(config_file)
        except (click.ClickException, OSError) as e:
            logger.debug(f"No usable config at {config_file}: {e}")
            ctx.obj['config'] = {}
            ctx.obj['config_path'] = None

    color = ctx.obj['config'].get('display', {}).get('color', True)
    if no_color or not color or not sys.stdout.isatty():
        C.disable()


@cli.command()
@click.option('--file', '-f', 'file', type=click.Path(), help='Roster file to load first')
@click.pass_context
def shell(ctx: click.Context, file: Optional[str]) -> None:
    """Interactive menu for adding students and grades.

    Examples:
        gradetrack shell
        gradetrack shell --file students.csv
    """
    config = ctx.obj['config']
    roster = Roster()
    if file:
        try:
            count = import_file(file, roster)
            click.echo(f"Imported {count} lines from {file}.")
        except RosterIOError as e:
            click.echo(f"Error importing CSV: {e.cause}", err=True)

    GradeShell(
        roster,
        data_file=file or get_data_file(config),
        decimals=get_decimals(config),
    ).run()


@cli.command()
@click.argument('file', required=False, type=click.Path())
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
@click.pass_context
def summary(ctx: click.Context, file: Optional[str], output_json: bool) -> None:
    """Show per-student and overall statistics for a roster file.

    Examples:
        gradetrack summary students.csv
        gradetrack summary students.csv --json
    """
    roster = load_roster(_roster_path(ctx, file))

    if output_json:
        click.echo(json.dumps(summary_dict(roster), indent=2))
    else:
        click.echo(format_summary(roster, get_decimals(ctx.obj['config'])))


@cli.command('list')
@click.argument('file', required=False, type=click.Path())
@click.pass_context
def list_students(ctx: click.Context, file: Optional[str]) -> None:
    """List students in a roster file, sorted by name."""
    roster = load_roster(_roster_path(ctx, file))
    click.echo(format_listing(roster, get_decimals(ctx.obj['config'])))


def main() -> None:
    cli(obj={})


if __name__ == '__main__':
    main()
