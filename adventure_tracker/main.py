"""Adventure Tracker - Main CLI entry point."""

import sys
from typing import Optional

import click

from adventure_tracker.console.menu import TrackerMenu
from adventure_tracker.console.report import ReportWriter
from adventure_tracker.data.config import LOG_LEVELS, ConfigError, ConfigManager
from adventure_tracker.data.ledger import SessionLedger, recommend_difficulty
from adventure_tracker.utils.logger import get_logger, setup_logger


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS),
    default=None,
    help="Set logging level (default: from settings.yaml, else INFO)",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=None,
    help="Directory for log files (default: from settings.yaml, else logs)",
)
@click.option(
    "--log-file/--no-log-file",
    default=True,
    help="Write log files",
)
@click.option(
    "--config-dir",
    type=click.Path(),
    default=ConfigManager.DEFAULT_CONFIG_DIR,
    help="Directory containing settings.yaml",
)
@click.pass_context
def cli(ctx, log_level: Optional[str], log_dir: Optional[str], log_file: bool, config_dir: str):
    """Adventure Tracker - track a character and their play sessions.

    Records play sessions, reports statistics and recommends a
    difficulty tier based on level and session length.
    """
    ctx.ensure_object(dict)

    # Console only until start has read settings.yaml
    setup_logger(level=log_level or "INFO", file=False)

    ctx.obj["logger"] = get_logger()
    ctx.obj["log_level"] = log_level
    ctx.obj["log_dir"] = log_dir
    ctx.obj["log_file"] = log_file
    ctx.obj["config_manager"] = ConfigManager(config_dir=config_dir)


@cli.command()
@click.option(
    "--report",
    "report_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Report file path (default: from settings.yaml)",
)
@click.pass_context
def start(ctx, report_path: Optional[str]):
    """Start the interactive tracker."""
    log = ctx.obj["logger"]

    try:
        config = ctx.obj["config_manager"].load()
    except ConfigError as e:
        log.error(f"Fatal error: {e}")
        sys.exit(1)

    # Settings file decides logging unless given on the command line
    setup_logger(
        level=ctx.obj["log_level"] or config.log_level,
        log_dir=ctx.obj["log_dir"] or config.log_dir,
        file=ctx.obj["log_file"],
        retention_days=config.log_retention_days,
    )
    log = get_logger()

    if report_path:
        config.report_path = report_path

    log.info(f"Session capacity: {config.max_sessions}")
    log.info(f"Report path: {config.report_path}")

    menu = TrackerMenu(
        config=config,
        ledger=SessionLedger(capacity=config.max_sessions),
        report_writer=ReportWriter(config.report_path),
    )

    try:
        menu.run()
    except click.Abort:
        click.echo("")
        log.info("Tracker stopped by user")
    except Exception as e:
        log.exception(f"Fatal error: {e}")
        sys.exit(1)


@cli.command()
@click.option("--level", type=click.IntRange(min=1), required=True, help="Character level")
@click.option(
    "--avg-hours",
    type=click.FloatRange(min=0.0),
    required=True,
    help="Average hours per session",
)
def recommend(level: int, avg_hours: float):
    """Recommend a difficulty for a level and average session length."""
    difficulty = recommend_difficulty(level, avg_hours)
    get_logger().debug(f"Level {level}, {avg_hours:.2f} h/session -> {difficulty.label}")
    click.echo(difficulty.label)


@cli.command()
def version():
    """Show version information."""
    from adventure_tracker import __version__

    click.echo(f"Adventure Tracker v{__version__}")


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
