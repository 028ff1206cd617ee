"""CLI command to build the world time board and push it to the webhook."""

from pathlib import Path
import logging
import sys

import click
from dotenv import load_dotenv

from ..io.render import render_board
from ..io.webhook import DeliveryError, WebhookSink
from ..model.locations import ConfigError
from ..model.settings import load_board_config, load_registry
from ..runtime import ReportClock, build_rows, parse_instant

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Board configuration file (default: bundled board.yaml)",
)
@click.option(
    "--at",
    "at",
    type=str,
    help="Render the board for this instant (ISO format) instead of now",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the board instead of sending it",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(config, at, dry_run, verbose):
    """Build the world time board and create or update the webhook message.

    The webhook URL and message id come from DISCORD_WEBHOOK_URL and
    DISCORD_MESSAGE_ID (a .env file is honored), or from the webhook section
    of the config file.

    Examples:
        # Preview the board
        worldtime-update --dry-run

        # Preview a specific instant
        worldtime-update --dry-run --at "2025-06-21T04:30:00Z"
    """
    load_dotenv()
    setup_logging(verbose)

    try:
        cfg = load_board_config(Path(config) if config else None)
        registry = load_registry(cfg)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    if at:
        try:
            clock = ReportClock.frozen_at(parse_instant(at))
        except ValueError as e:
            click.echo(f"Error parsing --at: {e}", err=True)
            sys.exit(1)
    else:
        clock = ReportClock()

    instant = clock.now()
    rows = build_rows(registry, instant, cfg)
    content = render_board(rows, instant, cfg.title)
    logger.debug(f"Rendered board with {len(rows)} rows at {instant.isoformat()}")

    if dry_run:
        click.echo(content)
        return

    if not cfg.webhook.url:
        click.echo("Missing DISCORD_WEBHOOK_URL", err=True)
        sys.exit(1)

    try:
        with WebhookSink(
            cfg.webhook.url,
            message_id=cfg.webhook.message_id,
            timeout=cfg.webhook.timeout,
            retries=cfg.webhook.retries,
        ) as sink:
            message_id = sink.deliver(content)
    except DeliveryError as e:
        logger.error(str(e))
        sys.exit(1)

    if not cfg.webhook.message_id:
        click.echo(f"Created message. Set DISCORD_MESSAGE_ID to: {message_id}")
    else:
        click.echo("Updated message.")


if __name__ == "__main__":
    main()
