"""CLI entry point for telepoll."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from telepoll.bot import BotFactory
from telepoll.config import load_config
from telepoll.errors import BotError
from telepoll.models.config import BotConfig, HandlerKind
from telepoll.runner import run_bot


def _require_token(cfg: BotConfig) -> None:
    """Exit with error if no bot token is configured."""
    if not cfg.token:
        click.echo("Error: No bot token configured.", err=True)
        click.echo("Set TELEPOLL_TOKEN (or BOT_TOKEN) or token in [bot] config.", err=True)
        sys.exit(1)


def _mask(token: str) -> str:
    if not token:
        return "(not set)"
    bot_id, _, _ = token.partition(":")
    return f"{bot_id}:***"


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """telepoll - long-polling Telegram bot client."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["cfg"] = cfg
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every request URL at INFO, and the URL carries the token
    logging.getLogger("httpx").setLevel(logging.WARNING)


@cli.command()
@click.option(
    "--handler",
    type=click.Choice([h.value for h in HandlerKind]),
    default=None,
    help="Override the configured update handler",
)
@click.pass_context
def run(ctx: click.Context, handler: str | None) -> None:
    """Poll for updates and dispatch them until interrupted."""
    cfg = ctx.obj["cfg"]
    if handler:
        cfg.handler = HandlerKind(handler)
    _require_token(cfg)

    click.echo(f"Starting telepoll (handler: {cfg.handler.value})")
    try:
        asyncio.run(run_bot(cfg))
    except BotError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show effective configuration."""
    cfg = ctx.obj["cfg"]
    click.echo(f"API URL:         {cfg.api_url}")
    click.echo(f"Token:           {_mask(cfg.token)}")
    click.echo(f"Poll timeout:    {cfg.poll_timeout}s")
    click.echo(f"Request timeout: {cfg.request_timeout}s")
    click.echo(f"Initial offset:  {cfg.initial_offset}")
    click.echo(f"Handler:         {cfg.handler.value}")
    click.echo(f"Error backoff:   {cfg.error_backoff}s")


@cli.command()
@click.pass_context
def me(ctx: click.Context) -> None:
    """Validate the token with getMe and print the bot identity."""
    cfg = ctx.obj["cfg"]
    _require_token(cfg)

    async def _me():
        async with BotFactory.from_config(cfg) as factory:
            return (await factory.create_bot(cfg.token)).me

    try:
        user = asyncio.run(_me())
    except BotError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"ID:         {user.id}")
    click.echo(f"Name:       {user.first_name}")
    click.echo(f"Username:   @{user.username}" if user.username else "Username:   (none)")
    click.echo(f"Is bot:     {user.is_bot}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
