"""CLI entry point for Creation GM."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import click

from . import __version__


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


# ── CLI Commands ─────────────────────────────────────────


@click.group()
@click.version_option(version=__version__, prog_name="creation-gm")
@click.option(
    "--log-level",
    default=None,
    help="DEBUG | INFO | WARNING | ERROR (default: config log_level)",
)
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """Creation GM: LLM game master for the Journey of Creation."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    if log_level:
        _setup_logging(log_level)


def _setup_logging(level: str) -> None:
    # click.echo writes to stdout; keep logs on stderr so output stays pure JSON
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def parse(source) -> None:
    """Recover a GameResponse from raw LLM text (FILE or stdin)."""
    from .reasoning.response import parse_game_response

    _echo_json(parse_game_response(source.read()))


@main.command()
@click.option(
    "--prompt",
    default=None,
    help="Player prompt; picks the contextual variant and its theme",
)
def fallback(prompt: str | None) -> None:
    """Print the fallback GameResponse."""
    from .reasoning.response import ContextualFallback, PlainFallback, build_fallback

    variant = PlainFallback() if prompt is None else ContextualFallback(prompt)
    _echo_json(build_fallback(variant))


@main.command()
@click.argument("prompt")
@click.option("--config", "config_path", default=None, help="Config file path")
@click.option("--retry", is_flag=True, help="Retry invalid responses with backoff")
@click.pass_context
def turn(ctx: click.Context, prompt: str, config_path: str | None, retry: bool) -> None:
    """Play one game turn for PROMPT against the configured providers."""
    from .config import load_config
    from .exceptions import ConfigError, ProviderNotConfiguredError
    from .friendly_errors import (
        format_friendly_error,
        friendly_config_error,
        friendly_provider_error,
    )
    from .reasoning.factory import create_providers
    from .reasoning.game_master import GameMaster

    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(format_friendly_error(friendly_config_error(e)), err=True)
        ctx.exit(1)

    if not ctx.obj.get("log_level"):
        _setup_logging(config.log_level)

    try:
        providers = create_providers(config)
    except ImportError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if not providers:
        err = ProviderNotConfiguredError("No LLM provider is configured")
        click.echo(format_friendly_error(friendly_provider_error(err)), err=True)

    gm = GameMaster(providers, config)
    play = gm.take_turn_with_retry if retry else gm.take_turn
    _echo_json(asyncio.run(play(prompt)))


if __name__ == "__main__":
    main()
