"""Avatar Bot - Main entry point.

Run with: python -m avatar_bot
Or: avatar-bot (after installation)

Commands:
- run: Run one bot against the simulated host
- appearance: Show the asset URLs for a bot number
- sounds: List the sound library
- version: Show version info
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from avatar_bot.assets import resolve_appearance, sound_urls
from avatar_bot.bot import run_simulation
from avatar_bot.errors import BotError
from avatar_bot.utils.config import get_env_settings, load_config
from avatar_bot.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="avatar-bot",
    help="Avatar Bot - an idle NPC for a virtual-world client",
)

console = Console()
log = get_logger(__name__)


def _error_exit(error: BotError, json_output: bool = False) -> typer.Exit:
    """Report a bot error and return the exit to raise."""
    if json_output:
        console.print_json(data=error.to_response().to_dict())
    else:
        console.print(f"[red]Error: {escape(str(error))}[/red]")
    return typer.Exit(code=1)


def _print_summary(summary: dict) -> None:
    state = summary["bot"]["state"]
    position = state["position"]

    table = Table(title=f"Bot #{summary['bot_number']}", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("virtual time", f"{summary['host']['virtual_time']:.2f}s")
    table.add_row("frames", str(summary["bot"]["frames"]))
    table.add_row(
        "position",
        f"({position['x']:.3f}, {position['y']:.3f}, {position['z']:.3f})",
    )
    table.add_row("head pitch", f"{summary['bot']['head_pitch']:.2f}")
    table.add_row("walk / head / wave", f"{state['walk']} / {state['head']} / {state['wave']}")
    table.add_row("walks", str(summary["bot"]["walks"]))
    table.add_row("waves", str(summary["bot"]["waves"]))
    table.add_row("sounds", str(summary["bot"]["sounds"]))
    table.add_row("voxel queries", str(summary["bot"]["voxel_queries"]))
    console.print(table)


@app.command()
def run(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
    seconds: float | None = typer.Option(
        None,
        "--seconds",
        "-s",
        help="Virtual seconds to simulate (default from config)",
    ),
    fps: float | None = typer.Option(
        None,
        "--fps",
        help="Frame rate (default from config)",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Random seed for a reproducible run",
    ),
    bot_number: int | None = typer.Option(
        None,
        "--bot-number",
        "-b",
        min=1,
        max=100,
        help="Fixed appearance (1-100)",
    ),
    realtime: bool = typer.Option(
        False,
        "--realtime",
        help="Pace frames to wall-clock time",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit JSON log lines",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Also append JSON log lines to this file",
    ),
) -> None:
    """Run one bot against the simulated host and print a summary."""
    env = get_env_settings()
    json_output = json_logs or env.log_json
    configure_logging(
        level="DEBUG" if env.debug else "INFO",
        json_format=json_output,
        log_file=log_file,
    )

    try:
        cfg = load_config(config)
    except BotError as e:
        raise _error_exit(e, json_output) from e

    if seed is not None:
        cfg.simulation.seed = seed
    if bot_number is not None:
        cfg.assets.bot_number = bot_number

    log.info(
        "Starting avatar bot",
        seconds=seconds if seconds is not None else cfg.simulation.duration_seconds,
        fps=fps if fps is not None else cfg.simulation.fps,
        seed=cfg.simulation.seed,
    )

    try:
        summary = asyncio.run(
            run_simulation(
                cfg,
                duration_seconds=seconds,
                fps=fps,
                realtime=realtime or None,
            )
        )
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        raise typer.Exit(code=130) from None

    _print_summary(summary)


@app.command()
def appearance(
    bot_number: int = typer.Argument(..., help="Bot number (1-100)"),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
) -> None:
    """Show the model URLs a bot number resolves to."""
    try:
        cfg = load_config(config)
        look = resolve_appearance(bot_number, cfg.assets.base_url)
    except BotError as e:
        raise _error_exit(e) from e

    console.print(f"face:      {look.face_model_url}")
    console.print(f"skeleton:  {look.skeleton_model_url}")
    console.print(f"billboard: {look.billboard_url}")


@app.command()
def sounds(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
) -> None:
    """List the conversational sound library."""
    try:
        cfg = load_config(config)
    except BotError as e:
        raise _error_exit(e) from e

    table = Table(title="Sound library", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("URL")
    for index, url in enumerate(sound_urls(cfg.assets.base_url)):
        table.add_row(str(index), url)
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from avatar_bot import __version__

    console.print(f"Avatar Bot v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
