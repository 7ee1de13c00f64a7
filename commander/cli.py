import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer

from config.settings import settings
from commander.core import CommanderClient
from commander.core.console import ConsoleClient

app = typer.Typer(
    name="commander",
    help="Chat command router",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_console_commander(
    prefix: Optional[str] = None,
    owners: Optional[List[str]] = None,
    group: bool = False,
) -> CommanderClient:
    """Create a console host with the default commands registered."""
    console = ConsoleClient(settings.bot_address, settings.console_address, group=group)
    commander = CommanderClient(
        console,
        prefix=settings.bot_prefix if prefix is None else prefix,
        owner=owners if owners else (settings.bot_owner or [settings.console_address]),
    )
    commander.registry.register_defaults()
    return commander.start()


@app.command()
def run(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Command prefix (empty for mention only)"),
    owner: Optional[List[str]] = typer.Option(None, "--owner", help="Owner address, repeatable"),
    group: bool = typer.Option(False, "--group", help="Simulate a group chat"),
    script: Optional[Path] = typer.Option(None, "--script", help="Read messages from a file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Run a console chat session against the built-in commands."""
    setup_logging(log_level or settings.log_level)

    commander = build_console_commander(prefix, owner, group)
    console = commander.client
    typer.echo(f"Talking to @{commander.address} as {console.user_address} (prefix {commander.prefix!r})")

    try:
        if script is not None:
            asyncio.run(console.run(script.read_text().splitlines()))
        else:
            asyncio.run(console.interact())
    except KeyboardInterrupt:
        typer.echo("Session stopped by user")


@app.command()
def commands(
    show_hidden: bool = typer.Option(False, "--hidden", help="Include hidden commands"),
) -> None:
    """List the built-in commands and their usage."""
    commander = build_console_commander()
    typer.echo("📦 Available Commands:")
    for cmd in commander.registry.commands.values():
        if cmd.hidden and not show_hidden:
            continue
        aliases = f" (aliases: {', '.join(cmd.aliases)})" if cmd.aliases else ""
        typer.echo(f"  {cmd.usage()} - {cmd.description}{aliases}")


@app.command()
def init(
    directory: Optional[str] = typer.Option(None, help="Directory to initialize")
) -> None:
    """Write a .env template for the commander settings."""
    target_dir = Path(directory) if directory else Path.cwd()

    if not target_dir.exists():
        target_dir.mkdir(parents=True)

    env_file = target_dir / ".env"
    if not env_file.exists():
        env_content = """# Commander Configuration
BOT_PREFIX=!
BOT_OWNER=
OWNER_OVERRIDE=true
BOT_ADDRESS=commander
ENVIRONMENT=development
LOG_LEVEL=INFO
"""
        env_file.write_text(env_content)

    typer.echo(f"✅ Commander project initialized in {target_dir}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
