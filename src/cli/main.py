"""Main CLI entry point for the confluence-mcp command.

This module provides the Typer application that starts the MCP server over
stdio. Stdout carries the protocol stream, so all logging goes to stderr
(and optionally a log file).
"""

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from mcp.server import Server

from src.cli.errors import FatalStartupError
from src.cli.models import ExitCode
from src.confluence_client.api_wrapper import APIWrapper
from src.confluence_client.auth import Authenticator
from src.mcp_server.registry import Dispatcher, build_catalog
from src.mcp_server.server import create_server, run_stdio

VERSION = "0.1.0"

app = typer.Typer(
    name="confluence-mcp",
    help="""Serve Confluence pages and spaces as MCP tools over stdio.

Credentials are read from CONFLUENCE_URL, CONFLUENCE_EMAIL and
CONFLUENCE_API_TOKEN (a .env file in the working directory is loaded first).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. Console output goes to stderr; stdout belongs to the MCP stream.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-mcp_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _build_server(env_file: Optional[str] = None) -> Server:
    """Wire credentials, adapter, tool catalog and dispatcher into an MCP server.

    Raises:
        FatalStartupError: If any part of the wiring fails
    """
    try:
        credentials = Authenticator(env_file).get_credentials()
        api = APIWrapper(credentials)
        dispatcher = Dispatcher(build_catalog(api))
        server = create_server(dispatcher)
    except Exception as e:
        raise FatalStartupError(f"Could not build server: {e}") from e

    logger.info(f"Registered tools: {', '.join(dispatcher.tool_names)}")
    return server


@app.command()
def main_command(
    env_file: Optional[str] = typer.Option(
        None,
        "--env-file",
        help="Path to a .env file with Confluence credentials",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=warnings, 1=info, 2=debug",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Serve Confluence pages and spaces as MCP tools over stdio."""
    if version:
        typer.echo(f"confluence-mcp version {VERSION}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    try:
        server = _build_server(env_file)
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Fatal error in main()")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
