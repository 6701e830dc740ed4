"""Command line interface for Archive Client."""

import asyncio
import json
import logging
import sys
import threading
from typing import Any, Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .api_clients import (
    APIClientError,
    ArchivePayload,
    ArchiveRequestError,
    StaticTokenProvider,
    create_archive_client,
    get_file_extension,
)
from .api_clients.factory import ARCHIVE_CLIENTS
from .config import ArchiveConfigurationError

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def run_async(coro):
    """
    Run an async coroutine, handling both new event loops and existing ones.

    Args:
        coro: The coroutine to run

    Returns:
        The result of the coroutine
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No event loop running, we can use asyncio.run()
        return asyncio.run(coro)

    # A loop is already running (e.g. inside tests); run in a separate thread
    result = None
    exception = None

    def run_in_new_loop():
        nonlocal result, exception
        try:
            result = asyncio.run(coro)
        except Exception as e:
            exception = e

    thread = threading.Thread(target=run_in_new_loop)
    thread.start()
    thread.join()

    if exception:
        raise exception
    return result


def _print_json(value: Any) -> None:
    console.print(Syntax(json.dumps(value, indent=2, ensure_ascii=False), "json"))


def _fail(message: str) -> None:
    error_console.print(f"❌ {message}", style="red", markup=False)
    sys.exit(1)


async def _invoke(ctx: click.Context, call) -> Any:
    client = create_archive_client(
        ctx.obj["variant"], StaticTokenProvider(ctx.obj["token"])
    )
    async with client:
        return await call(client)


def _run_call(ctx: click.Context, call) -> None:
    if not ctx.obj["token"]:
        _fail("An access token is required (--token or ARCHIVE_ACCESS_TOKEN)")

    try:
        result = run_async(_invoke(ctx, call))
    except ArchiveConfigurationError as e:
        _fail(f"Configuration error: {e}")
    except ArchiveRequestError as e:
        error_console.print(
            f"❌ Archive rejected request (HTTP {e.status_code}): {e.message}",
            style="red",
            markup=False,
        )
        if e.data is not None:
            error_console.print(
                json.dumps(e.data, indent=2, ensure_ascii=False), markup=False
            )
        sys.exit(1)
    except APIClientError as e:
        _fail(str(e))
    else:
        _print_json(result)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option(
    "--variant",
    type=click.Choice(sorted(ARCHIVE_CLIENTS), case_sensitive=False),
    default="vestfold",
    show_default=True,
    help="Tenant whose operation set is used",
)
@click.option(
    "--token",
    envvar="ARCHIVE_ACCESS_TOKEN",
    help="Pre-issued bearer token (default: $ARCHIVE_ACCESS_TOKEN)",
)
@click.version_option(version=__version__, prog_name="archive-client")
@click.pass_context
def cli(ctx, verbose: bool, variant: str, token: Optional[str]):
    """Forward requests to the archive service.

    \b
    CONFIGURATION (environment):
      ARCHIVE_SCOPE      Comma-separated scopes, each containing https://
      ARCHIVE_BASE_URL   Base URL of the archive endpoint
      ARCHIVE_TIMEOUT    Request timeout in seconds (default: 30)

    \b
    EXAMPLES:
      archive-client file-extension report.pdf scan.TIF
      archive-client call CaseService GetCases --parameter '{"Title": "x"}'
      archive-client --variant vfk sync-enterprise 123456789
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["variant"] = variant.lower()
    ctx.obj["token"] = token

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


@cli.command("file-extension")
@click.argument("filenames", nargs=-1, required=True)
@click.pass_context
def file_extension(ctx, filenames: Tuple[str, ...]):
    """Show the archive format code and conversion flag for FILENAMES."""
    if not hasattr(ARCHIVE_CLIENTS[ctx.obj["variant"]], "get_file_extension"):
        _fail(
            f"File extension classification is not available for {ctx.obj['variant']}"
        )

    table = Table(title="Archive file formats")
    table.add_column("Filename", style="cyan")
    table.add_column("Format")
    table.add_column("Flag")

    for filename in filenames:
        extension, flag = get_file_extension(filename)
        table.add_row(filename, extension, "convert" if flag == "P" else "accept")

    console.print(table)


@cli.command()
@click.argument("service")
@click.argument("method")
@click.option("--parameter", "-p", help="JSON parameter object")
@click.pass_context
def call(ctx, service: str, method: str, parameter: Optional[str]):
    """Post a SERVICE/METHOD envelope to the archive route."""
    try:
        parsed = json.loads(parameter) if parameter else None
    except json.JSONDecodeError as e:
        _fail(f"--parameter is not valid JSON: {e}")

    try:
        payload = ArchivePayload(service=service, method=method, parameter=parsed)
    except ValidationError as e:
        _fail(f"Invalid envelope: {e.errors()[0]['msg']}")

    _run_call(ctx, lambda client: client.archive(payload))


@cli.command("sync-enterprise")
@click.argument("organization_nr")
@click.pass_context
def sync_enterprise(ctx, organization_nr: str):
    """Synchronize an enterprise by ORGANIZATION_NR."""
    _run_call(ctx, lambda client: client.sync_enterprise(organization_nr))


def main():
    """Entry point for the archive-client console script."""
    cli(obj={})


if __name__ == "__main__":
    main()
