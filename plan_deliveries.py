"""Mini README: Entry point CLI for planning drone deliveries.

Commands:
    * plan DATE [URL] - fetch the day's orders from the REST service, validate
      them, plan every round trip and write the three result files.
    * serve - launch the FastAPI planning service with uvicorn.

Settings (step length, thresholds, base, output directory) come from
``DRONEDELIVERY_*`` environment variables when not given as options.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from dronedelivery.configuration import get_settings
from dronedelivery.data_retrieval import ApiError
from dronedelivery.logging_utils import configure_root_logger, get_logger
from dronedelivery.pipeline import run_day
from dronedelivery.route_planning import RestaurantNotFound, UnreachableDestination

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Plan and serve drone delivery flight paths.")


@cli.command()
def plan(
    day: str = typer.Argument(..., help="Delivery date as YYYY-MM-DD."),
    url: Optional[str] = typer.Argument(
        None, help="Base URL of the REST service (https://...); defaults to the configured one."
    ),
    output_dir: Optional[Path] = typer.Option(None, help="Directory for the result files."),
    verbose: bool = typer.Option(False, "--verbose", help="Log per-order detail."),
) -> None:
    """Plan every valid order of DAY and write the result files."""

    settings = get_settings()
    configure_root_logger("DEBUG" if verbose else settings.log_level)
    try:
        planned = run_day(day, url or settings.api_base_url or "", output_directory=output_dir)
    except (ApiError, UnreachableDestination, RestaurantNotFound) as error:
        LOGGER.exception("Planning aborted")
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error
    except (ValueError, RuntimeError) as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error

    files = planned.files
    typer.echo(
        f"Planned {len(planned.routed_orders)} of {len(planned.orders)} orders "
        f"({len(planned.movements)} movements)."
    )
    if files is not None:
        for path in (files.deliveries, files.flightpath, files.geojson):
            typer.echo(f"  {path}")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI planning service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting planner on {effective_host}:{effective_port}.\n"
        f"POST plans to http://{browser_host}:{effective_port}/plan"
    )
    uvicorn.run(
        "dronedelivery.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
