"""CLI commands for weathercli."""

from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from typer.core import TyperCommand

from weathercli import __logo__, __version__
from weathercli.config import API_KEY_ENV, DEFAULT_UNITS, build_options, validate_units
from weathercli.display import render
from weathercli.errors import ConfigError, UsageError, WeatherError
from weathercli.providers.openweather import get_weather

app = typer.Typer(
    name="weather",
    add_completion=False,
    rich_markup_mode=None,
    pretty_exceptions_enable=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} weather v{__version__}")
        raise typer.Exit()


class WeatherCommand(TyperCommand):
    """Reports flag parsing failures the same way as other configuration errors."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except ConfigError:
            raise
        except UsageError as e:
            raise ConfigError(e.format_message(), ctx=ctx) from e


@app.command(cls=WeatherCommand, context_settings={"help_option_names": ["-h", "--help"]})
def main(
    city: Optional[List[str]] = typer.Argument(
        None, metavar="CITY-NAME", help="City to look up; several words are joined with spaces", show_default=False
    ),
    api_key: Optional[str] = typer.Option(
        None, "-key", envvar=API_KEY_ENV, help="openweather api key", show_default=False
    ),
    verbose: bool = typer.Option(False, "-v", help="verbose output"),
    units: str = typer.Option(
        DEFAULT_UNITS.value, "-units", callback=validate_units, help="units of measurement (metric|imperial)"
    ),
    logs: bool = typer.Option(False, "-logs", help="Show runtime logs"),
    version: bool = typer.Option(None, "-version", callback=version_callback, is_eager=True),
):
    """weather displays the current weather of a city."""
    if logs:
        logger.enable("weathercli")
    else:
        logger.disable("weathercli")

    # ConfigError propagates to typer, which prints it with the usage text.
    options = build_options(api_key, city, units=units, verbose=verbose)

    try:
        reading = get_weather(options)
    except WeatherError as e:
        err_console.print(f"ERROR: {e}", markup=False, highlight=False, emoji=False, soft_wrap=True)
        raise typer.Exit(1)

    typer.echo(render(reading, options))


if __name__ == "__main__":
    app()
