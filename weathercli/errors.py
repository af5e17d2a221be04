"""Error types raised by weathercli."""

from typing import IO, Any, Optional

import typer


class WeatherError(Exception):
    """Raised when fetching or reading the current weather fails."""
    pass


class NetworkError(WeatherError):
    """Raised when the request never produced an HTTP response."""
    pass


class ProtocolError(WeatherError):
    """Raised when the provider answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"request status {status_code} {reason}".rstrip())


class DecodeError(WeatherError):
    """Raised when the response body is not a valid current-weather payload."""
    pass


class ConfigError(typer.BadParameter):
    """
    Raised for invalid command-line input, before any network access.

    Shown as ``ERROR: <message>`` followed by the command help on stderr,
    exiting with the usage error code (2).
    """

    def show(self, file: Optional[IO[Any]] = None) -> None:
        typer.echo(f"ERROR: {self.message}\n", file=file, err=True)
        if self.ctx is not None:
            typer.echo(self.ctx.get_help(), file=file, err=True)


# Base usage error of the click copy typer runs on; flag parsing failures are raised as this.
UsageError = typer.BadParameter.__bases__[0]
