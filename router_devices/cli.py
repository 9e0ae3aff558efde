"""
router-devices CLI.

Usage:
    router-devices auth         Log into the router and cache the session
    router-devices list         Show the devices connected to each wifi network
"""

import logging

import typer
from rich.logging import RichHandler

from router_devices import __version__
from router_devices.commands import AuthCommand, ListCommand, register_commands
from router_devices.config import LOG_LEVEL
from router_devices.utils.console import err_console

app = typer.Typer(
    name="router-devices",
    help=f"Inspect the devices connected to your router (v{__version__}).",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def setup_logging(level: str = LOG_LEVEL):
    """Send log records to stderr through Rich."""
    root_logger = logging.getLogger()

    # Clear existing handlers to allow reconfiguration
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("router_devices").setLevel(getattr(logging, level, logging.INFO))

    for noisy_logger in ["asyncio", "playwright", "camoufox"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


@app.callback()
def main():
    """Inspect the devices connected to your router."""
    setup_logging()


register_commands(app, AuthCommand(), ListCommand())


if __name__ == "__main__":
    app()
