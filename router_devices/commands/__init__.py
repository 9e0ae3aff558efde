"""CLI commands."""

import typer

from router_devices.commands.auth import AuthCommand
from router_devices.commands.base import ApplicationCommand
from router_devices.commands.list_devices import ListCommand


def register_commands(app: typer.Typer, *commands: ApplicationCommand) -> None:
    for command in commands:
        command.register(app)


__all__ = ["ApplicationCommand", "AuthCommand", "ListCommand", "register_commands"]
