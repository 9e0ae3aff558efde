"""Rich-based console output."""

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from router_devices.models.wifi import WifiConnectedDevice
from router_devices.utils.timefmt import format_last_connected

# Command output goes to stdout, logs to stderr
console = Console()
err_console = Console(stderr=True)

DEVICE_COLUMNS = [
    "Name",
    "Hostname",
    "IPv4",
    "Connected?",
    "IPv6",
    "MAC Address",
    "Last connected",
]


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold green]✓[/bold green] {message}")


def print_error(message: str):
    """Print an error message."""
    err_console.print(f"[bold red]✗[/bold red] {message}")


def print_warning(message: str):
    """Print a warning message."""
    err_console.print(f"[bold yellow]⚠[/bold yellow] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/bold blue] {message}")


def _cell(value: Optional[str]) -> str:
    return value if value else "-"


def device_row(device: WifiConnectedDevice, now: Optional[float] = None) -> list[str]:
    """Render one device as table cells."""
    name = "\n".join(
        _cell(part) for part in (device.friendly_name, device.device_class, device.manufacturer)
    )
    return [
        name,
        _cell(device.hostname),
        _cell(device.best_ipv4),
        "Yes" if device.is_connected else "No",
        _cell(device.ipv6),
        _cell(device.mac_address),
        format_last_connected(device.connected_time, now),
    ]


def build_device_table(devices: Iterable[WifiConnectedDevice], now: Optional[float] = None) -> Table:
    table = Table(box=box.ROUNDED, show_lines=True)
    for column in DEVICE_COLUMNS:
        table.add_column(column, style="cyan" if column == "Name" else None)
    for device in devices:
        # Plain Text so device names are never parsed as markup
        table.add_row(*(Text(cell) for cell in device_row(device, now)))
    return table


def print_device_table(title: str, devices: list[WifiConnectedDevice], now: Optional[float] = None):
    """Print a device group: a count line, then the table (header only when empty)."""
    console.print(f"[bold magenta]{title}[/bold magenta] ({len(devices)} devices)")
    console.print(build_device_table(devices, now))
    console.print()
