from rich.console import Console
from rich.style import Style

console = Console()

info_style = Style()
error_style = Style(color="red")
success_style = Style(color="green")
heading_style = Style(
    color="green",
    bold=True,
    underline=True,
)


def print_heading(msg: str) -> None:
    console.print(msg, style=heading_style)


def print_info(msg: str) -> None:
    console.print(msg, style=info_style)


def print_success(msg: str) -> None:
    console.print(msg, style=success_style)


def print_error(msg: str) -> None:
    console.print(msg, style=error_style)
