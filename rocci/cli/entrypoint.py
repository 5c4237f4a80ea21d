"""rOCCI backend cli

This is the entrypoint for the `rocci` cli application.
"""

from typing import Optional

import typer

from rocci.utils.log import set_log_level_to_debug

rocci_cli = typer.Typer(
    help="""\b
Inspect the backends available to the server.
\b
Usage:
1. Run `rocci backends` to list registered backends
2. Run `rocci check NAME` to check that a backend can be loaded
3. Run `rocci inspect NAME` to see what a backend implements
""",
    no_args_is_help=True,
    add_completion=False,
    invoke_without_command=True,
    options_metavar="\b",
    subcommand_metavar="[COMMAND] [OPTIONS]",
    pretty_exceptions_show_locals=False,
)


@rocci_cli.command(short_help="List registered backends")
def backends(
    print_debug_log: bool = typer.Option(
        False,
        "-d",
        "--debug",
        help="Print debug logs.",
    ),
):
    """
    \b
    List registered backends with their API version and whether the server can load them.
    """
    if print_debug_log:
        set_log_level_to_debug()

    from rocci.cli.operator import list_backends

    list_backends()


@rocci_cli.command(short_help="Check that a backend can be loaded")
def check(
    name: str = typer.Argument(..., help="Registered backend name."),
    print_debug_log: bool = typer.Option(
        False,
        "-d",
        "--debug",
        help="Print debug logs.",
    ),
):
    """
    \b
    Resolve a backend and check its API version against the server's.

    \b
    Examples:
    * `rocci check dummy`
    """
    if print_debug_log:
        set_log_level_to_debug()

    from rocci.cli.operator import check_backend

    if not check_backend(name):
        raise typer.Exit(code=1)


@rocci_cli.command(short_help="Show what a backend implements")
def inspect(
    name: str = typer.Argument(..., help="Registered backend name."),
    config_file: Optional[str] = typer.Option(
        None,
        "-c",
        "--config",
        help="YAML server config providing the backend options.",
        show_default=False,
    ),
    print_debug_log: bool = typer.Option(
        False,
        "-d",
        "--debug",
        help="Print debug logs.",
    ),
):
    """
    \b
    Instantiate a backend and print, per resource kind, the operations it
    implements and the actions it advertises.

    \b
    Examples:
    * `rocci inspect dummy`
    * `rocci inspect dummy -c rocci.yml`
    """
    if print_debug_log:
        set_log_level_to_debug()

    from rocci.cli.operator import inspect_backend

    if not inspect_backend(name, config_file=config_file):
        raise typer.Exit(code=1)
