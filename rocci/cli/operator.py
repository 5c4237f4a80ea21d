from typing import List, Optional

from rich.table import Table

from rocci.backend.api import OPERATIONS, implemented_operations
from rocci.backend.facade import BackendFacade
from rocci.backend.loader import BackendLoader
from rocci.cli.console import console, print_error, print_heading, print_info, print_success
from rocci.config import ServerConfig
from rocci.exceptions import RocciError
from rocci.utils import log
from rocci.utils.log import set_log_level


def list_backends(loader: Optional[BackendLoader] = None) -> None:
    """Print every registered backend with its API version and compatibility."""
    loader = loader or BackendLoader()
    names = loader.registry.names()
    if not names:
        print_info("No backends registered")
        return

    table = Table(title=f"Backends (server API {loader.server_api_version})")
    table.add_column("Name", style="cyan")
    table.add_column("API version")
    table.add_column("Status")
    table.add_column("Description")

    for name in names:
        backend_class = loader.registry.resolve(name)
        try:
            loader.check_version(backend_class)
            status = "[green]compatible[/green]"
        except RocciError as e:
            status = f"[red]{e.__class__.__name__}[/red]"
        table.add_row(name, backend_class.api_version or "-", status, backend_class.description)

    console.print(table)


def check_backend(name: str, loader: Optional[BackendLoader] = None) -> bool:
    """Resolve and version-check a backend; returns whether it can be loaded."""
    loader = loader or BackendLoader()
    try:
        backend_class = loader.load(name)
    except RocciError as e:
        print_error(f"{e.__class__.__name__}: {e}")
        return False
    print_success(f"{name}: {backend_class.__qualname__} api_version={backend_class.api_version} can be loaded")
    return True


def format_operations(implemented: List[str]) -> str:
    """Summarize implemented operations as "all", "none" or their names in contract order."""
    if len(implemented) == len(OPERATIONS):
        return "[green]all[/green]"
    if not implemented:
        return "[red]none[/red]"
    return ", ".join(op for op in OPERATIONS if op in implemented)


def inspect_backend(name: str, config_file: Optional[str] = None, loader: Optional[BackendLoader] = None) -> bool:
    """Instantiate a backend and print which operations and actions each kind supports."""
    try:
        server_config = ServerConfig.from_path(config_file) if config_file else ServerConfig.load()
        if not log.debug_on:
            set_log_level(server_config.common.log_level)
    except (OSError, ValueError) as e:
        print_error(f"Could not load server config: {e}")
        return False

    try:
        facade = BackendFacade(backend_name=name, server_config=server_config, loader=loader)
    except (RocciError, ValueError) as e:
        print_error(f"{e.__class__.__name__}: {e}")
        return False

    print_heading(f"Backend: {facade.backend_name} ({facade.backend_class.__qualname__})")

    table = Table()
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Implemented")
    table.add_column("Actions")

    for kind, api in facade.kind_apis().items():
        actions = ", ".join(sorted(api.supported_actions())) or "-"
        table.add_row(kind, format_operations(implemented_operations(api)), actions)

    console.print(table)
    return True
