"""CLI for phaseconf - inspect the container a lifecycle phase would run in."""

from __future__ import annotations

import json
import shlex

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import DEFAULT_PLATFORM_API
from .constants import OS_LINUX, STANDARD_PHASES, SUPPORTED_OS
from .context import ExecutionContext
from .errors import PhaseConfError
from .logging import get_logger, set_debug
from .operations import (
    AddBinds,
    AppendArgs,
    GrantDaemonAccess,
    GrantRegistryAccess,
    NoOp,
    PhaseOperation,
    PrependFlags,
    SetEnv,
    SetLogPrefix,
    SetNetworkMode,
)
from .phase import build_phase_spec, lifecycle_path
from .spec import PhaseSpec

console = Console()


def _collect_operations(
    args: tuple[str, ...],
    flags: tuple[str, ...],
    binds: tuple[str, ...],
    envs: tuple[str, ...],
    network: str | None,
    daemon_access: bool,
    registry_auth: str | None,
    log_prefix: str,
) -> list[PhaseOperation]:
    """Translate CLI options into phase operations (in application order)."""
    return [
        PrependFlags(*flags),
        AppendArgs(*args),
        AddBinds(*binds),
        SetEnv(*envs),
        SetNetworkMode(network) if network else NoOp(),
        GrantDaemonAccess() if daemon_access else NoOp(),
        GrantRegistryAccess(registry_auth) if registry_auth else NoOp(),
        SetLogPrefix(log_prefix),
    ]


def _spec_table(spec: PhaseSpec) -> Table:
    table = Table(title=f"Phase: {spec.name} ({spec.os})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Image", escape(spec.container.image))
    table.add_row("Command", escape("\n".join(spec.container.cmd)))
    table.add_row("User", escape(spec.container.user) or "[dim]default[/dim]")
    table.add_row("Env", escape("\n".join(spec.container.env)))
    labels = "\n".join(f"{k}={v}" for k, v in spec.container.labels.items())
    table.add_row("Labels", escape(labels))
    table.add_row("Binds", escape("\n".join(spec.host.binds)))
    table.add_row("Network", escape(spec.host.network_mode) or "[dim]default[/dim]")
    table.add_row("Isolation", spec.host.isolation.value or "[dim]default[/dim]")
    for exec_config in spec.execs:
        table.add_row("Exec", escape(" ".join(exec_config.cmd)))
    return table


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="phaseconf")
def cli(debug: bool) -> None:
    """phaseconf - Container specifications for lifecycle phases."""
    if debug:
        set_debug(True)


@cli.command()
@click.argument("phase")
@click.option("--image", required=True, help="Builder image reference")
@click.option(
    "--os",
    "os_name",
    type=click.Choice(sorted(SUPPORTED_OS)),
    default=OS_LINUX,
    show_default=True,
    help="Target OS of the builder image",
)
@click.option("--platform-api", default=DEFAULT_PLATFORM_API, show_default=True)
@click.option("--layers-volume", default="pack-layers", show_default=True)
@click.option("--app-volume", default="pack-app", show_default=True)
@click.option("--workspace", default="", help="App directory name inside the container")
@click.option("--arg", "args", multiple=True, help="Argument appended to the lifecycle command")
@click.option("--flag", "flags", multiple=True, help="Flag prepended to the lifecycle command")
@click.option("--bind", "binds", multiple=True, help="Extra bind mount (source:target)")
@click.option("--env", "envs", multiple=True, help="Extra environment entry (KEY=VALUE)")
@click.option("--network", help="Network mode")
@click.option("--daemon-access", is_flag=True, help="Run as admin with the daemon socket mounted")
@click.option("--registry-auth", help="Registry auth payload passed to the lifecycle")
@click.option("--log-prefix", default="", help="Prefix for phase output lines")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "docker", "json"]),
    default="table",
    show_default=True,
)
def show(
    phase: str,
    image: str,
    os_name: str,
    platform_api: str,
    layers_volume: str,
    app_volume: str,
    workspace: str,
    args: tuple[str, ...],
    flags: tuple[str, ...],
    binds: tuple[str, ...],
    envs: tuple[str, ...],
    network: str | None,
    daemon_access: bool,
    registry_auth: str | None,
    log_prefix: str,
    output_format: str,
) -> None:
    """Show the container specification for PHASE.

    Proxy settings are read from HTTP_PROXY, HTTPS_PROXY and NO_PROXY.
    """
    operations = _collect_operations(
        args, flags, binds, envs, network, daemon_access, registry_auth, log_prefix
    )
    try:
        context = ExecutionContext.create(
            builder_image=image,
            layers_volume=layers_volume,
            app_volume=app_volume,
            os=os_name,
            platform_api=platform_api,
            workspace=workspace,
            logger=get_logger("phase"),
        )
        spec = build_phase_spec(phase, context, *operations)
    except PhaseConfError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "docker":
        click.echo(shlex.join(spec.docker_create_args()))
    elif output_format == "json":
        payload = {
            "container": spec.container.to_api(),
            "host": spec.host.to_api(),
            "execs": [exec_config.to_api() for exec_config in spec.execs],
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        console.print(_spec_table(spec))


@cli.command()
def phases() -> None:
    """List the standard lifecycle phases."""
    table = Table(title="Lifecycle Phases")
    table.add_column("Phase", style="cyan")
    table.add_column("Binary")

    for name in STANDARD_PHASES:
        table.add_row(name, lifecycle_path(name))

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    cli()
