"""Status command implementation."""

import click

from addon_loader.cli.core import discover_installation, load_registry, synchronizer_for
from addon_loader.cli.display import format_install_state, print_addons
from addon_loader.cli.output import user_output
from addon_loader.core.context import AddonLoaderContext


@click.command("status")
@click.pass_obj
def status_cmd(ctx: AddonLoaderContext) -> None:
    """Show Firefox variant, AutoConfig installation state, and addons."""
    installation = discover_installation(ctx)
    synchronizer = synchronizer_for(ctx, installation)

    user_output("")
    user_output(f"Firefox variant: {installation.variant.value}")
    user_output(f"Firefox location: {installation.app_root}")
    user_output(f"AutoConfig file: {synchronizer.target.artifact_path}")
    user_output("")

    installed = synchronizer.is_synchronized()
    user_output(format_install_state(installed))

    user_output("")
    user_output("Configured addons:")
    statuses = load_registry(ctx).list()
    if statuses:
        print_addons(statuses)
    else:
        user_output("  (none)")
    user_output("")
