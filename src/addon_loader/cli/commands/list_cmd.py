"""List command implementation."""

import click

from addon_loader.cli.core import load_registry, synchronizer_for
from addon_loader.cli.display import format_install_state, print_addons
from addon_loader.cli.output import user_output
from addon_loader.core.context import AddonLoaderContext


@click.command("list")
@click.pass_obj
def list_cmd(ctx: AddonLoaderContext) -> None:
    """List configured addons and whether AutoConfig is installed."""
    registry = load_registry(ctx)
    statuses = registry.list()

    user_output("Configured addons:")
    user_output("")
    if not statuses:
        ctx.feedback.warning("No addons configured")
        user_output("")
        ctx.feedback.info("Add addons with: addon-loader add <path>")
    else:
        print_addons(statuses)
        user_output("")
        user_output(f"Total: {len(statuses)} addon(s)")

    user_output("")
    # Listing works without Firefox; only the installation line depends on it.
    installation = ctx.host.find_installation()
    if installation is None:
        user_output(click.style("✗", fg="yellow") + " Firefox not found")
        return
    user_output(format_install_state(synchronizer_for(ctx, installation).is_synchronized()))
