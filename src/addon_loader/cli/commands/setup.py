"""Setup command implementation."""

import click

from addon_loader.cli.core import install_registry, load_registry, prepare_install
from addon_loader.cli.ensure import Ensure
from addon_loader.core.context import AddonLoaderContext


@click.command("setup")
@click.pass_obj
def setup_cmd(ctx: AddonLoaderContext) -> None:
    """Install AutoConfig into Firefox with the current addon list."""
    ctx.feedback.info("Setting up Firefox AutoConfig for addon auto-loading...")
    plan = prepare_install(ctx)
    registry = load_registry(ctx)

    if not ctx.config_store.exists() and not ctx.dry_run:
        Ensure.file_operation(
            lambda: ctx.config_store.save(ctx.config), "Failed to write configuration"
        )
        ctx.feedback.info(f"Created config: {ctx.config_store.path()}")

    install_registry(ctx, plan, registry)

    ctx.feedback.info("")
    ctx.feedback.success("Setup complete!")
    ctx.feedback.info("Add addons with: addon-loader add <path>")
    ctx.feedback.info("Start Firefox with: addon-loader start")
    ctx.feedback.info("")
    ctx.feedback.warning("After Firefox updates, AutoConfig files may be removed.")
    ctx.feedback.warning("Just run 'addon-loader start' and it will auto-reinstall them.")
