"""Add command implementation."""

import click

from addon_loader.cli.core import install_registry, load_registry, prepare_install
from addon_loader.cli.ensure import Ensure
from addon_loader.core.context import AddonLoaderContext
from addon_loader.core.registry import AddStatus


@click.command("add")
@click.argument("path")
@click.pass_obj
def add_cmd(ctx: AddonLoaderContext, path: str) -> None:
    """Add an addon directory or .xpi file to the auto-load list.

    Relative paths are resolved against the current directory.
    """
    registry = load_registry(ctx)
    plan = prepare_install(ctx)

    result = Ensure.addon_call(lambda: registry.add(path, ctx.cwd), "Cannot add addon")
    if result.status == AddStatus.ALREADY_PRESENT:
        ctx.feedback.warning(f"Addon already in list: {result.path}")
        return

    ctx.feedback.info(f"Added addon: {result.path}")
    install_registry(ctx, plan, registry)
    ctx.feedback.success("Addon added successfully!")
    ctx.feedback.warning("Restart Firefox to load the addon")
