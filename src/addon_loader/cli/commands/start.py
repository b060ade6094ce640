"""Start command implementation."""

import click

from addon_loader.cli.core import load_registry, prepare_install, reinstall_if_drifted
from addon_loader.cli.ensure import Ensure
from addon_loader.core.context import AddonLoaderContext


@click.command(
    "start",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("firefox_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def start_cmd(ctx: AddonLoaderContext, firefox_args: tuple[str, ...]) -> None:
    """Launch Firefox, reinstalling AutoConfig first if an update removed it.

    Extra arguments are passed to Firefox unchanged.
    """
    plan = prepare_install(ctx)
    registry = load_registry(ctx)

    if reinstall_if_drifted(ctx, plan, registry):
        ctx.feedback.info("")

    ctx.feedback.info(f"Starting Firefox ({plan.installation.variant.value})...")
    ctx.feedback.info(f"Binary: {plan.installation.binary}")
    ctx.feedback.info("Addons will auto-load from configured list")

    Ensure.succeeds(
        lambda: ctx.host.launch(plan.installation, list(firefox_args)),
        "Failed to start Firefox",
    )
