"""Remove command implementation (by path or interactive menu)."""

import click

from addon_loader.cli.core import InstallPlan, install_registry, load_registry, prepare_install
from addon_loader.cli.ensure import Ensure
from addon_loader.core.context import AddonLoaderContext
from addon_loader.core.registry import AddonRegistry, RemoveStatus
from addon_loader.core.selector import NOTHING_TO_REMOVE, select_for_removal


def _remove_interactive(
    ctx: AddonLoaderContext, plan: InstallPlan, registry: AddonRegistry
) -> None:
    outcome = select_for_removal(registry.list(), ctx.prompter, ctx.feedback)
    if outcome.cancelled:
        return

    removed = Ensure.addon_call(
        lambda: registry.remove_many(outcome.chosen), "Cannot remove addons"
    )
    ctx.feedback.info("")
    for path in outcome.chosen:
        ctx.feedback.info(f"Removed: {path}")

    install_registry(ctx, plan, registry)
    ctx.feedback.info("")
    ctx.feedback.success(f"Successfully removed {removed} addon(s)")
    ctx.feedback.warning("Restart Firefox to apply changes")


@click.command("remove")
@click.argument("path", required=False)
@click.pass_obj
def remove_cmd(ctx: AddonLoaderContext, path: str | None) -> None:
    """Remove an addon from the auto-load list.

    Without PATH, shows a numbered menu of configured addons.
    """
    registry = load_registry(ctx)
    if path is None and len(registry) == 0:
        ctx.feedback.warning(NOTHING_TO_REMOVE)
        return
    plan = prepare_install(ctx)

    if path is None:
        _remove_interactive(ctx, plan, registry)
        return

    result = Ensure.addon_call(lambda: registry.remove(path, ctx.cwd), "Cannot remove addon")
    if result.status == RemoveStatus.NOT_PRESENT:
        ctx.feedback.warning(f"Addon not found in list: {result.path}")
        return

    ctx.feedback.info(f"Removed addon: {result.path}")
    install_registry(ctx, plan, registry)
    ctx.feedback.success("Addon removed successfully!")
    ctx.feedback.warning("Restart Firefox to apply changes")
