"""Shared command plumbing: registry loading, Firefox discovery, render + install."""

from dataclasses import dataclass

from addon_loader.cli.ensure import Ensure
from addon_loader.core.autoconfig import AutoConfigSources, load_sources
from addon_loader.core.context import AddonLoaderContext
from addon_loader.core.errors import AddonLoaderError
from addon_loader.core.host import HostInstallation, require_installation
from addon_loader.core.installer import InstallationSynchronizer, InstallationTarget
from addon_loader.core.registry import AddonRegistry
from addon_loader.core.renderer import validate_template
from addon_loader.core.sync import SyncResult, apply_registry, ensure_registry_installed


@dataclass(frozen=True)
class InstallPlan:
    """Everything needed to install, resolved before the registry is touched."""

    installation: HostInstallation
    sources: AutoConfigSources
    synchronizer: InstallationSynchronizer


def load_registry(ctx: AddonLoaderContext) -> AddonRegistry:
    return Ensure.addon_call(
        lambda: AddonRegistry.load(ctx.config.registry_path, ctx.filesystem),
        "Failed to load addon registry",
    )


def discover_installation(ctx: AddonLoaderContext) -> HostInstallation:
    return Ensure.addon_call(lambda: require_installation(ctx.host), "Cannot locate Firefox")


def synchronizer_for(
    ctx: AddonLoaderContext, installation: HostInstallation
) -> InstallationSynchronizer:
    return InstallationSynchronizer(ctx.filesystem, InstallationTarget.for_installation(installation))


def prepare_install(ctx: AddonLoaderContext) -> InstallPlan:
    """Locate Firefox and load a valid template, exiting with an error otherwise.

    Called before mutating the registry so a missing Firefox or a broken
    template never leaves the registry changed but uninstalled.
    """
    installation = discover_installation(ctx)

    def load_valid_sources() -> AutoConfigSources:
        sources = load_sources(ctx.config.template_path)
        validate_template(sources.template)
        return sources

    sources = Ensure.addon_call(load_valid_sources, "Invalid AutoConfig template")
    return InstallPlan(
        installation=installation,
        sources=sources,
        synchronizer=synchronizer_for(ctx, installation),
    )


def report_sync(ctx: AddonLoaderContext, result: SyncResult) -> None:
    for skipped in result.render.skipped:
        ctx.feedback.warning(f"Addon path does not exist (skipping): {skipped}")
    ctx.feedback.info(f"Generated autoconfig.js with {len(result.render.included)} addon(s)")
    for directory in result.report.created_dirs:
        ctx.feedback.info(f"Created: {directory}")
    ctx.feedback.info(f"Installed: {result.report.target.companion_path}")
    ctx.feedback.info(f"Installed: {result.report.target.artifact_path}")


def install_registry(ctx: AddonLoaderContext, plan: InstallPlan, registry: AddonRegistry) -> None:
    """Render autoconfig.js from the registry and install it into Firefox."""
    ctx.feedback.info("Generating autoconfig.js from template...")
    ctx.feedback.info(f"Installing AutoConfig files into Firefox: {plan.installation.app_root}")
    result = Ensure.succeeds(
        lambda: apply_registry(registry, plan.sources, plan.synchronizer, ctx.filesystem),
        "Failed to install AutoConfig files",
        exception_type=(AddonLoaderError, OSError),
    )
    report_sync(ctx, result)
    ctx.feedback.success("✓ AutoConfig installation complete")


def reinstall_if_drifted(
    ctx: AddonLoaderContext, plan: InstallPlan, registry: AddonRegistry
) -> bool:
    """Reinstall when Firefox has dropped the AutoConfig files.

    Returns:
        True if a reinstall happened
    """
    if plan.synchronizer.is_synchronized():
        return False

    ctx.feedback.warning("AutoConfig not installed (Firefox may have updated)")
    ctx.feedback.info("Auto-reinstalling...")
    result = Ensure.succeeds(
        lambda: ensure_registry_installed(registry, plan.sources, plan.synchronizer, ctx.filesystem),
        "Failed to reinstall AutoConfig files",
        exception_type=(AddonLoaderError, OSError),
    )
    if result is not None:
        report_sync(ctx, result)
    return True
