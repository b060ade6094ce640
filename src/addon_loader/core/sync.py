"""Render-then-install pipeline shared by every command that touches Firefox."""

from dataclasses import dataclass
from pathlib import Path

from addon_loader.core.autoconfig import AutoConfigSources
from addon_loader.core.filesystem.abc import Filesystem
from addon_loader.core.installer import InstallationSynchronizer, InstallReport
from addon_loader.core.registry import AddonRegistry
from addon_loader.core.renderer import RenderResult, render_artifact


@dataclass(frozen=True)
class SyncResult:
    render: RenderResult
    report: InstallReport


def render_registry(
    registry: AddonRegistry, sources: AutoConfigSources, filesystem: Filesystem
) -> RenderResult:
    return render_artifact(
        sources.template,
        registry.entries,
        lambda entry: filesystem.path_exists(Path(entry)),
    )


def apply_registry(
    registry: AddonRegistry,
    sources: AutoConfigSources,
    synchronizer: InstallationSynchronizer,
    filesystem: Filesystem,
) -> SyncResult:
    """Render the artifact from the registry and install it unconditionally.

    Rendering happens first, so a TemplateError aborts before any file is written.
    """
    rendered = render_registry(registry, sources, filesystem)
    report = synchronizer.install(rendered.text, sources.companion)
    return SyncResult(render=rendered, report=report)


def ensure_registry_installed(
    registry: AddonRegistry,
    sources: AutoConfigSources,
    synchronizer: InstallationSynchronizer,
    filesystem: Filesystem,
) -> SyncResult | None:
    """Re-render and reinstall only when the target has drifted.

    Returns:
        SyncResult if a reinstall happened, None if the target was synchronized
    """
    rendered: list[RenderResult] = []

    def render() -> str:
        result = render_registry(registry, sources, filesystem)
        rendered.append(result)
        return result.text

    report = synchronizer.ensure_installed(render, sources.companion)
    if report is None:
        return None
    return SyncResult(render=rendered[0], report=report)
