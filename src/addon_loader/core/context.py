"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from addon_loader.core.filesystem import DryRunFilesystem, Filesystem, RealFilesystem
from addon_loader.core.global_config import ConfigStore, FilesystemConfigStore, GlobalConfig
from addon_loader.core.host import DryRunHost, Host, RealHost
from addon_loader.core.prompter import ConsolePrompter, Prompter
from addon_loader.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class AddonLoaderContext:
    """Immutable context holding all dependencies for addon-loader operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    filesystem: Filesystem
    host: Host
    prompter: Prompter
    feedback: UserFeedback
    config_store: ConfigStore
    config: GlobalConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        filesystem: Filesystem | None = None,
        host: Host | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        config: GlobalConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "AddonLoaderContext":
        """Create test context with optional pre-configured dependencies.

        Unspecified dependencies default to in-memory fakes, so a test only
        needs to build the pieces it asserts on.

        Example:
            >>> fs = FakeFilesystem(directories={Path("/addons/one")})
            >>> ctx = AddonLoaderContext.for_test(filesystem=fs, cwd=Path("/addons"))
            >>> result = runner.invoke(cli, ["add", "one"], obj=ctx)
        """
        from tests.fakes.filesystem import FakeFilesystem
        from tests.fakes.host import FakeHost
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.user_feedback import FakeUserFeedback

        from addon_loader.core.global_config import InMemoryConfigStore

        if filesystem is None:
            filesystem = FakeFilesystem()

        if host is None:
            host = FakeHost()

        if prompter is None:
            prompter = FakePrompter()

        if feedback is None:
            feedback = FakeUserFeedback()

        if config is None:
            config = GlobalConfig(
                registry_path=Path("/test/addon-loader-home/addons.txt"),
                template_path=None,
                firefox_bin=None,
            )

        if config_store is None:
            config_store = InMemoryConfigStore(config=config)

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            filesystem = DryRunFilesystem(filesystem)
            host = DryRunHost(host)

        return AddonLoaderContext(
            filesystem=filesystem,
            host=host,
            prompter=prompter,
            feedback=feedback,
            config_store=config_store,
            config=config,
            cwd=cwd or Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, config_store: ConfigStore | None = None) -> AddonLoaderContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap writers with dry-run wrappers that print
                 intended actions without executing them
        config_store: Config source (defaults to <home>/config.toml)

    Returns:
        AddonLoaderContext with real implementations

    Raises:
        ValueError: If config.toml is malformed
    """
    # 1. Capture cwd (no deps)
    cwd = Path.cwd()

    # 2. Load global config (defaults when the file doesn't exist)
    store = config_store if config_store is not None else FilesystemConfigStore()
    config = store.load()

    # 3. Create ops
    filesystem: Filesystem = RealFilesystem()
    host: Host = RealHost(configured_binary=config.firefox_bin)

    # 4. Apply dry-run wrappers if needed
    if dry_run:
        filesystem = DryRunFilesystem(filesystem)
        host = DryRunHost(host)

    return AddonLoaderContext(
        filesystem=filesystem,
        host=host,
        prompter=ConsolePrompter(),
        feedback=InteractiveFeedback(),
        config_store=store,
        config=config,
        cwd=cwd,
        dry_run=dry_run,
    )
