import logging
import os

import click

from addon_loader.cli.commands.add import add_cmd
from addon_loader.cli.commands.help_cmd import help_cmd
from addon_loader.cli.commands.list_cmd import list_cmd
from addon_loader.cli.commands.remove import remove_cmd
from addon_loader.cli.commands.setup import setup_cmd
from addon_loader.cli.commands.start import start_cmd
from addon_loader.cli.commands.status import status_cmd
from addon_loader.cli.ensure import Ensure
from addon_loader.cli.help_formatter import GroupedCommandGroup
from addon_loader.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "ADDON_LOADER_DEBUG"


@click.group(
    cls=GroupedCommandGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(package_name="addon-loader")
@click.option("--dry-run", is_flag=True, help="Print file writes and launches instead of doing them.")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool) -> None:
    """Auto-load local Firefox addons through AutoConfig.

    Addons are loaded as temporary addons (like about:debugging) on every
    start, without signature checks. Firefox updates remove the AutoConfig
    files; 'addon-loader start' puts them back automatically.
    """
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = Ensure.succeeds(
            lambda: create_context(dry_run=dry_run),
            "Invalid configuration",
            exception_type=ValueError,
        )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register all commands (help output keeps this order)
cli.add_command(add_cmd)
cli.add_command(remove_cmd)
cli.add_command(list_cmd)
cli.add_command(setup_cmd)
cli.add_command(status_cmd)
cli.add_command(start_cmd)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `addon-loader` console script."""
    cli()
