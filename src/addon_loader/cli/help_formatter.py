"""Custom Click help formatter for organized command display."""

import click

INSTALLATION_COMMANDS = ["setup", "status", "start"]
ADDON_COMMANDS = ["add", "remove", "list"]


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    - Addons: registry management
    - Firefox: installation and launch
    - Other: everything else (help)
    """

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Keep registration order instead of sorting alphabetically."""
        return list(self.commands)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        addon_cmds = [(n, c) for n, c in commands if n in ADDON_COMMANDS]
        firefox_cmds = [(n, c) for n, c in commands if n in INSTALLATION_COMMANDS]
        other_cmds = [
            (n, c) for n, c in commands if n not in ADDON_COMMANDS and n not in INSTALLATION_COMMANDS
        ]

        if addon_cmds:
            with formatter.section("Addons"):
                self._format_command_list(formatter, addon_cmds)

        if firefox_cmds:
            with formatter.section("Firefox"):
                self._format_command_list(formatter, firefox_cmds)

        if other_cmds:
            with formatter.section("Other"):
                self._format_command_list(formatter, other_cmds)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((name, help_text))

        if rows:
            formatter.write_dl(rows)
