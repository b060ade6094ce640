"""Interactive selection of registry entries for removal.

Two prompts are involved: a numbered menu taking whitespace-separated
numbers, then a y/N confirmation. Invalid numbers are reported and skipped
individually; cancelling at either prompt is not an error.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from addon_loader.core.prompter import Prompter
from addon_loader.core.registry import AddonStatus
from addon_loader.core.user_feedback import UserFeedback

SELECTION_PROMPT = "Enter number(s) separated by spaces (e.g., 1 3 5):"
CONFIRM_PROMPT = "Confirm removal? [y/N]:"
NOTHING_TO_REMOVE = "No addons configured to remove"

_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class RejectedToken:
    token: str
    reason: str

    def describe(self) -> str:
        if self.reason:
            return f"Invalid selection: {self.token} ({self.reason})"
        return f"Invalid selection: {self.token}"


@dataclass(frozen=True)
class ParsedSelection:
    """Result of parsing the menu response.

    Attributes:
        indices: Zero-based menu indices, ascending and unique
        rejected: Tokens that were not valid menu numbers
        cancelled: True for empty input or when 0 was entered
    """

    indices: tuple[int, ...]
    rejected: tuple[RejectedToken, ...]
    cancelled: bool


@dataclass(frozen=True)
class SelectionOutcome:
    chosen: tuple[str, ...]
    cancelled: bool


def parse_selection(text: str, count: int) -> ParsedSelection:
    """Parse a response to the numbered menu.

    Args:
        text: Raw response line
        count: Number of menu entries (valid numbers are 1..count)

    Example:
        >>> parse_selection("3 x 1 9", 3).indices
        (0, 2)
        >>> [r.describe() for r in parse_selection("3 x 1 9", 3).rejected]
        ['Invalid selection: x', 'Invalid selection: 9 (out of range)']
    """
    tokens = text.split()
    if not tokens:
        return ParsedSelection(indices=(), rejected=(), cancelled=True)

    indices: set[int] = set()
    rejected: list[RejectedToken] = []
    for token in tokens:
        if not _NUMBER.fullmatch(token):
            rejected.append(RejectedToken(token=token, reason=""))
            continue
        number = int(token)
        if number == 0:
            return ParsedSelection(indices=(), rejected=(), cancelled=True)
        if number > count:
            rejected.append(RejectedToken(token=token, reason="out of range"))
            continue
        indices.add(number - 1)

    return ParsedSelection(indices=tuple(sorted(indices)), rejected=tuple(rejected), cancelled=False)


def format_menu(statuses: Sequence[AddonStatus]) -> list[str]:
    lines = []
    for number, status in enumerate(statuses, start=1):
        if status.exists:
            lines.append(f"  {number}) ✓ {status.path}")
        else:
            lines.append(f"  {number}) ✗ {status.path} (missing)")
    return lines


def select_for_removal(
    statuses: Sequence[AddonStatus],
    prompter: Prompter,
    feedback: UserFeedback,
) -> SelectionOutcome:
    """Show the removal menu and return the confirmed selection.

    Args:
        statuses: Registry entries in registry order
        prompter: Source of user responses
        feedback: Destination for the menu and warnings

    Returns:
        SelectionOutcome; chosen entries keep registry order. cancelled is
        True whenever nothing should be removed.
    """
    if not statuses:
        feedback.warning(NOTHING_TO_REMOVE)
        return SelectionOutcome(chosen=(), cancelled=True)

    feedback.info("")
    feedback.info("Select addon(s) to remove:")
    feedback.info("")
    for line in format_menu(statuses):
        feedback.info(line)
    feedback.info("")
    feedback.info("  0) Cancel")
    feedback.info("")

    parsed = parse_selection(prompter.prompt(SELECTION_PROMPT), len(statuses))
    if parsed.cancelled:
        feedback.info("Cancelled")
        return SelectionOutcome(chosen=(), cancelled=True)

    for rejected in parsed.rejected:
        feedback.warning(rejected.describe())

    if not parsed.indices:
        feedback.warning("No valid selections made")
        return SelectionOutcome(chosen=(), cancelled=True)

    chosen = tuple(statuses[i].path for i in parsed.indices)
    feedback.info("")
    feedback.info(f"Will remove {len(chosen)} addon(s):")
    for path in chosen:
        feedback.info(f"  - {path}")
    feedback.info("")

    if prompter.prompt(CONFIRM_PROMPT).strip() not in ("y", "Y"):
        feedback.info("Cancelled")
        return SelectionOutcome(chosen=(), cancelled=True)

    return SelectionOutcome(chosen=chosen, cancelled=False)
