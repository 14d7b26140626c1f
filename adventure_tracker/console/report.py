"""Text rendering of characters, sessions and the adventure report."""

from pathlib import Path
from typing import List, Union

from adventure_tracker.data.ledger import SessionLedger, gold_per_hour
from adventure_tracker.data.models import Character, PlaySession, SessionKind
from adventure_tracker.utils.logger import get_logger

REPORT_TITLE = "Baldur's Gate 3 - Adventure Report"


class ReportError(Exception):
    """Report could not be written."""
    pass


def describe_character(character: Character) -> List[str]:
    """Character sheet lines with aligned labels."""
    return [
        f"{'Name:':<15}{character.name}",
        f"{'Level:':<15}{character.level}",
        f"{'Gold:':<15}{character.gold:.2f}",
        f"{'Difficulty:':<15}{character.difficulty.label}",
    ]


def describe_session(session: PlaySession) -> List[str]:
    """
    Summary lines for one session.

    Shared fields come first, followed by the fields that belong to the
    session's kind.
    """
    lines = [
        f"Type: {session.kind.label}",
        f"Location: {session.location}",
        f"Duration (minutes): {session.duration_minutes}",
        f"Difficulty: {session.difficulty.label}",
    ]

    if session.kind == SessionKind.COMBAT:
        lines.append(f"Enemies Defeated: {session.enemies_defeated}")
        lines.append(f"Gold Earned: {session.loot.gold_earned}")
        lines.append(f"Rare Item Found: {'Yes' if session.loot.rare_item_found else 'No'}")
    elif session.kind == SessionKind.EXPLORATION:
        lines.append(f"Areas Discovered: {session.areas_discovered}")
        lines.append(f"Gold Earned: {session.loot.gold_earned}")

    return lines


def render_statistics(character: Character, ledger: SessionLedger) -> str:
    """Formatted statistics block for the console."""
    lines = [
        "=" * 46,
        "  SESSION STATISTICS",
        "=" * 46,
        f"  Sessions:          {ledger.count()} / {ledger.capacity}",
        f"  Combat:            {len(ledger.sessions_of_kind(SessionKind.COMBAT))}",
        f"  Exploration:       {len(ledger.sessions_of_kind(SessionKind.EXPLORATION))}",
        "",
        f"  Total Hours:       {ledger.total_hours():.2f}",
        f"  Average Hours:     {ledger.average_hours():.2f}",
        f"  Longest Session:   {ledger.longest_session():.2f} h",
        "",
        f"  Total Enemies:     {ledger.total_enemies()}",
        f"  Avg Enemies:       {ledger.average_enemies():.2f}",
        f"  Kills/Hour:        {ledger.kill_rate():.2f}",
        "",
        f"  Gold Earned:       {ledger.total_gold_earned()}",
        f"  Rare Items:        {ledger.rare_items_found()}",
        f"  Gold/Hour:         {gold_per_hour(character.gold, ledger.total_hours()):.2f}",
        "=" * 46,
    ]
    return "\n".join(lines)


def render_report(character: Character, ledger: SessionLedger) -> str:
    """
    Full plain-text report.

    Layout: title line, character fields, then one fixed-width row per
    session numbered in insertion order.
    """
    lines = [REPORT_TITLE, ""]
    lines.append(f"Character: {character.name}")
    lines.append(f"Level: {character.level}")
    lines.append(f"Gold: {character.gold:.2f}")
    lines.append(f"Difficulty: {character.difficulty.label}")
    lines.append("")

    if len(ledger) == 0:
        lines.append("No sessions recorded.")
        return "\n".join(lines) + "\n"

    header = (
        f"{'#':>3}  {'Type':<12}{'Location':<24}{'Minutes':>8}"
        f"{'Enemies':>9}{'Areas':>7}{'Gold':>8}  {'Rare':<4}"
    )
    lines.append(header)
    lines.append("-" * len(header))

    for index, session in enumerate(ledger, start=1):
        rare = "Yes" if session.loot.rare_item_found else "No"
        row = (
            f"{index:>3}  {session.kind.label:<12}{session.location[:23]:<24}"
            f"{session.duration_minutes:>8}{session.enemies_defeated:>9}"
            f"{session.areas_discovered:>7}{session.loot.gold_earned:>8}  {rare}"
        )
        lines.append(row)

    lines.append("")
    lines.append(f"Total Hours: {ledger.total_hours():.2f}")
    lines.append(f"Total Enemies: {ledger.total_enemies()}")
    lines.append(f"Kill Rate: {ledger.kill_rate():.2f} per hour")
    lines.append(f"Longest Session: {ledger.longest_session():.2f} hours")

    return "\n".join(lines) + "\n"


class ReportWriter:
    """Writes the adventure report to a text file."""

    def __init__(self, path: Union[str, Path] = "report.txt"):
        self.path = Path(path)
        self.log = get_logger()

    def save(self, character: Character, ledger: SessionLedger) -> Path:
        """
        Render and write the report.

        Args:
            character: Character the report is for
            ledger: Recorded sessions

        Returns:
            Path of the written file

        Raises:
            ReportError: If the file cannot be written
        """
        content = render_report(character, ledger)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                f.write(content)
        except OSError as e:
            raise ReportError(f"Could not write report to {self.path}: {e}")

        self.log.info(f"Report with {len(ledger)} sessions saved to {self.path}")
        return self.path
