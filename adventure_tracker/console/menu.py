"""Interactive console menu for Adventure Tracker."""

from enum import Enum
from typing import Optional

import click

from adventure_tracker.console.prompts import (
    get_choice,
    get_valid_double,
    get_valid_int,
    get_valid_string,
    get_yes_no,
)
from adventure_tracker.console.report import (
    ReportError,
    ReportWriter,
    describe_character,
    describe_session,
    render_statistics,
)
from adventure_tracker.data.ledger import SessionLedger
from adventure_tracker.data.models import (
    Character,
    Difficulty,
    LootInfo,
    PlaySession,
    SessionKind,
    TrackerConfig,
)
from adventure_tracker.utils.logger import get_logger


class MenuOption(Enum):
    """Main menu entries, numbered as shown."""
    ADD_SESSION = 1
    VIEW_SESSIONS = 2
    VIEW_STATISTICS = 3
    RECOMMEND = 4
    SAVE_REPORT = 5
    QUIT = 6


MENU_LABELS = {
    MenuOption.ADD_SESSION: "Add Session",
    MenuOption.VIEW_SESSIONS: "View Session Summary",
    MenuOption.VIEW_STATISTICS: "View Statistics",
    MenuOption.RECOMMEND: "Recommend Difficulty",
    MenuOption.SAVE_REPORT: "Save Report to File",
    MenuOption.QUIT: "Quit",
}


class TrackerMenu:
    """
    Drives one tracker run from the console.

    Collects the character, then loops over the main menu until the
    user quits. All statistics come from the SessionLedger; this class
    only gathers input and prints results.
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        ledger: Optional[SessionLedger] = None,
        report_writer: Optional[ReportWriter] = None,
    ):
        """
        Initialize the menu.

        Args:
            config: Tracker settings (limits and report path)
            ledger: Session ledger, created from config if omitted
            report_writer: Report writer, created from config if omitted
        """
        self.config = config or TrackerConfig()
        if ledger is None:
            ledger = SessionLedger(capacity=self.config.max_sessions)
        self.ledger = ledger
        self.report_writer = report_writer or ReportWriter(self.config.report_path)
        self.character: Optional[Character] = None
        self.log = get_logger()

    def run(self) -> None:
        """Run character creation and the main menu loop."""
        self.display_banner()
        self.character = self.create_character()
        self.display_character_summary(self.character)

        while True:
            self.display_menu()
            choice = get_valid_int(f"Enter choice (1-{len(MenuOption)}):", 1, len(MenuOption))
            option = MenuOption(choice)

            if option == MenuOption.QUIT:
                click.echo("Exiting Adventure Tracker. Goodbye!")
                break

            self.handle(option)

        self.log.info(f"Tracker closed with {self.ledger.count()} sessions recorded")

    def handle(self, option: MenuOption) -> None:
        """Dispatch a main menu choice."""
        if option == MenuOption.ADD_SESSION:
            self.add_session()
        elif option == MenuOption.VIEW_SESSIONS:
            self.display_sessions()
        elif option == MenuOption.VIEW_STATISTICS:
            self.display_statistics()
        elif option == MenuOption.RECOMMEND:
            self.recommend_difficulty()
        elif option == MenuOption.SAVE_REPORT:
            self.save_report()

    def display_banner(self) -> None:
        click.echo("==============================================")
        click.echo("     Baldur's Gate 3 - Adventure Tracker")
        click.echo(" Track your character's journey and progress")
        click.echo("==============================================")
        click.echo("")

    def display_menu(self) -> None:
        click.echo("")
        click.echo("=== Main Menu ===")
        for option in MenuOption:
            click.echo(f"{option.value}. {MENU_LABELS[option]}")
        click.echo("")

    def create_character(self) -> Character:
        """Collect and validate the character sheet."""
        click.echo("=== Character Creation ===")
        click.echo("")

        name = get_valid_string("Enter your character name:")
        level = get_valid_int(
            f"Enter character level ({self.config.min_level}-{self.config.max_level}):",
            self.config.min_level,
            self.config.max_level,
        )
        gold = get_valid_double("Enter starting gold:", 0.0)

        click.echo("")
        click.echo("Select Difficulty:")
        difficulty = get_choice("Enter choice (1-3):", Difficulty)

        character = Character(name=name, level=level, gold=gold, difficulty=difficulty)
        self.log.info(f"Character created: {name} (level {level}, {difficulty.label})")

        click.echo("")
        click.echo("Character created successfully!")
        click.echo("")
        return character

    def display_character_summary(self, character: Character) -> None:
        for line in describe_character(character):
            click.echo(line)
        click.echo("")

    def add_session(self) -> bool:
        """
        Collect one session and record it.

        Returns:
            True if the session was recorded
        """
        if self.ledger.is_full():
            click.echo("Session limit reached.")
            return False

        click.echo("")
        kind = get_choice("Choose session type:", SessionKind)

        location = get_valid_string("Enter location:")
        duration = get_valid_int(
            "Enter duration (minutes):", 1, self.config.max_duration_minutes
        )

        click.echo("Difficulty:")
        difficulty = get_choice("Choice:", Difficulty)

        gold = get_valid_int("Gold earned:", 0, self.config.max_gold_earned)
        rare = get_yes_no("Rare item found?")
        loot = LootInfo(gold_earned=gold, rare_item_found=rare)

        if kind == SessionKind.COMBAT:
            enemies = get_valid_int("Enemies defeated:", 0, self.config.max_enemies)
            session = PlaySession.combat(location, duration, enemies, difficulty, loot)
        else:
            areas = get_valid_int("Areas discovered:", 0, self.config.max_areas)
            session = PlaySession.exploration(location, duration, areas, difficulty, loot)

        if not self.ledger.add(session):
            click.echo("Session limit reached.")
            return False

        click.echo("Session added.")
        return True

    def display_sessions(self) -> None:
        if len(self.ledger) == 0:
            click.echo("No sessions recorded.")
            return

        click.echo("")
        click.echo("=== Session Summary ===")
        for index, session in enumerate(self.ledger, start=1):
            click.echo(f"Session {index}:")
            for line in describe_session(session):
                click.echo(line)
            click.echo("-----------------")

    def display_statistics(self) -> None:
        if len(self.ledger) == 0:
            click.echo("No sessions recorded.")
            return

        click.echo(render_statistics(self.character, self.ledger))

    def recommend_difficulty(self) -> Optional[Difficulty]:
        """Print and return the recommendation for the current sessions."""
        recommendation = self.ledger.recommend(self.character.level)
        if recommendation is None:
            click.echo("No sessions available.")
            return None

        self.log.debug(
            f"Recommendation for level {self.character.level}, "
            f"{self.ledger.average_hours():.2f} h/session: {recommendation.label}"
        )
        click.echo("")
        click.echo("=== Difficulty Recommendation ===")
        click.echo(recommendation.label)
        return recommendation

    def save_report(self) -> bool:
        """
        Write the report file.

        Returns:
            True if the report was written
        """
        try:
            path = self.report_writer.save(self.character, self.ledger)
        except ReportError as e:
            self.log.error(str(e))
            click.echo("Could not save report.")
            return False

        click.echo(f"Report saved to {path}")
        return True
