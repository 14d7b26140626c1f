"""Data models for characters, play sessions and tracker settings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Difficulty(Enum):
    """Difficulty tiers. Values double as menu choice numbers."""
    EXPLORER = 1
    BALANCED = 2
    TACTICIAN = 3

    @property
    def label(self) -> str:
        """Display name, e.g. 'Explorer'."""
        return self.name.capitalize()


class SessionKind(Enum):
    """Kinds of play session."""
    COMBAT = 1
    EXPLORATION = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Character:
    """Character sheet, fixed for the length of a run."""
    name: str
    level: int
    gold: float
    difficulty: Difficulty = Difficulty.BALANCED


@dataclass(frozen=True)
class LootInfo:
    """Loot collected during a single session."""
    gold_earned: int = 0
    rare_item_found: bool = False

    def is_profitable(self) -> bool:
        """True when the session earned any gold."""
        return self.gold_earned > 0


@dataclass(frozen=True)
class PlaySession:
    """
    One recorded play interval.

    The kind tag decides which of the kind-specific counters is
    meaningful: enemies_defeated for combat, areas_discovered for
    exploration. The other one is always 0. Use the combat() and
    exploration() constructors rather than building one directly.
    """
    kind: SessionKind
    location: str
    duration_minutes: int
    difficulty: Difficulty = Difficulty.BALANCED
    loot: LootInfo = field(default_factory=LootInfo)
    enemies_defeated: int = 0
    areas_discovered: int = 0

    @classmethod
    def combat(
        cls,
        location: str,
        duration_minutes: int,
        enemies_defeated: int,
        difficulty: Difficulty = Difficulty.BALANCED,
        loot: Optional[LootInfo] = None,
    ) -> "PlaySession":
        """Create a combat session."""
        return cls(
            kind=SessionKind.COMBAT,
            location=location,
            duration_minutes=duration_minutes,
            difficulty=difficulty,
            loot=loot or LootInfo(),
            enemies_defeated=enemies_defeated,
        )

    @classmethod
    def exploration(
        cls,
        location: str,
        duration_minutes: int,
        areas_discovered: int,
        difficulty: Difficulty = Difficulty.BALANCED,
        loot: Optional[LootInfo] = None,
    ) -> "PlaySession":
        """Create an exploration session."""
        return cls(
            kind=SessionKind.EXPLORATION,
            location=location,
            duration_minutes=duration_minutes,
            difficulty=difficulty,
            loot=loot or LootInfo(),
            areas_discovered=areas_discovered,
        )

    @property
    def hours(self) -> float:
        """Session duration in hours."""
        return self.duration_minutes / 60.0


@dataclass
class TrackerConfig:
    """Tracker settings."""

    # Limits
    max_sessions: int = 10
    min_level: int = 1
    max_level: int = 12
    max_enemies: int = 1000
    max_duration_minutes: int = 600
    max_areas: int = 100
    max_gold_earned: int = 100000

    # Report
    report_path: str = "report.txt"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_retention_days: int = 7
