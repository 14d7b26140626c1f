"""Bounded session ledger and the statistics derived from it."""

from typing import Iterator, List, Optional, Tuple

from adventure_tracker.data.models import Difficulty, PlaySession, SessionKind
from adventure_tracker.utils.logger import get_logger


DEFAULT_CAPACITY = 10


def recommend_difficulty(level: int, avg_hours: float) -> Difficulty:
    """
    Recommend a difficulty from character level and average session length.

    Rules are checked in order and the first match wins. Combinations not
    covered by a rule (e.g. a low level character with short sessions)
    fall back to Balanced.

    Args:
        level: Character level
        avg_hours: Average hours per session

    Returns:
        Recommended Difficulty
    """
    if level < 5 and avg_hours > 4.0:
        return Difficulty.EXPLORER
    elif 5 <= level <= 8 and avg_hours >= 3.0:
        return Difficulty.BALANCED
    elif level > 8 and avg_hours >= 5.0:
        return Difficulty.TACTICIAN
    else:
        return Difficulty.BALANCED


def gold_per_hour(gold: float, total_hours: float) -> float:
    """Gold earned per hour played, 0 for no playtime or negative gold."""
    if total_hours <= 0.0:
        return 0.0
    if gold < 0.0:
        return 0.0
    return gold / total_hours


class SessionLedger:
    """
    Ordered, fixed-capacity collection of play sessions.

    Sessions are kept in insertion order, which defines the session
    index shown in summaries and reports. Once the ledger is full,
    further additions are rejected. Sessions are never removed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty ledger.

        Args:
            capacity: Maximum number of sessions

        Raises:
            ValueError: If capacity is less than 1
        """
        if capacity < 1:
            raise ValueError(f"Ledger capacity must be at least 1, got {capacity}")

        self.log = get_logger()
        self._capacity = capacity
        self._sessions: List[PlaySession] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, session: PlaySession) -> bool:
        """
        Append a session if there is room.

        Args:
            session: Session to record

        Returns:
            True if added, False if the ledger is full
        """
        if self.is_full():
            self.log.warning(
                f"Ledger full ({self._capacity} sessions), "
                f"session at {session.location} not recorded"
            )
            return False

        self._sessions.append(session)
        self.log.debug(
            f"Session #{len(self._sessions)} recorded: {session.kind.label} "
            f"at {session.location} ({session.duration_minutes} min)"
        )
        return True

    def count(self) -> int:
        """Number of recorded sessions."""
        return len(self._sessions)

    def is_full(self) -> bool:
        return len(self._sessions) >= self._capacity

    def sessions(self) -> Tuple[PlaySession, ...]:
        """Snapshot of recorded sessions in insertion order."""
        return tuple(self._sessions)

    def sessions_of_kind(self, kind: SessionKind) -> Tuple[PlaySession, ...]:
        """Sessions with the given kind tag, in insertion order."""
        return tuple(s for s in self._sessions if s.kind == kind)

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[PlaySession]:
        return iter(tuple(self._sessions))

    # Statistics

    def total_minutes(self) -> int:
        return sum(s.duration_minutes for s in self._sessions)

    def total_hours(self) -> float:
        """Total playtime across all sessions in hours."""
        return self.total_minutes() / 60.0

    def average_hours(self) -> float:
        """Average session length in hours, 0 when empty."""
        if not self._sessions:
            return 0.0
        return self.total_hours() / len(self._sessions)

    def total_enemies(self) -> int:
        """Enemies defeated across all sessions."""
        return sum(s.enemies_defeated for s in self._sessions)

    def average_enemies(self) -> float:
        """Enemies defeated per session, 0 when empty."""
        if not self._sessions:
            return 0.0
        return self.total_enemies() / len(self._sessions)

    def kill_rate(self) -> float:
        """Enemies defeated per hour played, 0 without playtime."""
        hours = self.total_hours()
        if hours == 0:
            return 0.0
        return self.total_enemies() / hours

    def longest_session(self) -> float:
        """Longest session in hours, 0 when empty."""
        if not self._sessions:
            return 0.0

        longest = self._sessions[0].duration_minutes
        for session in self._sessions[1:]:
            if session.duration_minutes > longest:
                longest = session.duration_minutes

        return longest / 60.0

    def total_gold_earned(self) -> int:
        return sum(s.loot.gold_earned for s in self._sessions)

    def rare_items_found(self) -> int:
        """Number of sessions that turned up a rare item."""
        return sum(1 for s in self._sessions if s.loot.rare_item_found)

    def recommend(self, level: int) -> Optional[Difficulty]:
        """
        Recommend a difficulty from the recorded sessions.

        Args:
            level: Character level

        Returns:
            Recommended Difficulty, or None if no sessions are recorded
        """
        if not self._sessions:
            return None
        return recommend_difficulty(level, self.average_hours())
