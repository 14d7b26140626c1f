"""Data models, session ledger and configuration."""

from .config import ConfigManager, ConfigError
from .ledger import DEFAULT_CAPACITY, SessionLedger, gold_per_hour, recommend_difficulty
from .models import (
    Character,
    Difficulty,
    LootInfo,
    PlaySession,
    SessionKind,
    TrackerConfig,
)

__all__ = [
    "Character",
    "ConfigError",
    "ConfigManager",
    "DEFAULT_CAPACITY",
    "Difficulty",
    "LootInfo",
    "PlaySession",
    "SessionKind",
    "SessionLedger",
    "TrackerConfig",
    "gold_per_hour",
    "recommend_difficulty",
]
