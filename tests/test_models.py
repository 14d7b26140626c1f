"""Tests for character and session models."""

import dataclasses

import pytest

from adventure_tracker.data.models import (
    Character,
    Difficulty,
    LootInfo,
    PlaySession,
    SessionKind,
    TrackerConfig,
)
from adventure_tracker.utils.logger import setup_logger, get_logger


def test_difficulty_enum():
    """Test Difficulty members, choice numbers and labels."""
    log = get_logger()
    log.info("Testing Difficulty enum...")

    assert Difficulty(1) == Difficulty.EXPLORER
    assert Difficulty(2) == Difficulty.BALANCED
    assert Difficulty(3) == Difficulty.TACTICIAN
    assert [d.label for d in Difficulty] == ["Explorer", "Balanced", "Tactician"]

    log.info("PASSED: Difficulty enum")


def test_session_kind_enum():
    """Test SessionKind members."""
    log = get_logger()
    log.info("Testing SessionKind enum...")

    assert len(SessionKind) == 2
    assert SessionKind(1).label == "Combat"
    assert SessionKind(2).label == "Exploration"

    log.info("PASSED: SessionKind enum")


def test_loot_info():
    """Test LootInfo defaults and profitability."""
    log = get_logger()
    log.info("Testing LootInfo...")

    loot = LootInfo(100, True)
    assert loot.gold_earned == 100
    assert loot.rare_item_found is True

    assert LootInfo().is_profitable() is False
    assert LootInfo(0, False).is_profitable() is False
    assert LootInfo(25, False).is_profitable() is True

    log.info("PASSED: LootInfo")


def test_combat_session():
    """Test combat session construction."""
    log = get_logger()
    log.info("Testing combat session...")

    session = PlaySession.combat(
        "Ruins", 30, 8, difficulty=Difficulty.TACTICIAN, loot=LootInfo(50, True)
    )

    assert session.kind == SessionKind.COMBAT
    assert session.location == "Ruins"
    assert session.duration_minutes == 30
    assert session.difficulty == Difficulty.TACTICIAN
    assert session.enemies_defeated == 8
    assert session.areas_discovered == 0
    assert session.loot.gold_earned == 50
    assert session.hours == 0.5

    log.info("PASSED: combat session")


def test_exploration_session():
    """Test exploration session construction."""
    log = get_logger()
    log.info("Testing exploration session...")

    session = PlaySession.exploration("Forest", 60, 3, difficulty=Difficulty.EXPLORER)

    assert session.kind == SessionKind.EXPLORATION
    assert session.location == "Forest"
    assert session.duration_minutes == 60
    assert session.difficulty == Difficulty.EXPLORER
    assert session.areas_discovered == 3
    assert session.enemies_defeated == 0
    assert session.loot == LootInfo()
    assert session.hours == 1.0

    log.info("PASSED: exploration session")


def test_records_are_immutable():
    """Test characters and sessions cannot be changed after creation."""
    log = get_logger()
    log.info("Testing immutability...")

    character = Character(name="Tav", level=4, gold=120.5)
    session = PlaySession.combat("Camp", 45, 3)

    with pytest.raises(dataclasses.FrozenInstanceError):
        character.level = 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.enemies_defeated = 100

    assert character.difficulty == Difficulty.BALANCED

    log.info("PASSED: immutability")


def test_tracker_config_defaults():
    """Test default tracker limits."""
    log = get_logger()
    log.info("Testing TrackerConfig defaults...")

    config = TrackerConfig()

    assert config.max_sessions == 10
    assert config.min_level == 1
    assert config.max_level == 12
    assert config.max_enemies == 1000
    assert config.max_duration_minutes == 600
    assert config.report_path == "report.txt"

    log.info("PASSED: TrackerConfig defaults")


def run_all_tests():
    """Run all model tests."""
    setup_logger(level="INFO", file=False)
    log = get_logger()

    log.info("=" * 50)
    log.info("Model Tests")
    log.info("=" * 50)

    tests = [
        ("Difficulty Enum", test_difficulty_enum),
        ("SessionKind Enum", test_session_kind_enum),
        ("LootInfo", test_loot_info),
        ("Combat Session", test_combat_session),
        ("Exploration Session", test_exploration_session),
        ("Immutability", test_records_are_immutable),
        ("TrackerConfig Defaults", test_tracker_config_defaults),
    ]

    passed = 0
    failed = 0

    for name, test_func in tests:
        try:
            log.info(f"\n--- {name} ---")
            test_func()
            passed += 1
        except Exception as e:
            log.error(f"FAILED: {name} - {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    log.info("\n" + "=" * 50)
    log.info(f"Results: {passed} passed, {failed} failed")
    log.info("=" * 50)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    exit(0 if success else 1)
