#!/usr/bin/env python3
"""
Shared fixtures for hold'em bot tests.

Provides table builders, pinned randomness sources and a fake timer so
decisions and scheduling can be tested deterministically.
"""

import pytest
from typing import Dict, List, Optional

from holdem_bot.config.settings import Settings
from holdem_bot.models.player import Player, PlayerStats
from holdem_bot.models.decision_context import DecisionContext


class ScriptedRandom:
    """Returns scripted values in order, then a fixed fallback."""

    def __init__(self, values: List[float], fallback: float = 0.99):
        self.values = list(values)
        self.fallback = fallback
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.fallback


class FakeTimers:
    """Timer factory that records armed timers and fires them on demand."""

    def __init__(self):
        self.armed = []
        self.now = 0.0

    def __call__(self, seconds, callback):
        self.armed.append((seconds, callback))
        return len(self.armed)

    def fire(self):
        seconds, callback = self.armed.pop(0)
        self.now += seconds
        callback()

    def run_all(self, limit: int = 100):
        fired = 0
        while self.armed and fired < limit:
            self.fire()
            fired += 1
        return fired


class TableFixtures:
    """Builders for players and decision contexts."""

    @staticmethod
    def bot(cards: List[str], chips: int = 1000, round_bet: int = 0, seat: int = 1, **kwargs) -> Player:
        return Player(name="Bot", seat=seat, chips=chips, round_bet=round_bet, cards=cards, **kwargs)

    @staticmethod
    def opponent(seat: int, chips: int = 1000, round_bet: int = 0,
                 stats: Optional[Dict[str, int]] = None, **kwargs) -> Player:
        return Player(
            name=f"Opponent {seat}",
            seat=seat,
            chips=chips,
            round_bet=round_bet,
            stats=PlayerStats(**(stats or {})),
            **kwargs
        )

    @staticmethod
    def heads_up(bot: Player, board: Optional[List[str]] = None, current_bet: int = 0, pot: int = 30,
                 raises: int = 0, last_raise: int = 20, big_blind: int = 20,
                 opponent: Optional[Player] = None) -> DecisionContext:
        """Opponent on the button at seat 0, bot in the big blind at seat 1."""
        board = board or []
        opponent = opponent or TableFixtures.opponent(0, round_bet=current_bet, dealer=True)
        bot.big_blind = True
        return DecisionContext(
            current_bet=current_bet,
            pot=pot,
            small_blind=big_blind // 2,
            big_blind=big_blind,
            raises_this_round=raises,
            current_phase_index={0: 0, 3: 1, 4: 2, 5: 3}[len(board)],
            players=[opponent, bot],
            last_raise=last_raise,
            community_cards=board
        )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from default in-memory settings."""
    Settings.reset_instance()
    yield
    Settings.reset_instance()


@pytest.fixture
def tables():
    return TableFixtures


@pytest.fixture
def fake_timers():
    return FakeTimers()


@pytest.fixture
def scripted():
    return ScriptedRandom
