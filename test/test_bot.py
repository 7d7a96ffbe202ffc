#!/usr/bin/env python3
"""
Tests for HoldemBot wiring and the command-line demo.
"""

import pytest
from unittest.mock import MagicMock

from holdem_bot import HoldemBot, DecisionEngine, ActionScheduler, Decision
from holdem_bot.__main__ import main


class TestHoldemBot:
    """Test cases for HoldemBot."""

    def test_take_turn_applies_after_delay(self, tables, fake_timers):
        """Test that the decision reaches the table only when the timer fires."""
        bot = HoldemBot(
            engine=DecisionEngine(rng=lambda: 0.99),
            scheduler=ActionScheduler(timer_factory=fake_timers)
        )
        player = tables.bot(["AC", "AD"], round_bet=20)
        context = tables.heads_up(player, current_bet=20)
        apply_action = MagicMock()

        decision = bot.take_turn(player, context, apply_action)

        assert decision == Decision.raise_by(20)
        apply_action.assert_not_called()

        fake_timers.run_all()
        apply_action.assert_called_once_with(player, decision)

    def test_turns_are_serialized(self, tables, fake_timers):
        bot = HoldemBot(
            engine=DecisionEngine(rng=lambda: 0.99),
            scheduler=ActionScheduler(timer_factory=fake_timers)
        )
        seen = []
        first = tables.bot(["AC", "AD"], round_bet=20)
        second = tables.bot(["7C", "2D"], round_bet=20)

        bot.take_turn(first, tables.heads_up(first, current_bet=20), lambda p, d: seen.append(str(d)))
        bot.take_turn(second, tables.heads_up(second, current_bet=20), lambda p, d: seen.append(str(d)))

        assert len(fake_timers.armed) == 1
        fake_timers.run_all()
        assert seen == ["raise 20", "check"]

    def test_decide_does_not_schedule(self, tables, fake_timers):
        scheduler = ActionScheduler(timer_factory=fake_timers)
        bot = HoldemBot(engine=DecisionEngine(rng=lambda: 0.99), scheduler=scheduler)
        player = tables.bot(["7C", "2D"], round_bet=20)

        assert bot.decide(player, tables.heads_up(player, current_bet=20)) == Decision.check()
        assert scheduler.pending == 0


class TestCommandLine:
    """Test cases for the demo entry point."""

    def test_aces_raise(self, capsys):
        assert main(["--hole", "AC", "AD", "--seed", "7"]) == 0

        out = capsys.readouterr().out
        assert "Decision for Bot" in out
        assert "=> raise" in out
        assert "strength" in out

    def test_postflop(self, capsys):
        code = main(["--hole", "KH", "9C", "--board", "KC", "7D", "2S",
                     "--pot", "100", "--to-call", "20", "--opponents", "1", "--seed", "1"])

        assert code == 0
        assert "=> call 20" in capsys.readouterr().out

    def test_invalid_card(self, capsys):
        assert main(["--hole", "XX", "AD"]) == 2
        assert "Invalid table" in capsys.readouterr().err

    def test_invalid_board_length(self):
        with pytest.raises(SystemExit):
            main(["--hole", "AC", "AD", "--board", "KC", "7D"])
