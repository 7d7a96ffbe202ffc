#!/usr/bin/env python3
"""
HoldemBot: wires the decision engine to the action scheduler.

The game loop calls take_turn when a bot seat is due to act. The decision is
made immediately; the table sees it only when the scheduler runs the
apply callback after its delay.
"""

import logging
from typing import Any, Callable, Optional
from holdem_bot.models.player import Player
from holdem_bot.models.decision_context import DecisionContext
from holdem_bot.models.decision import Decision
from holdem_bot.advisor.decision_engine import DecisionEngine
from holdem_bot.scheduler.action_scheduler import ActionScheduler

logger = logging.getLogger(__name__)

ApplyAction = Callable[[Player, Decision], Any]


class HoldemBot:
    """Decides and schedules actions for bot seats."""

    def __init__(self, engine: Optional[DecisionEngine] = None,
                 scheduler: Optional[ActionScheduler] = None):
        self.engine = engine or DecisionEngine()
        self.scheduler = scheduler or ActionScheduler()

    def decide(self, player: Player, context: DecisionContext) -> Decision:
        """Choose the action for a bot seat without scheduling it."""
        return self.engine.choose_bot_action(player, context)

    def take_turn(self, player: Player, context: DecisionContext,
                  apply_action: ApplyAction) -> Decision:
        """
        Decide now and let the table observe the move after the delay.

        Args:
            player: Acting bot seat
            context: Betting snapshot
            apply_action: Called as apply_action(player, decision) by the scheduler

        Returns:
            The scheduled decision
        """
        decision = self.decide(player, context)
        logger.info(f"{player.name} will {decision}")
        self.scheduler.enqueue(lambda: apply_action(player, decision))
        return decision
