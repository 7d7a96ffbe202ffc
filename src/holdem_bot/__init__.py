#!/usr/bin/env python3
"""
holdem_bot: decision engine and action pacing for Texas Hold'em table bots.

Public API:
    - choose_bot_action: Pick one legal action for a bot seat
    - enqueue_bot_action: Run a callback on the shared, delayed action queue
    - DecisionEngine / ActionScheduler / HoldemBot: Injectable building blocks
"""

from holdem_bot.models import Card, Player, PlayerStats, DecisionContext, Decision, DecisionDiagnostics
from holdem_bot.advisor.decision_engine import DecisionEngine, choose_bot_action
from holdem_bot.scheduler.action_scheduler import ActionScheduler, enqueue_bot_action, BOT_ACTION_DELAY
from holdem_bot.bot import HoldemBot

__version__ = "0.1.0"

__all__ = [
    'Card',
    'Player',
    'PlayerStats',
    'DecisionContext',
    'Decision',
    'DecisionDiagnostics',
    'DecisionEngine',
    'choose_bot_action',
    'ActionScheduler',
    'enqueue_bot_action',
    'BOT_ACTION_DELAY',
    'HoldemBot'
]
