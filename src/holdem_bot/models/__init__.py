#!/usr/bin/env python3
"""
Models package for the hold'em bot.

Provides Pydantic models for the inputs and outputs of a bot decision.
"""

from .card import Card, parse_cards
from .player import Player, PlayerStats
from .decision_context import DecisionContext
from .decision import Decision, DecisionDiagnostics

__all__ = [
    'Card',
    'parse_cards',
    'Player',
    'PlayerStats',
    'DecisionContext',
    'Decision',
    'DecisionDiagnostics'
]
