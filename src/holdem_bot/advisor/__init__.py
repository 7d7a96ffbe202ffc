#!/usr/bin/env python3
"""
Advisor module for bot decision-making.

Public API:
    - HandEvaluator: Preflop Chen scoring and Treys-ranked postflop strength
    - BoardAnalyzer: Top pair / overpair, draws and board texture
    - OpponentModel: Weighted opponent tendency signals
    - BetSizer: Value, bluff, protection and overbet sizing
    - DecisionEngine: Central policy combining all signals into one action
"""

from holdem_bot.advisor.hand_evaluator import HandEvaluator, preflop_hand_score
from holdem_bot.advisor.board_analyzer import BoardAnalyzer, BoardContext
from holdem_bot.advisor.opponent_model import OpponentModel, OpponentProfile
from holdem_bot.advisor.bet_sizing import BetSizer, SizingInputs
from holdem_bot.advisor.decision_engine import DecisionEngine, choose_bot_action

__all__ = [
    'HandEvaluator',
    'preflop_hand_score',
    'BoardAnalyzer',
    'BoardContext',
    'OpponentModel',
    'OpponentProfile',
    'BetSizer',
    'SizingInputs',
    'DecisionEngine',
    'choose_bot_action'
]
