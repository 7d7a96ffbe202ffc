#!/usr/bin/env python3
"""
Hand strength evaluation on a 0-10 scale.

Preflop hands are scored with a simplified Chen formula. Postflop hands are
ranked with the Treys evaluator and its hand class is mapped onto the same
scale, so downstream code can compare strength / 10 regardless of street.
"""

import logging
from typing import List, NamedTuple
from treys import Evaluator
from holdem_bot.models.card import Card, RANK_ORDER, parse_cards

logger = logging.getLogger(__name__)

MAX_STRENGTH = 10

# Chen base score by the higher hole card
CHEN_BASE = {
    'A': 10, 'K': 8, 'Q': 7, 'J': 6, 'T': 5, '9': 4.5, '8': 4,
    '7': 3.5, '6': 3, '5': 2.5, '4': 2, '3': 1.5, '2': 1
}

# Penalty by the number of ranks between the two hole cards
GAP_PENALTY = {0: 0, 1: 1, 2: 2, 3: 4}
MAX_GAP_PENALTY = 5

ROYAL_FLUSH_SCORE = 1


class RankedHand(NamedTuple):
    """Result of a Treys evaluation mapped onto the bot's strength scale."""
    score: int
    rank_class: int
    name: str
    strength: int


def preflop_hand_score(card_a: str, card_b: str) -> float:
    """
    Score two hole cards with a simplified Chen formula.

    Args:
        card_a: First hole card code (e.g. "AS")
        card_b: Second hole card code

    Returns:
        Score clamped to [0, 10]; identical for either card order
    """
    first, second = Card.from_code(card_a), Card.from_code(card_b)
    high, low = (first, second) if first.value >= second.value else (second, first)

    score = CHEN_BASE[high.rank]
    if high.rank == low.rank:
        score = max(score * 2, 5)

    if high.suit == low.suit:
        score += 2

    gap = RANK_ORDER.index(high.rank) - RANK_ORDER.index(low.rank) - 1
    if gap > 0:
        score -= GAP_PENALTY.get(gap, MAX_GAP_PENALTY)

    # connected cards below a queen play better than the raw score suggests
    if gap <= 1 and RANK_ORDER.index(high.rank) < RANK_ORDER.index('Q'):
        score += 1

    return min(MAX_STRENGTH, max(0, score))


class HandEvaluator:
    """Scores hole cards preflop and ranked hands postflop."""

    def __init__(self):
        """Initialize hand evaluator with a Treys evaluator."""
        self.evaluator = Evaluator()
        logger.info("Initialized hand evaluator with Treys")

    def evaluate(self, hole: List[str], board: List[str]) -> RankedHand:
        """
        Rank hole + board cards with Treys.

        Args:
            hole: Two hole card codes
            board: Three to five community card codes

        Returns:
            RankedHand with the Treys score, class, name and 1-10 strength

        Raises:
            ValueError: If fewer than five cards are available in total
        """
        if len(hole) != 2 or len(board) < 3:
            raise ValueError(f"Need 2 hole cards and at least 3 board cards, got {len(hole)} and {len(board)}")

        hand_treys = [card.to_treys() for card in parse_cards(hole)]
        board_treys = [card.to_treys() for card in parse_cards(board)]

        score = self.evaluator.evaluate(board_treys, hand_treys)
        rank_class = self.evaluator.get_rank_class(score)

        # Treys classes run 1 (straight flush) to 9 (high card)
        if score == ROYAL_FLUSH_SCORE:
            return RankedHand(score, rank_class, "Royal Flush", MAX_STRENGTH)

        name = self.evaluator.class_to_string(rank_class)
        return RankedHand(score, rank_class, name, MAX_STRENGTH - rank_class)

    def hand_strength(self, hole: List[str], board: List[str]) -> float:
        """
        Strength of the hand on the 0-10 scale.

        Boards with fewer than three cards are scored preflop.
        """
        if len(board) < 3:
            return preflop_hand_score(hole[0], hole[1])
        return self.evaluate(hole, board).strength

    def hand_name(self, hole: List[str], board: List[str]) -> str:
        """Category name of the best hand, or 'preflop' before the flop."""
        if len(board) < 3:
            return "preflop"
        return self.evaluate(hole, board).name
