#!/usr/bin/env python3
"""
Board context analysis for postflop decisions.

Detects top pair and overpair, flush and straight draws, and measures how
wet the community cards are. All analysis needs at least three board cards;
shorter boards yield neutral results.
"""

import logging
from collections import Counter
from typing import List, Optional, NamedTuple
from holdem_bot.models.card import parse_cards
from holdem_bot.advisor.hand_evaluator import HandEvaluator

logger = logging.getLogger(__name__)

ACE_HIGH = 14
ACE_LOW = 1
MIN_BOARD_CARDS = 3

FLUSH_DRAW_OUTS = 9
OPEN_ENDED_OUTS = 8
GUTSHOT_OUTS = 4
MAX_OUTS = 15


class HandContext(NamedTuple):
    top_pair: bool = False
    over_pair: bool = False


class DrawPotential(NamedTuple):
    flush_draw: bool = False
    straight_draw: bool = False
    outs: int = 0


class BoardContext(NamedTuple):
    """Everything the decision engine needs to know about the board."""
    top_pair: bool = False
    over_pair: bool = False
    flush_draw: bool = False
    straight_draw: bool = False
    outs: int = 0
    texture_risk: float = 0.0

    @property
    def draw(self) -> bool:
        return self.flush_draw or self.straight_draw

    @property
    def label(self) -> str:
        if self.over_pair:
            return "overpair"
        if self.top_pair:
            return "top pair"
        if self.draw:
            return "draw"
        return "-"


def _straight_ranks(values: List[int]) -> List[int]:
    """Unique sorted ranks with the ace also counted low."""
    ranks = set(values)
    if ACE_HIGH in ranks:
        ranks.add(ACE_LOW)
    return sorted(ranks)


class BoardAnalyzer:
    """Analyzes hole cards against the community cards."""

    def __init__(self, hand_evaluator: Optional[HandEvaluator] = None):
        self.hand_evaluator = hand_evaluator or HandEvaluator()

    def analyze(self, hole: List[str], board: List[str]) -> BoardContext:
        """
        Full board context for a hand.

        Args:
            hole: Two hole card codes
            board: Community card codes

        Returns:
            BoardContext; neutral before the flop
        """
        if len(board) < MIN_BOARD_CARDS:
            return BoardContext()

        hand = self.analyze_hand_context(hole, board)
        draws = self.analyze_draw_potential(hole, board)
        texture = self.evaluate_board_texture(board)

        context = BoardContext(
            top_pair=hand.top_pair,
            over_pair=hand.over_pair,
            flush_draw=draws.flush_draw,
            straight_draw=draws.straight_draw,
            outs=draws.outs,
            texture_risk=texture
        )
        logger.debug(f"Board context for {hole} on {board}: {context}")
        return context

    @staticmethod
    def is_pocket_pair(hole: List[str]) -> bool:
        """Both hole cards share a rank."""
        cards = parse_cards(hole)
        return len(cards) == 2 and cards[0].rank == cards[1].rank

    def analyze_hand_context(self, hole: List[str], board: List[str]) -> HandContext:
        """
        Detect top pair or overpair.

        Only a best hand of exactly one pair qualifies: two pair or better is
        reported as neither.
        """
        if len(board) < MIN_BOARD_CARDS:
            return HandContext()

        if self.hand_evaluator.evaluate(hole, board).name != "Pair":
            return HandContext()

        cards = parse_cards(hole + board)
        counts = Counter(card.value for card in cards)
        pair_rank = max(value for value, count in counts.items() if count >= 2)
        highest_board = max(card.value for card in parse_cards(board))

        return HandContext(
            top_pair=pair_rank == highest_board,
            over_pair=self.is_pocket_pair(hole) and pair_rank > highest_board
        )

    def analyze_draw_potential(self, hole: List[str], board: List[str]) -> DrawPotential:
        """
        Detect flush and straight draws.

        A flush draw is exactly four cards of one suit without a made flush.
        A straight draw is a five-rank window missing exactly one rank; a made
        straight anywhere suppresses it.
        """
        if len(board) < MIN_BOARD_CARDS:
            return DrawPotential()

        cards = parse_cards(hole + board)

        suit_counts = Counter(card.suit for card in cards).values()
        flush_draw = max(suit_counts) < 5 and 4 in suit_counts

        present = set(_straight_ranks([card.value for card in cards]))
        made_straight = False
        open_ended = False
        gutshot = False
        for low in range(ACE_LOW, 11):
            window = range(low, low + 5)
            missing = [rank for rank in window if rank not in present]
            if not missing:
                made_straight = True
                break
            if len(missing) == 1:
                # open-ended only when the missing rank is an end card that can still come
                if missing[0] in (low, low + 4) and low != ACE_LOW and low + 4 != ACE_HIGH:
                    open_ended = True
                else:
                    gutshot = True

        straight_draw = (open_ended or gutshot) and not made_straight

        outs = 0
        if flush_draw:
            outs += FLUSH_DRAW_OUTS
        if straight_draw:
            outs += OPEN_ENDED_OUTS if open_ended else GUTSHOT_OUTS

        return DrawPotential(flush_draw, straight_draw, min(outs, MAX_OUTS))

    @staticmethod
    def evaluate_board_texture(board: List[str]) -> float:
        """
        Score how coordinated the board is.

        Averages pairing, suitedness and connectedness risk.

        Returns:
            Risk between 0 (dry) and 1 (very wet); 0 before the flop
        """
        if not board or len(board) < MIN_BOARD_CARDS:
            return 0.0

        cards = parse_cards(board)
        spread = len(cards) - 1

        max_rank_count = max(Counter(card.rank for card in cards).values())
        pair_risk = (max_rank_count - 1) / spread if max_rank_count > 1 else 0.0

        max_suit_count = max(Counter(card.suit for card in cards).values())
        suit_risk = (max_suit_count - 1) / spread

        ranks = _straight_ranks([card.value for card in cards])
        longest_run = 1
        run = 1
        for previous, current in zip(ranks, ranks[1:]):
            run = run + 1 if current == previous + 1 else 1
            longest_run = max(longest_run, run)
        connectedness = (longest_run - 2) / (len(cards) - 2) if longest_run >= 3 else 0.0

        texture_risk = (connectedness + suit_risk + pair_risk) / 3
        return max(0.0, min(1.0, texture_risk))
