#!/usr/bin/env python3
"""
Decision Engine for bot actions.

Combines hand strength, board context, opponent tendencies and bet sizing
into one legal action. The engine holds no state between decisions; all
randomness (tie-breaks, bluffs, slow plays, sizing jitter) is drawn from an
injected source so outcomes can be pinned in tests.

Decision order, first match wins:
    1. shove when committed (low SPR) or short-stacked preflop
    2. nothing to call: value raise or check
    3. facing a cheap bet with a strong hand: protection raise
    4. facing a bet with pot odds: call
    5. fold

Probabilistic overrides (all-in defense, bluffs, overbets, slow plays,
protection stabs) follow, and a final legality pass enforces the stack cap and
the minimum raise.
"""

import logging
import random
from typing import Callable, List, Optional
from holdem_bot.models.player import Player
from holdem_bot.models.decision_context import DecisionContext
from holdem_bot.models.decision import Decision, DecisionDiagnostics
from holdem_bot.models.card import Card
from holdem_bot.advisor.hand_evaluator import HandEvaluator
from holdem_bot.advisor.board_analyzer import BoardAnalyzer, BoardContext
from holdem_bot.advisor.opponent_model import OpponentModel
from holdem_bot.advisor.bet_sizing import BetSizer, SizingInputs
from holdem_bot.config.settings import Settings

logger = logging.getLogger(__name__)

DecisionObserver = Callable[[DecisionDiagnostics], None]

SHOVE_SPR = 1.2
SHOVE_STRENGTH = 0.65
SHORT_STACK_BLINDS = 10
SHORT_STACK_STRENGTH = 0.75
PREFLOP_MAX_STACK_RISK = 0.5
POSTFLOP_MAX_STACK_RISK = 0.7
PROTECTION_MAX_STACK_RISK = 1 / 3
OVERBET_STRENGTH = 0.95
OVERBET_SPR = 2
SLOW_PLAY_STRENGTH = 0.9
OVERRIDE_CHANCE = 0.3


def aggression_label(aggressiveness: float) -> str:
    """Describe an aggressiveness multiplier in words."""
    if aggressiveness >= 1.5:
        return "blazing"
    if aggressiveness >= 1.2:
        return "aggressive"
    if aggressiveness >= 1.0:
        return "balanced"
    if aggressiveness >= 0.8:
        return "passive"
    return "frozen"


class DecisionEngine:
    """Heuristic policy choosing one action for a bot seat."""

    def __init__(self, rng: Optional[Callable[[], float]] = None,
                 observer: Optional[DecisionObserver] = None,
                 hand_evaluator: Optional[HandEvaluator] = None):
        """
        Initialize decision engine with all strategy components.

        Args:
            rng: Uniform source in [0, 1); defaults to random.random
            observer: Called with the diagnostics of every decision
            hand_evaluator: Shared hand evaluator
        """
        self.settings = Settings()
        self.rng = rng or random.random
        self.observer = observer

        self.hand_evaluator = hand_evaluator or HandEvaluator()
        self.board_analyzer = BoardAnalyzer(self.hand_evaluator)
        self.opponent_model = OpponentModel()
        self.bet_sizer = BetSizer(lambda: self.rng())

        self.settings.create("bot.decision.max_raises_per_round", default=3)
        self.settings.create("bot.decision.strength_tie_delta", default=0.25)
        self.settings.create("bot.decision.odds_tie_delta", default=0.02)
        self.settings.create("bot.decision.opponent_threshold", default=3)
        self.settings.create("bot.decision.agg_factor", default=0.1)
        self.settings.create("bot.decision.threshold_factor", default=0.3)
        self.settings.create("bot.decision.allin_hand_preflop", default=0.85)
        self.settings.create("bot.decision.allin_hand_postflop", default=0.5)

        self.max_raises_per_round = self.settings.get("bot.decision.max_raises_per_round")
        self.strength_tie_delta = self.settings.get("bot.decision.strength_tie_delta")
        self.odds_tie_delta = self.settings.get("bot.decision.odds_tie_delta")
        self.opponent_threshold = self.settings.get("bot.decision.opponent_threshold")
        self.agg_factor = self.settings.get("bot.decision.agg_factor")
        self.threshold_factor = self.settings.get("bot.decision.threshold_factor")
        self.allin_hand_preflop = self.settings.get("bot.decision.allin_hand_preflop")
        self.allin_hand_postflop = self.settings.get("bot.decision.allin_hand_postflop")

        logger.info("Initialized decision engine with all components")

    def choose_bot_action(self, player: Player, context: DecisionContext) -> Decision:
        """
        Choose one legal action for the acting player.

        Args:
            player: The bot's seat
            context: Betting snapshot for this decision

        Returns:
            Decision; never raises for a validated context
        """
        need_to_call = context.need_to_call(player)

        if player.all_in or player.chips <= 0 or not player.has_hole_cards:
            logger.warning(f"{player.name} has no legal betting action "
                           f"(chips={player.chips}, all_in={player.all_in}, cards={len(player.cards)})")
            return Decision.check() if need_to_call <= 0 else Decision.fold()

        hole = player.cards
        board = context.community_cards
        preflop = context.is_preflop

        pot_odds = need_to_call / (context.pot + need_to_call) if need_to_call > 0 else 0.0
        stack_ratio = max(0, need_to_call) / player.chips
        spr = player.chips / max(1, context.pot + need_to_call)
        can_raise = (context.raises_this_round < self.max_raises_per_round
                     and player.chips > context.big_blind)

        active_opponents = max(0, len(context.active_players()) - 1)
        position = self._position_factor(player, context)

        strength = self.hand_evaluator.hand_strength(hole, board)
        hand_name = self.hand_evaluator.hand_name(hole, board)
        board_ctx = BoardContext() if preflop else self.board_analyzer.analyze(hole, board)

        strength_ratio = strength / 10

        # Fewer opponents: play slightly more aggressively
        missing = max(0, self.opponent_threshold - active_opponents)
        aggressiveness = (0.8 + 0.4 * position) if preflop else (1 + 0.6 * position)
        aggressiveness += missing * self.agg_factor
        raise_threshold = (8 - 2 * position) if preflop else max(2, 4 - 2 * position)
        raise_threshold = max(1, raise_threshold - missing * self.threshold_factor)

        if not preflop:
            if board_ctx.over_pair:
                aggressiveness += 0.2
                raise_threshold -= 0.5
            elif board_ctx.top_pair:
                aggressiveness += 0.1
                raise_threshold -= 0.3
            if board_ctx.draw:
                aggressiveness += 0.05
                raise_threshold -= 0.25

            # Wet boards call for caution
            aggressiveness *= 1 - board_ctx.texture_risk * 0.5
            raise_threshold = min(10, raise_threshold + board_ctx.texture_risk)

        opponents = context.opponents(player)
        profile = self.opponent_model.profile(opponents, board_ctx.texture_risk)
        raise_threshold += profile.threshold_adjustment
        aggressiveness += profile.aggressiveness_adjustment

        sizing = SizingInputs(
            pot=context.pot,
            to_call=need_to_call,
            chips=player.chips,
            strength_ratio=strength_ratio,
            texture_risk=board_ctx.texture_risk,
            spr=spr,
            position=position,
            opponents=active_opponents,
            preflop=preflop
        )
        min_raise = self._min_raise(context, need_to_call)
        call_amount = min(player.chips, max(0, need_to_call))
        max_stack_risk = PREFLOP_MAX_STACK_RISK if preflop else POSTFLOP_MAX_STACK_RISK
        odds_ok = strength_ratio * aggressiveness >= pot_odds and stack_ratio <= max_stack_risk

        decision = None
        if spr <= SHOVE_SPR and strength_ratio >= SHOVE_STRENGTH:
            decision = Decision.raise_by(player.chips)
        elif (preflop and player.chips <= context.big_blind * SHORT_STACK_BLINDS
              and strength_ratio >= SHORT_STACK_STRENGTH):
            decision = Decision.raise_by(player.chips)

        if decision is None:
            if need_to_call <= 0:
                if can_raise and strength >= raise_threshold:
                    raise_amount = max(min_raise, self.bet_sizer.value_bet(sizing))
                    if self._is_close(strength, raise_threshold):
                        decision = Decision.check() if self.rng() < 0.5 else Decision.raise_by(raise_amount)
                    else:
                        decision = Decision.raise_by(raise_amount)
                else:
                    decision = Decision.check()
            elif can_raise and strength >= raise_threshold and stack_ratio <= PROTECTION_MAX_STACK_RISK:
                raise_amount = max(min_raise, self.bet_sizer.protection_bet(sizing))
                if self._is_close(strength, raise_threshold):
                    alternative = Decision.call(call_amount) if odds_ok else Decision.fold()
                    decision = Decision.raise_by(raise_amount) if self.rng() < 0.5 else alternative
                else:
                    decision = Decision.raise_by(raise_amount)
            elif odds_ok:
                if abs(strength_ratio * aggressiveness - pot_odds) <= self.odds_tie_delta:
                    decision = Decision.call(call_amount) if self.rng() < 0.5 else Decision.fold()
                else:
                    decision = Decision.call(call_amount)
            else:
                decision = Decision.fold()

        # Do not auto-fold into a shove with a good hand
        facing_all_in = any(p.all_in for p in opponents)
        if decision.action == "fold" and facing_all_in:
            defense = self.allin_hand_preflop if preflop else self.allin_hand_postflop
            if strength_ratio >= defense:
                decision = Decision.call(call_amount)

        bluff = False
        if (profile.bluff_chance > 0 and can_raise and not facing_all_in
                and decision.action in ("check", "fold")):
            if self.rng() < profile.bluff_chance:
                decision = Decision.raise_by(max(min_raise, self.bet_sizer.bluff_bet(sizing)))
                bluff = True

        if not preflop:
            if (decision.action == "raise" and strength_ratio >= OVERBET_STRENGTH
                    and spr <= OVERBET_SPR and self.rng() < OVERRIDE_CHANCE):
                decision = Decision.raise_by(max(decision.amount, self.bet_sizer.overbet(sizing)))

            # Slow play near-nut hands now and then
            if (decision.action == "raise" and strength_ratio >= SLOW_PLAY_STRENGTH
                    and self.rng() < OVERRIDE_CHANCE):
                decision = Decision.check() if need_to_call <= 0 else Decision.call(call_amount)

            if (context.current_bet == 0 and decision.action == "check"
                    and context.raises_this_round < self.max_raises_per_round
                    and self.rng() < OVERRIDE_CHANCE):
                decision = Decision.raise_by(max(min_raise, self.bet_sizer.protection_bet(sizing)))

        decision = self._enforce_legal_raise(decision, player, context, need_to_call)

        self._report(DecisionDiagnostics(
            player=player.name,
            cards=" ".join(Card.from_code(code).pretty() for code in hole),
            hand=hand_name,
            strength=strength_ratio,
            pot_odds=pot_odds,
            stack_ratio=stack_ratio,
            position=position,
            opponents=active_opponents,
            raise_threshold=raise_threshold / 10,
            aggressiveness=aggressiveness,
            aggression_label=aggression_label(aggressiveness),
            board_context=board_ctx.label,
            texture=board_ctx.texture_risk,
            outs=board_ctx.outs,
            bluff_chance=profile.bluff_chance,
            action=decision.action,
            amount=decision.amount,
            bluff=bluff and decision.action == "raise"
        ))
        return decision

    def _is_close(self, strength: float, raise_threshold: float) -> bool:
        return abs(strength - raise_threshold) <= self.strength_tie_delta

    @staticmethod
    def _min_raise(context: DecisionContext, need_to_call: int) -> int:
        """Fewest chips a raise must commit: the call plus the last raise, or the big blind."""
        return max(0, need_to_call) + (context.last_raise or context.big_blind)

    def _enforce_legal_raise(self, decision: Decision, player: Player,
                             context: DecisionContext, need_to_call: int) -> Decision:
        """
        Cap raises at the stack and downgrade raises that are illegal.

        Applied after every probabilistic override. A raise is illegal below
        the minimum raise or once the round's raise cap is reached.
        """
        if decision.action != "raise":
            return decision

        amount = min(decision.amount, player.chips)
        min_raise = self._min_raise(context, need_to_call)
        capped = context.raises_this_round >= self.max_raises_per_round
        if capped or amount < min_raise:
            logger.debug(f"Raise of {amount} not allowed (minimum {min_raise}, "
                         f"raises {context.raises_this_round}/{self.max_raises_per_round}), downgrading")
            if need_to_call > 0:
                return Decision.call(min(player.chips, need_to_call))
            return Decision.check()
        return Decision.raise_by(amount)

    def _position_factor(self, player: Player, context: DecisionContext) -> float:
        """
        Relative position among active seats.

        0 for the first seat to act, 1 for the last. The first seat to act is
        the next active seat after the big blind preflop and after the dealer
        postflop.
        """
        players = context.players
        active = context.active_players()
        seats = [p.seat for p in active]
        if len(active) <= 1 or player.seat not in seats:
            return 0.0

        if context.current_phase_index == 0:
            anchor = self._find_index(players, lambda p: p.big_blind)
        else:
            anchor = self._find_index(players, lambda p: p.dealer)
        first_to_act = self._next_active(players, anchor)

        seat_idx = seats.index(player.seat)
        ref_idx = seats.index(first_to_act.seat) if first_to_act.seat in seats else 0
        offset = (seat_idx - ref_idx + len(active)) % len(active)
        return offset / (len(active) - 1)

    @staticmethod
    def _find_index(players: List[Player], predicate) -> int:
        for index, p in enumerate(players):
            if predicate(p):
                return index
        return -1

    @staticmethod
    def _next_active(players: List[Player], start: int) -> Player:
        count = len(players)
        for step in range(1, count + 1):
            candidate = players[(start + step) % count]
            if not candidate.folded:
                return candidate
        return players[start % count]

    def _report(self, diagnostics: DecisionDiagnostics) -> None:
        logger.debug(
            f"{diagnostics.player} [{diagnostics.cards}] {diagnostics.hand}: "
            f"strength={diagnostics.strength:.2f} odds={diagnostics.pot_odds:.2f} "
            f"stack={diagnostics.stack_ratio:.2f} pos={diagnostics.position:.2f} "
            f"opp={diagnostics.opponents} threshold={diagnostics.raise_threshold:.2f} "
            f"aggr={diagnostics.aggressiveness:.2f} ({diagnostics.aggression_label}) "
            f"ctx={diagnostics.board_context} texture={diagnostics.texture:.2f} outs={diagnostics.outs} "
            f"-> {diagnostics.action} {diagnostics.amount or ''}{' (bluff)' if diagnostics.bluff else ''}"
        )
        if self.observer is not None:
            try:
                self.observer(diagnostics)
            except Exception as e:
                logger.error(f"Decision observer failed: {e}", exc_info=True)


_default_engine: Optional[DecisionEngine] = None


def choose_bot_action(player: Player, context: DecisionContext,
                      rng: Optional[Callable[[], float]] = None,
                      observer: Optional[DecisionObserver] = None) -> Decision:
    """
    Choose one legal action for the acting player.

    Uses a shared engine unless a randomness source or observer is supplied.
    """
    global _default_engine
    if rng is not None or observer is not None:
        return DecisionEngine(rng=rng, observer=observer).choose_bot_action(player, context)
    if _default_engine is None:
        _default_engine = DecisionEngine()
    return _default_engine.choose_bot_action(player, context)
