#!/usr/bin/env python3
"""
Pot-relative bet sizing.

Four sizes are produced from the same situation: value bets, bluffs,
protection bets and overbets. Each is a fraction of the pot after calling,
nudged by texture, stack-to-pot ratio, position and opponent count, jittered
by the injected randomness source, rounded to 10 chips and capped at the stack.
"""

import math
import random
from typing import Callable, NamedTuple, Optional


class SizingInputs(NamedTuple):
    """Per-decision inputs shared by all sizing functions."""
    pot: int
    to_call: int
    chips: int
    strength_ratio: float
    texture_risk: float
    spr: float
    position: float
    opponents: int
    preflop: bool


def round_to_10(amount: float) -> int:
    """Round to the nearest multiple of 10, halves rounding up."""
    return int(math.floor(amount / 10 + 0.5)) * 10


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


class BetSizer:
    """Computes value, bluff, protection and overbet amounts."""

    def __init__(self, rng: Optional[Callable[[], float]] = None):
        """
        Args:
            rng: Uniform source in [0, 1); defaults to random.random
        """
        self.rng = rng or random.random

    def _jitter(self, low: float, high: float) -> float:
        return low + self.rng() * (high - low)

    def _amount(self, inputs: SizingInputs, factor: float) -> int:
        return min(inputs.chips, round_to_10((inputs.pot + inputs.to_call) * factor))

    def value_bet(self, inputs: SizingInputs) -> int:
        """Size a bet made for value."""
        if inputs.preflop:
            base = 0.55
            if inputs.strength_ratio >= 0.9:
                base += 0.15
            base += inputs.opponents * 0.04
            base += (1 - inputs.position) * 0.05
            if inputs.position < 0.3 and inputs.strength_ratio >= 0.8:
                base += 0.1  # bigger open from early position
        else:
            if inputs.texture_risk > 0.6:
                base = 0.7
            elif inputs.texture_risk > 0.3:
                base = 0.6
            else:
                base = 0.45
            if inputs.strength_ratio > 0.95:
                base += 0.1
            base += inputs.opponents * 0.03
            base += (1 - inputs.position) * 0.05

        if inputs.spr < 2:
            base += 0.1
        elif inputs.spr < 4:
            base += 0.05
        elif inputs.spr > 6:
            base -= 0.05

        factor = _clamp(base + self._jitter(-0.1, 0.1), 0.35, 1.0)
        return self._amount(inputs, factor)

    def bluff_bet(self, inputs: SizingInputs) -> int:
        """Size a bluff: small enough to risk little, large enough to fold hands."""
        base = 0.25 + inputs.texture_risk * 0.05
        base += inputs.opponents * 0.02
        base += (1 - inputs.position) * 0.03
        if inputs.spr < 3:
            base += 0.05
        elif inputs.spr > 5:
            base -= 0.05

        factor = _clamp(base + self._jitter(-0.04, 0.04), 0.2, 0.45)
        return self._amount(inputs, factor)

    def protection_bet(self, inputs: SizingInputs) -> int:
        """Size a bet that charges draws and thins the field."""
        base = 0.45 + inputs.texture_risk * 0.25
        base += inputs.opponents * 0.03
        base += (1 - inputs.position) * 0.04
        if inputs.spr < 3:
            base += 0.1
        elif inputs.spr > 5:
            base -= 0.05

        factor = _clamp(base + self._jitter(-0.05, 0.05), 0.35, 0.8)
        return self._amount(inputs, factor)

    def overbet(self, inputs: SizingInputs) -> int:
        """Size an overbet for near-nut hands at low SPR."""
        base = 1.2 - inputs.texture_risk * 0.1
        base += inputs.opponents * 0.05
        if inputs.spr < 2:
            base += 0.3

        factor = _clamp(base + self._jitter(-0.05, 0.1), 1.1, 1.5)
        return self._amount(inputs, factor)
