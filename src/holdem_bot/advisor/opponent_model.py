#!/usr/bin/env python3
"""
Opponent tendency model.

Aggregates the session statistics of every other seat into fold-rate,
looseness and aggression signals. Their influence is weighted by how many
hands have been observed so the bot does not overreact to small samples.
"""

import logging
import math
from typing import List, NamedTuple
from holdem_bot.models.player import Player
from holdem_bot.config.settings import Settings

logger = logging.getLogger(__name__)

MAX_BLUFF_CHANCE = 0.3
TIGHT_VPIP = 0.25
LOOSE_VPIP = 0.5
HIGH_AGGRESSION = 1.5
LOW_AGGRESSION = 0.7


class OpponentProfile(NamedTuple):
    """Averaged opponent signals and the adjustments they imply."""
    fold_rate: float = 0.0
    vpip: float = 0.0
    aggression: float = 0.0
    avg_hands: float = 0.0
    weight: float = 0.0
    bluff_chance: float = 0.0
    threshold_adjustment: float = 0.0
    aggressiveness_adjustment: float = 0.0


class OpponentModel:
    """Reads opponent statistics into weighted strategy adjustments."""

    def __init__(self):
        """Initialize opponent model with configuration."""
        self.settings = Settings()

        self.settings.create("bot.opponents.min_hands_for_weight", default=10)
        self.settings.create("bot.opponents.weight_growth", default=10)

        self.min_hands_for_weight = self.settings.get("bot.opponents.min_hands_for_weight")
        self.weight_growth = self.settings.get("bot.opponents.weight_growth")

        logger.info("Initialized opponent model")

    def sample_weight(self, avg_hands: float) -> float:
        """
        Influence of opponent stats given the average hands observed.

        Returns:
            0 below the minimum sample, then approaching 1
        """
        if avg_hands < self.min_hands_for_weight:
            return 0.0
        return 1 - math.exp(-(avg_hands - self.min_hands_for_weight) / self.weight_growth)

    def profile(self, opponents: List[Player], texture_risk: float = 0.0) -> OpponentProfile:
        """
        Build the weighted opponent profile.

        Args:
            opponents: Every other seat at the table
            texture_risk: Board texture risk, dampens bluffing on wet boards

        Returns:
            OpponentProfile; neutral when there are no opponents
        """
        if not opponents:
            return OpponentProfile()

        count = len(opponents)
        fold_rate = sum(p.stats.fold_rate for p in opponents) / count
        vpip = sum(p.stats.vpip_rate for p in opponents) / count
        aggression = sum(p.stats.aggression for p in opponents) / count
        avg_hands = sum(p.stats.hands for p in opponents) / count

        weight = self.sample_weight(avg_hands)
        bluff_chance = min(MAX_BLUFF_CHANCE, fold_rate) * weight
        bluff_chance *= 1 - texture_risk * 0.5

        threshold_adj = 0.0
        aggressiveness_adj = 0.0
        if vpip < TIGHT_VPIP:
            threshold_adj -= 0.5 * weight
            aggressiveness_adj += 0.1 * weight
        elif vpip > LOOSE_VPIP:
            threshold_adj += 0.5 * weight
            aggressiveness_adj -= 0.1 * weight

        if aggression > HIGH_AGGRESSION:
            aggressiveness_adj -= 0.1 * weight
        elif aggression < LOW_AGGRESSION:
            aggressiveness_adj += 0.1 * weight

        profile = OpponentProfile(
            fold_rate=fold_rate,
            vpip=vpip,
            aggression=aggression,
            avg_hands=avg_hands,
            weight=weight,
            bluff_chance=bluff_chance,
            threshold_adjustment=threshold_adj,
            aggressiveness_adjustment=aggressiveness_adj
        )
        logger.debug(f"Opponent profile over {count} opponents: {profile}")
        return profile
