#!/usr/bin/env python3
"""
Player model for representing seats at the poker table.

The decision engine only reads players: chips, commitments, flags and the
session statistics are maintained by the external game engine.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator
from holdem_bot.models.card import validate_card_codes


class PlayerStats(BaseModel):
    """Session-long tendencies observed for one seat."""
    hands: int = Field(0, ge=0, description="Hands observed")
    folds: int = Field(0, ge=0, description="Hands folded")
    vpip: int = Field(0, ge=0, description="Hands with chips voluntarily put in pot")
    calls: int = Field(0, ge=0, description="Call actions")
    aggressive_acts: int = Field(0, ge=0, description="Bet and raise actions")

    @property
    def fold_rate(self) -> float:
        """Share of observed hands folded (0 with no hands seen)."""
        return self.folds / self.hands if self.hands > 0 else 0.0

    @property
    def vpip_rate(self) -> float:
        """Laplace-smoothed VPIP rate."""
        return (self.vpip + 1) / (self.hands + 2)

    @property
    def aggression(self) -> float:
        """Smoothed ratio of aggressive actions to calls."""
        return (self.aggressive_acts + 1) / (self.calls + 1)

    class Config:
        validate_assignment = True
        extra = "forbid"


class Player(BaseModel):
    """Represents a player at the poker table."""
    name: str = Field("Player", description="Display name")
    seat: int = Field(..., ge=0, description="Seat index in table order")
    chips: int = Field(..., ge=0, description="Remaining stack")
    round_bet: int = Field(0, ge=0, description="Chips committed this betting round")
    folded: bool = Field(False, description="Folded this hand")
    all_in: bool = Field(False, description="All chips committed")
    cards: List[str] = Field(default_factory=list, description="Hole card codes")
    dealer: bool = Field(False, description="Has dealer button")
    big_blind: bool = Field(False, description="Posted the big blind")
    stats: PlayerStats = Field(default_factory=PlayerStats, description="Observed tendencies")

    @field_validator('cards')
    @classmethod
    def validate_cards(cls, v):
        if len(v) > 2:
            raise ValueError('Cannot have more than 2 hole cards')
        return validate_card_codes(v)

    @property
    def has_hole_cards(self) -> bool:
        return len(self.cards) == 2

    class Config:
        validate_assignment = True
        extra = "forbid"
