#!/usr/bin/env python3
"""
DecisionContext model for one bot decision.

Snapshot of the betting state built fresh by the game engine for every
decision. The community cards are carried as a plain list of card codes so
the decision engine never reads any presentation layer.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator, model_validator
from holdem_bot.models.card import validate_card_codes
from holdem_bot.models.player import Player


class DecisionContext(BaseModel):
    """Betting context for the acting player."""
    current_bet: int = Field(0, ge=0, description="Highest round bet to match")
    pot: int = Field(0, ge=0, description="Chips in the pot")
    small_blind: int = Field(..., gt=0, description="Small blind amount")
    big_blind: int = Field(..., gt=0, description="Big blind amount")
    raises_this_round: int = Field(0, ge=0, description="Raises made this betting round")
    current_phase_index: int = Field(0, ge=0, le=4, description="0 preflop, 1 flop, 2 turn, 3 river, 4 showdown")
    players: List[Player] = Field(..., min_length=1, description="All seats in table order")
    last_raise: int = Field(0, ge=0, description="Size of the last raise increment")
    community_cards: List[str] = Field(default_factory=list, description="Community card codes")

    @field_validator('community_cards')
    @classmethod
    def validate_community_cards(cls, v):
        if len(v) > 5:
            raise ValueError('Cannot have more than 5 community cards')
        return validate_card_codes(v)

    @field_validator('players')
    @classmethod
    def validate_unique_seats(cls, v):
        seats = [p.seat for p in v]
        if len(seats) != len(set(seats)):
            raise ValueError('Players must have unique seat numbers')
        return v

    @model_validator(mode='after')
    def validate_no_duplicate_cards(self):
        dealt = list(self.community_cards)
        for player in self.players:
            dealt.extend(player.cards)
        if len(dealt) != len(set(dealt)):
            raise ValueError('A card cannot be dealt twice')
        return self

    @property
    def is_preflop(self) -> bool:
        """True until the flop is complete (fewer than three community cards)."""
        return len(self.community_cards) < 3

    def need_to_call(self, player: Player) -> int:
        """Chips the player still owes to match the current bet."""
        return self.current_bet - player.round_bet

    def opponents(self, player: Player) -> List[Player]:
        """Every other seat at the table, folded seats included."""
        return [p for p in self.players if p.seat != player.seat]

    def active_players(self) -> List[Player]:
        return [p for p in self.players if not p.folded]

    class Config:
        validate_assignment = True
        extra = "forbid"
