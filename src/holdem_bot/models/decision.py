#!/usr/bin/env python3
"""
Decision model for bot actions.

A Decision is the single action the engine hands to the game engine. The
diagnostics record carries the signals behind it for observers and logs.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional

VALID_ACTIONS = ['fold', 'check', 'call', 'raise']


class Decision(BaseModel):
    """One bot action."""
    action: str = Field(..., description="Action (fold/check/call/raise)")
    amount: Optional[int] = Field(None, ge=0, description="Chips committed by a call or raise")

    @field_validator('action')
    @classmethod
    def validate_action(cls, v):
        if v not in VALID_ACTIONS:
            raise ValueError(f'Invalid action: {v}. Must be one of {VALID_ACTIONS}')
        return v

    @model_validator(mode='after')
    def validate_amount_for_action(self):
        if self.action in ('call', 'raise') and self.amount is None:
            raise ValueError(f'{self.action} requires an amount')
        if self.action in ('fold', 'check') and self.amount is not None:
            raise ValueError(f'{self.action} takes no amount')
        return self

    @classmethod
    def fold(cls) -> "Decision":
        return cls(action="fold")

    @classmethod
    def check(cls) -> "Decision":
        return cls(action="check")

    @classmethod
    def call(cls, amount: int) -> "Decision":
        return cls(action="call", amount=int(amount))

    @classmethod
    def raise_by(cls, amount: int) -> "Decision":
        """Raise committing `amount` additional chips."""
        return cls(action="raise", amount=int(amount))

    def __str__(self) -> str:
        return self.action if self.amount is None else f"{self.action} {self.amount}"

    class Config:
        frozen = True
        extra = "forbid"


class DecisionDiagnostics(BaseModel):
    """Signals behind one decision, handed to observers."""
    player: str
    cards: str
    hand: str
    strength: float = Field(..., ge=0.0, le=1.0)
    pot_odds: float = Field(..., ge=0.0)
    stack_ratio: float = Field(..., ge=0.0)
    position: float = Field(..., ge=0.0, le=1.0)
    opponents: int = Field(..., ge=0)
    raise_threshold: float
    aggressiveness: float
    aggression_label: str
    board_context: str
    texture: float = Field(..., ge=0.0, le=1.0)
    outs: int = Field(0, ge=0)
    bluff_chance: float = Field(..., ge=0.0, le=1.0)
    action: str
    amount: Optional[int] = None
    bluff: bool = False

    class Config:
        extra = "forbid"
