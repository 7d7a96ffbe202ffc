#!/usr/bin/env python3
"""
Card model for representing playing cards with validation.

Cards travel through the bot as opaque two-character codes ("AC", "TD", "9H"):
a rank character followed by the upper-case initial of the suit. This model
parses and validates those codes and converts them for Treys evaluation and
for display.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator
from treys import Card as TreysCard

RANK_ORDER = "23456789TJQKA"
RANK_VALUES = {rank: index + 2 for index, rank in enumerate(RANK_ORDER)}
SUIT_CODES = {'C': 'clubs', 'D': 'diamonds', 'H': 'hearts', 'S': 'spades'}
SUIT_SYMBOLS = {'clubs': '♣', 'diamonds': '♦', 'hearts': '♥', 'spades': '♠'}


class Card(BaseModel):
    """Represents a playing card with rank and suit."""
    rank: str = Field(..., description="Card rank (A, K, Q, J, T, 9-2)")
    suit: str = Field(..., description="Card suit (hearts, diamonds, clubs, spades)")

    @field_validator('rank')
    @classmethod
    def validate_rank(cls, v):
        if v not in RANK_VALUES:
            raise ValueError(f'Invalid rank: {v}. Must be one of {list(RANK_ORDER)}')
        return v

    @field_validator('suit')
    @classmethod
    def validate_suit(cls, v):
        if v not in SUIT_SYMBOLS:
            raise ValueError(f'Invalid suit: {v}. Must be one of {list(SUIT_SYMBOLS)}')
        return v

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """
        Parse a two-character card code.

        Args:
            code: Rank character plus suit initial, e.g. "AC" or "Th"

        Returns:
            Card instance

        Raises:
            ValueError: If the code is malformed
        """
        if not isinstance(code, str) or len(code) != 2:
            raise ValueError(f'Invalid card code: {code!r}')
        suit = SUIT_CODES.get(code[1].upper())
        if suit is None:
            raise ValueError(f'Invalid card code: {code!r}')
        return cls(rank=code[0].upper(), suit=suit)

    @property
    def code(self) -> str:
        """Two-character code, e.g. 'AH'."""
        return f"{self.rank}{self.suit[0].upper()}"

    @property
    def value(self) -> int:
        """Numeric rank, 2 through 14 (ace high)."""
        return RANK_VALUES[self.rank]

    def to_treys(self) -> int:
        """Convert to a Treys card integer."""
        return TreysCard.new(self.rank + self.suit[0])

    def pretty(self) -> str:
        """Human-readable form with a suit symbol, e.g. '10♥'."""
        return self.rank.replace('T', '10') + SUIT_SYMBOLS[self.suit]

    def __str__(self) -> str:
        return self.code

    class Config:
        frozen = True
        extra = "forbid"


def parse_cards(codes: List[str]) -> List[Card]:
    """Parse a list of card codes into Card models."""
    return [Card.from_code(code) for code in codes]


def validate_card_codes(codes: List[str]) -> List[str]:
    """
    Validate and normalize card codes to upper case.

    Raises:
        ValueError: If a code is malformed or repeated
    """
    normalized = [Card.from_code(code).code for code in codes]
    if len(normalized) != len(set(normalized)):
        raise ValueError(f'Duplicate cards: {normalized}')
    return normalized
