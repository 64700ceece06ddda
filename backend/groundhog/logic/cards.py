"""
Card representation for the Groundhog matching game.

A card has two distinct relations on it:
- identity (card_id), used to track a specific card on screen and key its animations;
- face equality (suit, value), used to decide whether a tap matches a revealed card.

Two cards with the same suit and value compare equal even when they are
different instances in different grids.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from uuid import uuid4

from groundhog.logic.enums import REGULAR_SUITS, CardSuit

CARD_BACK_IMAGE = "Groundhog-Cover"

# 3 regular suits of 9 + 7 special cards
UNIVERSE_SIZE = sum(len(suit.value_range) for suit in CardSuit)


@dataclass(frozen=True)
class GridPosition:
    """Row/column of a card inside its 4x4 grid."""

    row: int = 0
    col: int = 0


@dataclass(eq=False)
class Card:
    """A single card in either the top or the bottom grid."""

    suit: CardSuit
    value: int
    is_flipped: bool = False
    position: GridPosition = field(default_factory=GridPosition)
    card_id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def face(self) -> tuple[CardSuit, int]:
        return (self.suit, self.value)

    @property
    def image_name(self) -> str:
        return f"Groundhog-{self.suit.value}-{self.value}"

    @property
    def back_image_name(self) -> str:
        return CARD_BACK_IMAGE

    def matches(self, other: Card) -> bool:
        """Check whether two cards show the same face, regardless of identity."""
        return self.face == other.face

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(self.face)

    def copy_with_new_identity(self) -> Card:
        """Return a face-identical card with a fresh card_id and no flip state."""
        return replace(self, is_flipped=False, position=GridPosition(), card_id=str(uuid4()))


def build_universe() -> list[Card]:
    """Build every unique (suit, value) combination: 34 cards in suit order."""
    cards = [Card(suit=suit, value=value) for suit in REGULAR_SUITS for value in suit.value_range]
    cards.extend(Card(suit=CardSuit.SPECIAL, value=value) for value in CardSuit.SPECIAL.value_range)
    return cards
