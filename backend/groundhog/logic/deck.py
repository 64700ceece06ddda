"""
Deck drawing and grid dealing.

Every session draws one set of unique faces from the 34-card universe and
deals that same set into both grids. Each grid is shuffled independently,
so every card the top grid can reveal has exactly one match in the bottom grid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from groundhog.logic.cards import Card, GridPosition, build_universe

if TYPE_CHECKING:
    import random


def draw_cards(rng: random.Random, count: int) -> list[Card]:
    """Draw `count` cards with distinct faces from the full universe."""
    return rng.sample(build_universe(), count)


def assign_positions(cards: list[Card], grid_size: int) -> None:
    """Lay cards out row by row in a grid_size-wide grid."""
    for index, card in enumerate(cards):
        card.position = GridPosition(row=index // grid_size, col=index % grid_size)


def deal_grids(rng: random.Random, grid_size: int) -> tuple[list[Card], list[Card]]:
    """
    Deal the top and bottom grids for a new session.

    The bottom grid holds copies of the top grid's cards with their own
    identities, so animation tags on one grid never leak onto the other.
    """
    top = draw_cards(rng, grid_size * grid_size)
    bottom = [card.copy_with_new_identity() for card in top]
    rng.shuffle(top)
    rng.shuffle(bottom)
    assign_positions(top, grid_size)
    assign_positions(bottom, grid_size)
    return top, bottom
