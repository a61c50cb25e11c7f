"""
Move legality for the tableau and the foundations.

All functions are pure: they read piles and cards but never change them.
Finders scan piles left to right and return the index of the first pile the
card may land on, or ``None``. The stock is never a target.
"""
from typing import Optional, Sequence

from klondike.Card import ACE, BLACK_SUITS, KING, RED_SUITS, Card


def lastOf(lst):
    return lst[len(lst) - 1]


def suitsAreStackable(suit1: int, suit2: int) -> bool:
    """A red card goes on a black one and vice versa; same colours never stack."""
    if suit1 in BLACK_SUITS:
        return suit2 in RED_SUITS
    if suit1 in RED_SUITS:
        return suit2 in BLACK_SUITS
    return False


def canPlaceOnFoundation(pile: Sequence[Card], card: Card) -> bool:
    if len(pile) == 0:
        return card.rank == ACE
    top = lastOf(pile)
    return top.suit == card.suit and top.rank + 1 == card.rank


def canPlaceOnTableau(pile: Sequence[Card], card: Card) -> bool:
    if len(pile) == 0:
        return card.rank == KING
    top = lastOf(pile)
    return top.rank - 1 == card.rank and suitsAreStackable(top.suit, card.suit)


def findFoundationTarget(foundations: Sequence[Sequence[Card]], card: Card) -> Optional[int]:
    for idx, pile in enumerate(foundations):
        if canPlaceOnFoundation(pile, card):
            return idx
    return None


def findTableauTarget(tableau: Sequence[Sequence[Card]], card: Card) -> Optional[int]:
    for idx, pile in enumerate(tableau):
        if canPlaceOnTableau(pile, card):
            return idx
    return None
