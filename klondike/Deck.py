import random

from klondike.Card import DECK_SIZE, KING, SUIT_COUNT, Card, InvalidDeckError

TABLEAU_PILES = 7
FOUNDATION_PILES = 4
DEALT_CARDS = TABLEAU_PILES * (TABLEAU_PILES + 1) // 2
STOCK_SIZE = DECK_SIZE - DEALT_CARDS


def buildDeck():
    deck = []
    for suit in range(SUIT_COUNT):
        for rank in range(1, KING + 1):
            deck.append(Card(suit, rank))
    return deck


def shuffleDeck(deck, rng=None):
    """
    Fisher-Yates in place.
    :param rng: anything with ``randint``; the module level ``random`` when omitted
    """
    pick = rng if rng is not None else random
    for i in range(len(deck) - 1, 0, -1):
        j = pick.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]


def buildShuffledDeck(rng=None):
    deck = buildDeck()
    shuffleDeck(deck, rng)
    validateDeck(deck)
    return deck


def validateDeck(cards):
    cards = list(cards)
    if len(cards) != DECK_SIZE:
        raise InvalidDeckError(f"expected {DECK_SIZE} cards, got {len(cards)}")
    keys = {card.key() for card in cards}
    if len(keys) != DECK_SIZE:
        raise InvalidDeckError(f"deck holds duplicate cards ({DECK_SIZE - len(keys)} missing)")


def dealInitialLayout(deck):
    """
    Deals pile i (0-based) i+1 cards from the end of ``deck``; only the last card
    of each pile is face-up. Consumes ``deck``.
    :return: (tableau, stock) where stock is the face-down remainder
    """
    tableau = []
    for i in range(TABLEAU_PILES):
        pile = []
        for j in range(i + 1):
            card = deck.pop()
            card.visible = j == i
            pile.append(card)
        tableau.append(pile)
    stock = list(deck)
    for card in stock:
        card.visible = False
    deck.clear()
    return tableau, stock


def encodeDeck(deck):
    return ",".join(str(card.id) for card in deck)


def decodeDeck(code: str):
    try:
        ids = [int(s) for s in code.split(",") if s.strip()]
    except ValueError as e:
        raise InvalidDeckError(f"malformed deck code: {e}") from e
    deck = [Card.fromId(cardId) for cardId in ids]
    validateDeck(deck)
    return deck
