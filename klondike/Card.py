CLUBS = 0
DIAMONDS = 1
HEARTS = 2
SPADES = 3

SUIT_COUNT = 4
NUM_PER_SUIT = 13
DECK_SIZE = SUIT_COUNT * NUM_PER_SUIT

ACE = 1
KING = 13

BLACK_SUITS = (CLUBS, SPADES)
RED_SUITS = (DIAMONDS, HEARTS)


class InvalidDeckError(Exception):
    """Raised when a deck or a board position does not hold the 52 distinct cards."""


class Card:
    SUITS = "♣♦♥♠"
    NUMS = ("A ", "2 ", "3 ", "4 ", "5 ", "6 ", "7 ", "8 ", "9 ", "10", "J ", "Q ", "K ")

    def __init__(self, suit, rank, visible=False):
        if not (0 <= suit < SUIT_COUNT) or not (ACE <= rank <= KING):
            raise InvalidDeckError(f"no such card: suit={suit} rank={rank}")
        self.suit = suit
        self.rank = rank
        self.visible = visible

    @property
    def id(self):
        return self.suit * NUM_PER_SUIT + self.rank - 1

    @staticmethod
    def fromId(cardId, visible=False):
        if not (0 <= cardId < DECK_SIZE):
            raise InvalidDeckError(f"card id out of range: {cardId}")
        return Card(cardId // NUM_PER_SUIT, cardId % NUM_PER_SUIT + 1, visible)

    def key(self):
        return self.suit, self.rank

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.key() == other.key() and self.visible == other.visible

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        if self.visible:
            return str(self.id)
        return str(self.id) + "H"

    def __repr__(self):
        return f"Card({self.suit}, {self.rank}, visible={self.visible})"

    def gameStr(self):
        if not self.visible:
            return "---"
        return Card.SUITS[self.suit] + Card.NUMS[self.rank - 1]

    def copy(self):
        return Card(self.suit, self.rank, self.visible)
