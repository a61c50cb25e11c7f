import logging
import random

from klondike import Deck
from klondike.Card import InvalidDeckError
from klondike.Rules import findFoundationTarget, findTableauTarget, lastOf
from klondike.State import CardState, GameState

logger = logging.getLogger(__name__)

STOCK = "stock"
TABLEAU = "tableau"
FOUNDATION = "foundation"


class GameConfig:
    def __init__(self, seed=None, deckCode=None):
        self.seed = seed
        self.deckCode = deckCode

    def initDeck(self):
        """
        The deck to deal from: the exact order given by ``deckCode`` if set,
        otherwise a fresh shuffle (reproducible when ``seed`` is set).
        """
        if self.deckCode:
            return Deck.decodeDeck(self.deckCode)
        rng = random.Random(self.seed) if self.seed is not None else None
        return Deck.buildShuffledDeck(rng)


class GameEvent:
    pass


class StockAdvance(GameEvent):
    def __init__(self, stockIndex: int):
        self.stockIndex = stockIndex


class CardMove(GameEvent):
    def __init__(self, src: (str, int), dest: (str, int), count=1):
        """
        :param src: (zone, pile index); the pile index is the cursor for the stock
        :param dest: (zone, pile index)
        :param count: number of cards moved together
        """
        self.src = src
        self.dest = dest
        self.count = count


class RevealTop(GameEvent):
    def __init__(self, idx):
        self.idx = idx


class Core:
    """
    ask*** : requests from the player, validated; return False and change nothing when illegal
    do*** : actual operation, no checking.
    """
    DEFAULT_CONFIG = GameConfig()

    def __init__(self):
        self.interface = None

        self.stock = []
        self.stockIndex = -1
        self.tableau = [[] for _ in range(Deck.TABLEAU_PILES)]
        self.foundations = [[] for _ in range(Deck.FOUNDATION_PILES)]
        self.moves = 0
        self.gameEnded = False
        self.deckCode = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def newGame(self, gameConfig: GameConfig = DEFAULT_CONFIG):
        deck = gameConfig.initDeck()
        self.deckCode = Deck.encodeDeck(deck)
        tableau, stock = Deck.dealInitialLayout(deck)
        self.tableau = tableau
        self.stock = stock
        self.stockIndex = -1
        self.foundations = [[] for _ in range(Deck.FOUNDATION_PILES)]
        self.moves = 0
        self.gameEnded = False
        logger.info("new game dealt (seed=%s, from code=%s)", gameConfig.seed, bool(gameConfig.deckCode))
        if self.interface is not None:
            self.interface.onStart()

    def setupBoard(self, tableau, foundations, stock=(), stockIndex=-1, moves=0):
        """
        Loads an arbitrary position. The piles are copied; the position must still
        hold every card exactly once.
        """
        if len(tableau) != Deck.TABLEAU_PILES or len(foundations) != Deck.FOUNDATION_PILES:
            raise InvalidDeckError("a board has 7 tableau piles and 4 foundations")
        tableau = [[c.copy() for c in pile] for pile in tableau]
        foundations = [[c.copy() for c in pile] for pile in foundations]
        stock = [c.copy() for c in stock]
        allCards = list(stock)
        for pile in tableau + foundations:
            allCards.extend(pile)
        Deck.validateDeck(allCards)
        if not -1 <= stockIndex < len(stock):
            raise InvalidDeckError(f"stock cursor {stockIndex} outside a stock of {len(stock)}")

        self.tableau = tableau
        self.foundations = foundations
        self.stock = stock
        self.stockIndex = stockIndex
        self.moves = moves
        self.gameEnded = False
        self.deckCode = None
        self.checkWin()

    def getState(self) -> GameState:
        def freeze(pile):
            return tuple(CardState(suit=c.suit, rank=c.rank, visible=c.visible) for c in pile)

        return GameState(
            stock=freeze(self.stock),
            stock_index=self.stockIndex,
            tableau=tuple(freeze(p) for p in self.tableau),
            foundations=tuple(freeze(p) for p in self.foundations),
            moves=self.moves,
            finished=self.gameEnded,
        )

    def exposedStockCard(self):
        if 0 <= self.stockIndex < len(self.stock):
            return self.stock[self.stockIndex]
        return None

    def checkWin(self):
        if self.moves == 0:
            return False
        for pile in self.tableau:
            if len(pile) != 0:
                return False
        self.gameEnded = True
        logger.info("game won in %d moves", self.moves)
        if self.interface is not None:
            self.interface.onWin()
        return True

    def isValidPosition(self, s, idx):
        if s < 0 or s >= len(self.tableau):
            return False
        pile = self.tableau[s]
        return 0 <= idx < len(pile)

    def askAdvanceStock(self) -> bool:
        if self.gameEnded:
            return self.__rejected("advance stock")
        self.doAdvanceStock()
        return True

    def askPlayStock(self) -> bool:
        card = self.exposedStockCard()
        if self.gameEnded or card is None:
            return self.__rejected("play stock")
        dest = findFoundationTarget(self.foundations, card)
        if dest is not None:
            self.doStockMove(FOUNDATION, dest)
            return True
        dest = findTableauTarget(self.tableau, card)
        if dest is not None:
            self.doStockMove(TABLEAU, dest)
            self.checkWin()
            return True
        return self.__rejected("play stock")

    def askPlayFoundation(self, pileIndex: int) -> bool:
        if self.gameEnded or not 0 <= pileIndex < len(self.foundations):
            return self.__rejected("play foundation")
        pile = self.foundations[pileIndex]
        if len(pile) == 0:
            return self.__rejected("play foundation")
        dest = findTableauTarget(self.tableau, lastOf(pile))
        if dest is None:
            return self.__rejected("play foundation")
        self.doFoundationMove(pileIndex, dest)
        self.checkWin()
        return True

    def askPlayTableau(self, pileIndex: int, cardIndex: int) -> bool:
        if self.gameEnded or not self.isValidPosition(pileIndex, cardIndex):
            return self.__rejected("play tableau")
        pile = self.tableau[pileIndex]
        card = pile[cardIndex]
        if not card.visible:
            return self.__rejected("play tableau")
        isTop = cardIndex == len(pile) - 1
        if isTop:
            dest = findFoundationTarget(self.foundations, card)
            if dest is not None:
                self.doTableauToFoundation(pileIndex, dest)
                self.checkWin()
                return True
        dest = findTableauTarget(self.tableau, card)
        if dest is None:
            return self.__rejected("play tableau")
        self.doTableauMove((pileIndex, cardIndex), dest)
        self.checkWin()
        return True

    def doAdvanceStock(self):
        if self.stockIndex < len(self.stock) - 1:
            self.stockIndex += 1
        else:
            self.stockIndex = -1
        self.moves += 1
        logger.debug("stock cursor -> %d", self.stockIndex)
        self.__publish(StockAdvance(self.stockIndex))

    def doStockMove(self, zone: str, dest: int):
        src = self.stockIndex
        card = self.stock.pop(src)
        card.visible = True
        target = self.foundations if zone == FOUNDATION else self.tableau
        target[dest].append(card)
        if self.stockIndex > 0:
            self.stockIndex -= 1
        elif len(self.stock) == 0:
            self.stockIndex = -1
        self.moves += 1
        logger.debug("stock %s -> %s %d", card.gameStr(), zone, dest)
        self.__publish(CardMove((STOCK, src), (zone, dest)))

    def doFoundationMove(self, pileIndex: int, dest: int):
        card = self.foundations[pileIndex].pop()
        card.visible = True
        self.tableau[dest].append(card)
        self.moves += 1
        logger.debug("foundation %d %s -> tableau %d", pileIndex, card.gameStr(), dest)
        self.__publish(CardMove((FOUNDATION, pileIndex), (TABLEAU, dest)))

    def doTableauToFoundation(self, pileIndex: int, dest: int):
        card = self.tableau[pileIndex].pop()
        self.foundations[dest].append(card)
        self.moves += 1
        logger.debug("tableau %d %s -> foundation %d", pileIndex, card.gameStr(), dest)
        revealed = self.doReveal(pileIndex)
        self.__publish(CardMove((TABLEAU, pileIndex), (FOUNDATION, dest)))
        if revealed:
            self.__publish(RevealTop(pileIndex))

    def doTableauMove(self, src: (int, int), dest: int):
        """
        Moves the run starting at ``src`` (pile, card index) onto pile ``dest``,
        order preserved.
        """
        srcPile = self.tableau[src[0]]
        run = srcPile[src[1]:]
        self.tableau[src[0]] = srcPile[:src[1]]
        self.tableau[dest].extend(run)
        self.moves += 1
        logger.debug("tableau %d run of %d -> tableau %d", src[0], len(run), dest)
        revealed = self.doReveal(src[0])
        self.__publish(CardMove((TABLEAU, src[0]), (TABLEAU, dest), len(run)))
        if revealed:
            self.__publish(RevealTop(src[0]))

    def doReveal(self, idx: int):
        """Turns the top card of tableau pile ``idx`` face-up; the caller publishes the event."""
        pile = self.tableau[idx]
        if len(pile) == 0:
            return False
        card = lastOf(pile)
        if card.visible:
            return False
        card.visible = True
        return True

    def __publish(self, event: GameEvent):
        if self.interface is not None:
            self.interface.onEvent(event)

    @staticmethod
    def __rejected(what):
        logger.debug("rejected: %s", what)
        return False
