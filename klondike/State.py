from dataclasses import dataclass


@dataclass(frozen=True)
class CardState:
    suit: int
    rank: int
    visible: bool


@dataclass(frozen=True)
class GameState:
    """Read-only copy of the engine's board, taken between two moves."""

    stock: tuple[CardState, ...]
    stock_index: int
    tableau: tuple[tuple[CardState, ...], ...]
    foundations: tuple[tuple[CardState, ...], ...]
    moves: int
    finished: bool

    @property
    def exposed_stock_card(self) -> CardState | None:
        if 0 <= self.stock_index < len(self.stock):
            return self.stock[self.stock_index]
        return None

    @property
    def card_count(self) -> int:
        return len(self.stock) + sum(len(p) for p in self.tableau) + sum(len(p) for p in self.foundations)
