from dataclasses import dataclass


@dataclass(frozen=True)
class CardView:
    suit: int
    rank: int
    visible: bool
    label: str
    glyph: str
    color: str


@dataclass(frozen=True)
class PileView:
    cards: tuple[CardView, ...]

    @property
    def top(self) -> CardView | None:
        return self.cards[-1] if self.cards else None


@dataclass(frozen=True)
class StockPreview:
    """Browsed stock cards, oldest first; only the last one is playable."""

    cards: tuple[CardView, ...]
    remaining: int


@dataclass(frozen=True)
class GameViewModel:
    moves: int
    finished: bool
    stock: StockPreview
    tableau: tuple[PileView, ...]
    foundations: tuple[PileView, ...]


@dataclass(frozen=True)
class BoardUpdate:
    type: str
    payload: dict
