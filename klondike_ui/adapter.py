from klondike.Core import CardMove, GameEvent, RevealTop, StockAdvance
from klondike.State import CardState, GameState
from klondike_ui.ui_config import DEFAULT_STOCK_PREVIEW, NUMS, SUIT_COLORS, SUIT_LETTERS, SUIT_SYMBOLS
from klondike_ui.view_model import BoardUpdate, CardView, GameViewModel, PileView, StockPreview


def rank_label(rank: int) -> str:
    return NUMS[rank - 1]


def suit_glyph(suit: int, letters: bool = False) -> str:
    return SUIT_LETTERS[suit] if letters else SUIT_SYMBOLS[suit]


class CoreAdapter:
    """Turns engine snapshots and events into a renderer-friendly model."""

    @staticmethod
    def card_view(card: CardState, letters: bool = False, visible: bool | None = None) -> CardView:
        return CardView(
            suit=card.suit,
            rank=card.rank,
            visible=card.visible if visible is None else visible,
            label=rank_label(card.rank),
            glyph=suit_glyph(card.suit, letters),
            color=SUIT_COLORS[card.suit],
        )

    @staticmethod
    def snapshot(state: GameState, preview: int = DEFAULT_STOCK_PREVIEW, letters: bool = False) -> GameViewModel:
        preview = max(1, int(preview))
        idx = state.stock_index
        shown = []
        if idx >= 0:
            for i in range(max(0, idx - preview + 1), idx + 1):
                # browsed stock cards are always rendered face-up
                shown.append(CoreAdapter.card_view(state.stock[i], letters, visible=True))
        stock = StockPreview(cards=tuple(shown), remaining=len(state.stock) - (idx + 1))

        def pile_view(pile):
            return PileView(cards=tuple(CoreAdapter.card_view(c, letters) for c in pile))

        return GameViewModel(
            moves=state.moves,
            finished=state.finished,
            stock=stock,
            tableau=tuple(pile_view(p) for p in state.tableau),
            foundations=tuple(pile_view(p) for p in state.foundations),
        )

    @staticmethod
    def event_to_update(event: GameEvent) -> BoardUpdate:
        if isinstance(event, CardMove):
            return BoardUpdate(
                type="MOVE",
                payload={"src": event.src, "dest": event.dest, "count": event.count},
            )
        if isinstance(event, StockAdvance):
            return BoardUpdate(
                type="BROWSE",
                payload={"stock_index": event.stockIndex},
            )
        if isinstance(event, RevealTop):
            return BoardUpdate(
                type="REVEAL",
                payload={"pile": event.idx},
            )
        return BoardUpdate(type="UNKNOWN", payload={"event": type(event).__name__})
