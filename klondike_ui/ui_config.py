NUMS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
SUIT_SYMBOLS = ("♣", "♦", "♥", "♠")
SUIT_LETTERS = ("C", "D", "H", "S")
SUIT_COLORS = ("black", "red", "red", "black")

SUIT_STYLE_ORDER = ("symbols", "letters")
STOCK_PREVIEW_ORDER = (1, 2, 3)
DEFAULT_STOCK_PREVIEW = 3

HIDDEN_CARD = "---"
EMPTY_SLOT = "[ ]"
