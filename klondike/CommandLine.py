import argparse
import logging

from klondike.Card import InvalidDeckError
from klondike.Core import Core, GameConfig
from klondike.Deck import decodeDeck
from klondike.Interface import Interface
from klondike_ui.adapter import CoreAdapter
from klondike_ui.settings_store import load_settings, seed_from
from klondike_ui.ui_config import EMPTY_SLOT, HIDDEN_CARD

HELP = """commands:
  d | draw          browse the next stock card
  s | stock         play the exposed stock card
  f N               play the top card of foundation N back to the tableau
  t N [M]           play tableau pile N from card M (default: top card)
  new               deal a new game
  code              print the deck code of the current deal
  q | quit          leave"""


def cardStr(view):
    if not view.visible:
        return HIDDEN_CARD
    return (view.glyph + view.label).ljust(3)


class CommandLineInterface(Interface):

    def __init__(self, preview=3, letters=False, out=print):
        super().__init__()
        self.preview = preview
        self.letters = letters
        self.out = out

    def printAll(self):
        vm = CoreAdapter.snapshot(self.core.getState(), self.preview, self.letters)
        out = self.out
        out(f"Moves: {vm.moves}        Stock: {vm.stock.remaining}")
        foundations = "  ".join(cardStr(p.top) if p.top else EMPTY_SLOT for p in vm.foundations)
        browsed = " ".join(cardStr(c) for c in vm.stock.cards) or EMPTY_SLOT
        out(f"F: {foundations}      S: {browsed}")
        out("----0----1----2----3----4----5----6---")
        i = 0
        while True:
            has = False
            line = str(i).rjust(2) + ": "
            for pile in vm.tableau:
                if len(pile.cards) <= i:
                    line += "     "
                    continue
                has = True
                line += cardStr(pile.cards[i])
                line += "  "
            if not has:
                break
            out(line.rstrip())
            i += 1
        out("")

    def onStart(self):
        self.out("Game started!")
        super().onStart()

    def notifyRedraw(self):
        self.printAll()

    def onWin(self):
        self.out("You win!")


def runCommand(core: Core, command: str, config: GameConfig):
    """
    Executes one line of input.
    :return: False to quit, True otherwise
    """
    out = core.interface.out
    parts = command.split()
    if not parts:
        return True
    name = parts[0].lower()
    if name in ("q", "quit", "exit"):
        return False
    if name in ("d", "draw"):
        core.askAdvanceStock()
    elif name in ("s", "stock"):
        if not core.askPlayStock():
            out("Cannot move!")
    elif name in ("f", "t"):
        try:
            pileIndex = int(parts[1])
            if name == "f":
                ok = core.askPlayFoundation(pileIndex)
            else:
                pile = core.getState().tableau[pileIndex]
                cardIndex = int(parts[2]) if len(parts) > 2 else len(pile) - 1
                ok = core.askPlayTableau(pileIndex, cardIndex)
        except (ValueError, IndexError):
            out("Invalid index!")
            return True
        if not ok:
            out("Cannot move!")
    elif name == "new":
        # a repeated "new" must not redeal the same fixed deck
        core.newGame(GameConfig(seed=None) if config.deckCode or config.seed is not None else config)
    elif name == "code":
        out(core.deckCode or "")
    elif name in ("h", "help", "?"):
        out(HELP)
    else:
        out("Invalid command!")
    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Klondike solitaire in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed; overrides settings.ini")
    parser.add_argument("--deck", type=str, default=None, help="deck code printed by the 'code' command")
    parser.add_argument("--preview", type=int, choices=(1, 2, 3), default=None,
                        help="number of browsed stock cards to show")
    parser.add_argument("--letters", action="store_true", help="use C/D/H/S instead of suit symbols")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser, parser.parse_args(argv)


def main(argv=None, input_fn=input):
    parser, args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings()

    seed = args.seed if args.seed is not None else seed_from(settings)
    preview = args.preview if args.preview is not None else int(settings["stock_preview"])
    letters = args.letters or settings["suit_style"] == "letters"
    if args.deck:
        try:
            decodeDeck(args.deck)
        except InvalidDeckError as e:
            parser.error(str(e))
    config = GameConfig(seed=seed, deckCode=args.deck)

    interface = CommandLineInterface(preview=preview, letters=letters)
    core = Core()
    core.registerInterface(interface)
    core.newGame(config)
    interface.out(HELP)
    while True:
        try:
            command = input_fn()
        except EOFError:
            break
        if not runCommand(core, command, config):
            break
        if core.gameEnded:
            interface.out("Type 'new' for another game or 'q' to quit.")


if __name__ == '__main__':
    main()
