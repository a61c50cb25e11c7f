from klondike.Core import Core, GameEvent


class Interface:

    def __init__(self):
        self.core: Core = None

    def onStart(self):
        self.notifyRedraw()

    def onEvent(self, event: GameEvent):
        """
        Invoked after a move has been applied.
        :param event:
        :return:
        """
        self.notifyRedraw()

    def notifyRedraw(self):
        pass

    def onWin(self):
        pass
