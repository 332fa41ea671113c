import sys

from PySide6.QtWidgets import QApplication
from tictactoe.config import SCORES_PATH, setup_logging
from tictactoe.game_logic import GameEngine, GameMode
from tictactoe.storage import JsonScoreStore
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.ui.theme import apply_dark_theme

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    argv = sys.argv if argv is None else argv
    setup_logging()
    app = QApplication(argv)
    apply_dark_theme(app)

    # scores survive restarts; "--computer" starts against the AI
    mode = GameMode.COMPUTER if "--computer" in argv[1:] else GameMode.TWO_PLAYER
    engine = GameEngine(mode=mode, store=JsonScoreStore(SCORES_PATH))
    window = TicTacToeWindow(engine)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
