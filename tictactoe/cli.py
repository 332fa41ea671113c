"""
Terminal front end for the tic-tac-toe engine.

    python -m tictactoe.cli [--computer] [--scores PATH] [--no-save]

Cells are numbered 1-9 left to right, top to bottom. Besides a cell number
the prompt takes r (reset board), n (new game, clears scores),
m (switch opponent) and q (quit).
"""

import argparse
import logging
import sys

from .config import SCORES_PATH, setup_logging
from .game_logic import GameEngine, GameMode, GameStatus
from .storage import JsonScoreStore, MemoryScoreStore

log = logging.getLogger(__name__)


def format_board(board):
    """Board as text; free cells show their 1-9 number."""
    rows = []
    for r in range(3):
        cells = [board[r*3 + c] or str(r*3 + c + 1) for c in range(3)]
        rows.append(f" {cells[0]} | {cells[1]} | {cells[2]}")
    return "\n---+---+---\n".join(rows)


def format_scores(scores):
    return f"X: {scores['X']}  O: {scores['O']}  Draws: {scores['draw']}"


class TerminalGame:
    """
    text adapter: reads commands, feeds the engine, prints results
    """
    def __init__(self, engine, input_func=None, output=None):
        self.engine = engine
        self.input = input_func or input
        self.output = output or print

    def show_board(self):
        self.output("")
        self.output(format_board(self.engine.get_board()))
        self.output("")

    def report(self, result):
        """print the outcome of an accepted move"""
        who = "computer" if self._is_computer(result.player) else "player"
        self.output(f"{who} {result.player.value} -> cell {result.index + 1}")
        if result.status is GameStatus.WON:
            self.show_board()
            self.output(f"{result.winner.value} wins!")
            self.output(format_scores(self.engine.get_scores()))
        elif result.status is GameStatus.DRAW:
            self.show_board()
            self.output("It's a draw!")
            self.output(format_scores(self.engine.get_scores()))

    def _is_computer(self, player):
        return self.engine.mode is GameMode.COMPUTER and player is self.engine.ai_player

    def handle(self, command):
        """
        act on one line of input; False means quit
        """
        command = command.strip().lower()
        if command in ('q', 'quit', 'exit'):
            return False
        if command == 'r':
            self.engine.reset(keep_scores=True)
            self.output("board cleared")
        elif command == 'n':
            self.engine.reset(keep_scores=False)
            self.output("new game, scores cleared")
        elif command == 'm':
            computer = self.engine.mode is GameMode.COMPUTER
            self.engine.set_mode(GameMode.TWO_PLAYER if computer else GameMode.COMPUTER)
            self.output("now playing " + ("2 players" if computer else "vs computer"))
        elif command.isdecimal() and command.isascii():
            result = self.engine.place_mark(int(command) - 1)
            if result.error:
                self.output("!! pick a cell from 1 to 9")
            elif not result.accepted:
                self.output("!! cell taken" if self.engine.is_active else "!! game over, r to play again")
            else:
                self.report(result)
        else:
            self.output("!! enter 1-9, r, n, m or q")
        return True

    def play_computer(self):
        # the engine refuses when it isn't the computer's turn
        result = self.engine.computer_move()
        if result.accepted:
            self.report(result)

    def run(self):
        self.output("--- Tic-Tac-Toe ---")
        self.output(format_scores(self.engine.get_scores()))
        while True:
            self.play_computer()
            self.show_board()
            if self.engine.is_active:
                prompt = f"player {self.engine.current_player.value}, cell (1-9): "
            else:
                prompt = "r: play again, n: new game, q: quit: "
            try:
                line = self.input(prompt)
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
            if not self.handle(line):
                break
        self.output(format_scores(self.engine.get_scores()))


def build_parser():
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe in the terminal")
    parser.add_argument(
        "--computer",
        action="store_true",
        help="Play against the computer (it plays O)"
    )
    parser.add_argument(
        "--scores",
        default=str(SCORES_PATH),
        help="Where to keep the score tally (default: %(default)s)"
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Keep scores in memory only"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging()
    store = MemoryScoreStore() if args.no_save else JsonScoreStore(args.scores)
    mode = GameMode.COMPUTER if args.computer else GameMode.TWO_PLAYER
    engine = GameEngine(mode=mode, store=store)
    log.debug("starting terminal game in %s mode", mode.value)
    TerminalGame(engine).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
