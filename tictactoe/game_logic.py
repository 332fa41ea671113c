"""Game rules, turn order and score tally for one tic-tac-toe session."""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import CELL_COUNT, EMPTY, empty_cells, find_winning_line
from .opponent import choose_move
from .storage import clean_scores, zero_scores

log = logging.getLogger(__name__)

DRAW_KEY = 'draw'                        # tally key next to 'X' and 'O'


class Player(str, Enum):
    """The two marks. X always opens."""
    X = 'X'
    O = 'O'

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class GameStatus(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    DRAW = 'draw'

    @property
    def is_terminal(self):
        return self is not GameStatus.IN_PROGRESS


class GameMode(Enum):
    TWO_PLAYER = '2player'
    COMPUTER = 'computer'


@dataclass(frozen=True)
class MoveResult:
    """
    what a move did; adapters render from this
    """
    status: GameStatus
    index: Optional[int] = None          # cell played (or asked for)
    player: Optional[Player] = None      # who played it
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    accepted: bool = False               # False -> board untouched
    error: Optional[str] = None          # set only for bad input


class GameEngine:
    """
    tic-tac-toe rules, turn and score state for one session
    """
    def __init__(self, mode=GameMode.TWO_PLAYER, ai_player=Player.O,
                 store=None, rng=None):
        """
        init board, turn and scores

        Args:
            mode: TWO_PLAYER or COMPUTER.
            ai_player: mark the computer plays in COMPUTER mode.
            store: object with load_scores()/save_scores(tally), or None.
            rng: random source with choice(seq); random.Random() by default.
        """
        if not isinstance(mode, GameMode):
            raise ValueError(f"unknown game mode: {mode!r}")
        if not isinstance(ai_player, Player):
            raise ValueError(f"ai player must be a Player, got {ai_player!r}")
        self.mode = mode
        self.ai_player = ai_player
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.scores = self._load_scores()
        self.reset()

    def _load_scores(self):
        # no store or failed read -> zeroed tally
        if self.store is None:
            return zero_scores()
        try:
            return clean_scores(self.store.load_scores())
        except Exception as e:
            log.warning("could not load scores, starting from zero: %s", e)
            return zero_scores()

    def _save_scores(self):
        if self.store is None:
            return
        try:
            self.store.save_scores(dict(self.scores))
        except Exception as e:
            log.warning("could not save scores: %s", e)

    @property
    def is_active(self):
        return self.status is GameStatus.IN_PROGRESS

    def get_board(self):
        return tuple(self.board)

    def get_scores(self):
        return dict(self.scores)

    def empty_cells(self):
        return empty_cells(self.board)

    def ai_to_move(self):
        """
        true when the computer owes a move
        """
        return (self.mode is GameMode.COMPUTER and self.is_active
                and self.current_player is self.ai_player)

    def _unchanged(self, index=None, error=None):
        # no-op: accepted=False, status as before
        return MoveResult(status=self.status, index=index, winner=self.winner,
                          winning_line=self.winning_line, error=error)

    def place_mark(self, index):
        """
        put current player's mark at index, check result, switch turn
        returns a MoveResult; never raises for bad moves
        """
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < CELL_COUNT:
            log.debug("rejected move %r: out of range", index)
            return self._unchanged(
                error=f"invalid cell {index!r}, expected 0-{CELL_COUNT - 1}")
        # only if cell empty and game not over
        if not self.is_active or self.board[index] != EMPTY:
            log.debug("ignored move at %d (active=%s)", index, self.is_active)
            return self._unchanged(index=index)

        player = self.current_player
        self.board[index] = player.value
        self.move_count += 1
        log.debug("%s marked cell %d", player.value, index)

        line = find_winning_line(self.board)
        if line is not None:
            self.status = GameStatus.WON
            self.winner = player; self.winning_line = line
            self.scores[player.value] += 1
            self._save_scores()
            log.info("%s wins on %s", player.value, line)
        elif self.move_count == CELL_COUNT:
            self.status = GameStatus.DRAW
            self.scores[DRAW_KEY] += 1
            self._save_scores()
            log.info("game drawn")
        else:
            self.current_player = player.opposite()

        return MoveResult(status=self.status, index=index, player=player,
                          winner=self.winner, winning_line=self.winning_line,
                          accepted=True)

    def computer_move(self):
        """
        let the computer pick and play its cell; no-op when it isn't due
        """
        if not self.ai_to_move():
            log.debug("computer move requested but not due")
            return self._unchanged()
        index = choose_move(self.board, self.ai_player.value, self.rng)
        if index is None:
            return self._unchanged()
        return self.place_mark(index)

    def set_mode(self, mode):
        """
        switch opponent mode; always starts a fresh board, scores kept
        """
        if not isinstance(mode, GameMode):
            raise ValueError(f"unknown game mode: {mode!r}")
        self.mode = mode
        self.reset(keep_scores=True)

    def reset(self, keep_scores=True):
        """
        clear board and flags; zero the tally too unless keep_scores
        """
        self.board = [EMPTY] * CELL_COUNT
        self.current_player = Player.X
        self.status = GameStatus.IN_PROGRESS
        self.winner = None; self.winning_line = None
        self.move_count = 0
        if not keep_scores:
            self.scores = zero_scores()
            self._save_scores()
