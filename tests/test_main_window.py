import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtWidgets import QApplication

from tictactoe.game_logic import GameEngine, GameMode, GameStatus, Player
from tictactoe.storage import MemoryScoreStore
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp, first_choice):
    engine = GameEngine(store=MemoryScoreStore(), rng=first_choice)
    win = TicTacToeWindow(engine, ai_delay_ms=0, show_dialogs=False)
    yield win
    win.close()


def click(window, *cells):
    for index in cells:
        window.board_widget.cell_clicked.emit(index)


def test_starts_with_x_to_move(window):
    assert window.message_label.text() == "player X's turn"
    assert window.score_x_label.text() == "X: 0"
    assert window.board_widget.accepts_clicks()


def test_click_places_marks(window):
    click(window, 4)
    assert window.engine.get_board()[4] == 'X'
    assert window.message_label.text() == "player O's turn"


def test_taken_cell_message(window):
    click(window, 4, 4)
    assert window.message_label.text() == "cell taken"
    assert window.engine.current_player.value == 'O'


def test_win_updates_scores_and_locks_board(window):
    click(window, 0, 4, 1, 5, 2)
    assert window.engine.status is GameStatus.WON
    assert window.score_x_label.text() == "X: 1"
    assert window.message_label.text() == "Player X has won the game!"
    assert not window.board_widget.accepts_clicks()


def test_draw_updates_draw_count(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.engine.status is GameStatus.DRAW
    assert window.score_draw_label.text() == "Draws: 1"


def test_reset_keeps_scores_new_game_clears(window):
    click(window, 0, 4, 1, 5, 2)
    window.reset_game()
    assert window.engine.get_board() == ('',) * 9
    assert window.score_x_label.text() == "X: 1"
    assert window.board_widget.accepts_clicks()
    window.new_game()
    assert window.score_x_label.text() == "X: 0"


def test_computer_move_is_scheduled(window):
    window.toggle_mode()
    assert window.engine.mode is GameMode.COMPUTER
    assert window.computer_radio.isChecked()
    click(window, 0)
    # human can't click while the computer is due
    assert window.ai_timer.isActive()
    assert not window.board_widget.accepts_clicks()
    click(window, 8)
    assert window.engine.get_board()[8] == ''
    window._play_computer_move()
    assert window.engine.get_board()[4] == 'O'
    assert window.board_widget.accepts_clicks()
    assert window.message_label.text() == "player X's turn"


def test_mode_switch_clears_board_and_pending_move(window):
    window.toggle_mode()
    click(window, 0)
    window.toggle_mode()
    assert window.engine.mode is GameMode.TWO_PLAYER
    assert not window.ai_timer.isActive()
    assert window.engine.get_board() == ('',) * 9


def test_board_widget_maps_clicks_to_cells(qapp):
    widget = BoardWidget(GameEngine())
    widget.resize(300, 300)
    assert widget.cell_at(10, 10) == 0
    assert widget.cell_at(150, 150) == 4
    assert widget.cell_at(290, 290) == 8
    assert widget.cell_at(290, 10) == 2
    assert widget.cell_at(-5, 10) is None


def test_board_widget_centers_the_grid(qapp):
    widget = BoardWidget(GameEngine())
    widget.resize(400, 300)
    # 50px margin on both sides
    assert widget.cell_at(20, 150) is None
    assert widget.cell_at(60, 10) == 0


def test_switching_to_computer_as_x_starts_its_move(qapp, first_choice):
    engine = GameEngine(ai_player=Player.X, store=MemoryScoreStore(), rng=first_choice)
    win = TicTacToeWindow(engine, ai_delay_ms=0, show_dialogs=False)
    win.toggle_mode()
    assert win.engine.ai_to_move()
    assert win.ai_timer.isActive()
    assert not win.board_widget.accepts_clicks()
    win._play_computer_move()
    assert win.engine.get_board()[4] == 'X'
    assert win.board_widget.accepts_clicks()
    win.close()


def test_dark_palette_colors(qapp):
    from PySide6.QtGui import QColor, QPalette
    from tictactoe.ui.theme import dark_palette

    palette = dark_palette()
    assert palette.color(QPalette.Active, QPalette.Window) == QColor(53, 53, 53)
    assert palette.color(QPalette.Active, QPalette.Button) == QColor(66, 66, 66)
    assert palette.color(QPalette.Disabled, QPalette.Text) == QColor(127, 127, 127)
