import logging

from ..config import AI_DELAY_MS
from ..game_logic import GameEngine, GameMode, GameStatus
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu,
    QRadioButton, QGroupBox, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

log = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, engine=None, ai_delay_ms=AI_DELAY_MS, show_dialogs=True):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self.show_dialogs = show_dialogs  # end-of-game message box
        # one pending computer move at most; reset cancels it
        self.ai_timer = QTimer(self)
        self.ai_timer.setSingleShot(True)
        self.ai_timer.setInterval(ai_delay_ms)
        self.ai_timer.timeout.connect(self._play_computer_move)

        self._setup_ui()
        self._refresh()
        if self.engine.ai_to_move():       # computer opens as X
            self.ai_timer.start()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_mode_controls()       # 2 players / vs computer
        self.main_layout.addWidget(self.mode_controls_group)
        self._create_score_bar()           # X / draws / O
        self.main_layout.addWidget(self.score_bar_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        reset_action = QAction("Reset Board", self)
        reset_action.triggered.connect(self.reset_game)
        new_action = QAction("New Game (clear scores)", self)
        new_action.triggered.connect(self.new_game)
        self.toggle_mode_action = QAction("vs Computer", self)
        self.toggle_mode_action.triggered.connect(self.toggle_mode)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (reset_action, new_action, self.toggle_mode_action):
            game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_mode_controls(self):
        '''opponent mode group'''
        self.mode_controls_group = QGroupBox("Opponent")
        layout = QHBoxLayout()
        self.two_player_radio = QRadioButton("2 Players")
        self.computer_radio = QRadioButton("vs Computer")
        if self.engine.mode is GameMode.COMPUTER:
            self.computer_radio.setChecked(True)
        else:
            self.two_player_radio.setChecked(True)
        self.computer_radio.toggled.connect(self._on_mode_radio_toggled)
        layout.addWidget(self.two_player_radio)
        layout.addWidget(self.computer_radio)
        layout.addStretch()
        self.mode_controls_group.setLayout(layout)

    def _create_score_bar(self):
        '''score labels'''
        self.score_bar_widget = QWidget()
        hl = QHBoxLayout(self.score_bar_widget)
        f = QFont(); f.setPointSize(12); f.setBold(True)
        self.score_x_label = QLabel(); self.score_draw_label = QLabel(); self.score_o_label = QLabel()
        self.score_x_label.setStyleSheet("color: #8acaff;")
        self.score_o_label.setStyleSheet("color: #ff8a8a;")
        self.score_draw_label.setStyleSheet("color: #eee;")
        for lbl in (self.score_x_label, self.score_draw_label, self.score_o_label):
            lbl.setFont(f); lbl.setAlignment(Qt.AlignCenter)
            hl.addWidget(lbl)

    def _create_bottom_controls(self):
        # status label + reset/new game buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        self.new_game_button = QPushButton("New Game"); self.new_game_button.clicked.connect(self.new_game)
        for w in (self.message_label, None, self.reset_button, self.new_game_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_scores(self):
        scores = self.engine.get_scores()
        self.score_x_label.setText(f"X: {scores['X']}")
        self.score_draw_label.setText(f"Draws: {scores['draw']}")
        self.score_o_label.setText(f"O: {scores['O']}")

    def _refresh(self):
        # redraw board, scores, turn message, mode labels
        self.board_widget.update()
        self._update_scores()
        computer = self.engine.mode is GameMode.COMPUTER
        self.toggle_mode_action.setText("2 Players" if computer else "vs Computer")
        if self.engine.is_active:
            player = self.engine.current_player.value
            if self.engine.ai_to_move():
                self._update_message(f"computer ({player}) is thinking...")
            else:
                self._update_message(f"player {player}'s turn", is_turn=True)
        self.board_widget.set_accept_clicks(
            self.engine.is_active and not self.engine.ai_to_move())

    def _handle_result(self, result):
        # react to a move result: redraw, end-of-game, schedule computer
        self._refresh()
        if result.status is GameStatus.WON:
            p = result.winner.value
            self._handle_game_over(f"{p} Wins!", f"Player {p} has won the game!")
        elif result.status is GameStatus.DRAW:
            self._handle_game_over("It's a Draw!", "The game ended in a tie!")
        elif self.engine.ai_to_move():
            self.ai_timer.start()

    def _handle_game_over(self, title, msg):
        # end game UI updates
        self._update_message(msg, is_success=True)
        self.board_widget.set_accept_clicks(False)
        if self.show_dialogs:
            QMessageBox.information(self, title, msg)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # ignore clicks after game over or while computer is due
        if not self.engine.is_active or self.engine.ai_to_move():
            return
        res = self.engine.place_mark(index)
        if res.error:
            self._update_message(res.error, is_error=True)
        elif not res.accepted:
            self._update_message("cell taken", is_error=True)
        else:
            self._handle_result(res)

    @Slot()
    def _play_computer_move(self):
        res = self.engine.computer_move()
        if res.accepted:
            log.debug("computer played %d", res.index)
            self._handle_result(res)

    @Slot(bool)
    def _on_mode_radio_toggled(self, checked):
        mode = GameMode.COMPUTER if checked else GameMode.TWO_PLAYER
        if mode is not self.engine.mode:
            self.ai_timer.stop()
            self.engine.set_mode(mode)
            self._refresh()
            if self.engine.ai_to_move():   # computer opens as X
                self.ai_timer.start()

    @Slot()
    def toggle_mode(self):
        # flipping the radio drives _on_mode_radio_toggled
        if self.engine.mode is GameMode.COMPUTER:
            self.two_player_radio.setChecked(True)
        else:
            self.computer_radio.setChecked(True)

    @Slot()
    def reset_game(self):
        # clear board, keep scores
        self.ai_timer.stop()
        self.engine.reset(keep_scores=True)
        self._refresh()
        if self.engine.ai_to_move():
            self.ai_timer.start()

    @Slot()
    def new_game(self):
        # clear board and scores
        self.ai_timer.stop()
        self.engine.reset(keep_scores=False)
        self._refresh()
        if self.engine.ai_to_move():
            self.ai_timer.start()

    def closeEvent(self, event):
        # drop any pending computer move
        self.ai_timer.stop()
        event.accept()
