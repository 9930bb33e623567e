import logging

from ..game_logic import GameEngine
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QApplication
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)

WINDOW_TITLE = "Tic Tac Toe"
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 450  # taller than wide to fit status + reset button
STATUS_FONT_SIZE = 18
BUTTON_FONT_SIZE = 14


class TicTacToeWindow(QMainWindow):
    """
    main window: status line, board, reset button
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine or GameEngine()
        self.board_widget = BoardWidget(self.engine.current_state(), parent=self)
        self._setup_ui()
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.status_label = QLabel("")
        f = QFont("Arial"); f.setPointSize(STATUS_FONT_SIZE); f.setBold(True)
        self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.status_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # reset button
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.reset_button = QPushButton("Reset Game")
        f = QFont("Arial"); f.setPointSize(BUTTON_FONT_SIZE); self.reset_button.setFont(f)
        self.reset_button.clicked.connect(self.reset_game)
        hl.addStretch(1); hl.addWidget(self.reset_button); hl.addStretch(1)

    def center_on_screen(self):
        # middle of the primary screen, if there is one
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geo = screen.availableGeometry()
        x = geo.x() + (geo.width() - self.width()) // 2
        y = geo.y() + (geo.height() - self.height()) // 2
        self.move(x, y)

    def _render(self):
        # board + status from the engine snapshot
        state = self.engine.current_state()
        self.board_widget.set_state(state)
        self.board_widget.set_accept_clicks(not state.is_over)
        self.status_label.setText(state.status_message())

    def _show_game_over(self, message):
        QMessageBox.information(self, "Game Over", message)

    def _show_invalid_move(self, message):
        QMessageBox.warning(self, "Invalid Move", message)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        state = self.engine.current_state()
        result = self.engine.apply_move(r, c, state.current_player)
        if not result.ok:
            # board stays as drawn
            log.info("move (%d, %d) refused: %s", r, c, result.error.message)
            self._show_invalid_move(result.error.message)
            return
        self._render()
        if result.state.is_over:
            self._show_game_over(result.state.status_message())

    @Slot()
    def reset_game(self):
        # fresh game, X to move
        self.engine.reset()
        self._render()
