from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Player, winning_line

BACKGROUND_COLOR = QColor("#ffffff")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#2a82da")
O_COLOR = QColor("#da2a2a")
HIGHLIGHT_COLOR = QColor(255, 215, 0, 110)


class BoardWidget(QWidget):
    """
    draws a game state snapshot and turns clicks into (row, col)
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, state, parent=None):
        super().__init__(parent)
        self._state = state             # last snapshot from the engine
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_state(self, state):
        # new snapshot, repaint
        self._state = state
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks and not self._state.is_over

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and shade the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            board = self._state.board
            # winning cells go under the marks
            line = winning_line(board)
            if line:
                for r, c in line:
                    painter.fillRect(int(offset_x + c*cell_size), int(offset_y + r*cell_size),
                                     int(cell_size), int(cell_size), HIGHLIGHT_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # marks
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    mark = board[r][c]
                    if mark is None:
                        continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = cell_size/2 * 0.6
                    if mark is Player.X:
                        painter.setPen(QPen(X_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(O_COLOR, 6))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None when outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox) // cell); row = int((y-oy) // cell)
        # float edge cases at the far border
        row = min(row, BOARD_SIZE-1); col = min(col, BOARD_SIZE-1)
        return row, col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self.accepts_clicks():
            return
        pos = event.position()
        hit = self.cell_at(pos.x(), pos.y())
        if hit is not None:
            self.cell_clicked.emit(*hit)  # notify main window
