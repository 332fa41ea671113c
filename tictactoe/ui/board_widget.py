from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import BOARD_SIZE, index_to_row_col, row_col_to_index

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_FILL_COLOR = "#3d5a3d"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine            # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square side, x/y offset to center it, cell size
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w-side)/2, (h-side)/2, side / BOARD_SIZE

    def cell_rect(self, index):
        side, ox, oy, cell = self._geometry()
        row, col = index_to_row_col(index)
        return QRectF(ox + col*cell, oy + row*cell, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        side, ox, oy, cell = self._geometry()
        if cell <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row_col_to_index(row, col)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        side, offset_x, offset_y, cell_size = self._geometry()
        # background
        painter.fillRect(self.rect(), QColor("#333"))
        # winning cells
        line = self.engine.winning_line
        if line:
            for index in line:
                painter.fillRect(self.cell_rect(index), QColor(WIN_FILL_COLOR))
        # grid lines
        painter.setPen(QPen(QColor("#555"), 2))
        for i in range(1, BOARD_SIZE):
            x = offset_x + i*cell_size
            painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
            y = offset_y + i*cell_size
            painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
        # draw marks
        for index, sym in enumerate(self.engine.get_board()):
            if not sym: continue
            center = self.cell_rect(index).center()
            cx, cy = center.x(), center.y()
            rad = cell_size/2 * 0.7
            if sym == 'X':
                painter.setPen(QPen(QColor(X_COLOR), 4))
                # two crossing lines
                painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
            else:
                painter.setPen(QPen(QColor(O_COLOR), 4))
                painter.drawEllipse(QPointF(cx, cy), rad, rad)
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or not self.engine.is_active:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
