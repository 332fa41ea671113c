from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

# (color group or None for all groups, role, color)
DARK_THEME = (
    (None, QPalette.Window, QColor(53, 53, 53)),
    (None, QPalette.WindowText, QColor(Qt.white)),
    (None, QPalette.Base, QColor(35, 35, 35)),
    (None, QPalette.AlternateBase, QColor(53, 53, 53)),
    (None, QPalette.ToolTipBase, QColor(Qt.white)),
    (None, QPalette.ToolTipText, QColor(Qt.black)),
    (None, QPalette.Text, QColor(Qt.white)),
    (None, QPalette.Button, QColor(66, 66, 66)),
    (None, QPalette.ButtonText, QColor(Qt.white)),
    (None, QPalette.BrightText, QColor(Qt.red)),
    (None, QPalette.Link, QColor(42, 130, 218)),
    (None, QPalette.Highlight, QColor(42, 130, 218)),
    (None, QPalette.HighlightedText, QColor(Qt.white)),
    (None, QPalette.PlaceholderText, QColor(160, 160, 160)),
    # greyed out widgets
    (QPalette.Disabled, QPalette.Text, QColor(127, 127, 127)),
    (QPalette.Disabled, QPalette.ButtonText, QColor(127, 127, 127)),
    (QPalette.Disabled, QPalette.WindowText, QColor(127, 127, 127)),
)


def dark_palette(theme=DARK_THEME):
    """
    build a QPalette from (group, role, color) rows
    """
    palette = QPalette()
    for group, role, color in theme:
        if group is None:
            palette.setColor(role, color)
        else:
            palette.setColor(group, role, color)
    return palette


def apply_dark_theme(app):
    # Fusion honours the palette on every platform
    app.setStyle('Fusion')
    app.setPalette(dark_palette())
