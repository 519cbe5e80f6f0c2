from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget, QVBoxLayout

from pizzadough.model.dough import DoughResult, format_inches, present
from pizzadough.model.geometry import disk_outline, inch_ticks

DOUGH_FILL = (244, 208, 150, 200)
DOUGH_EDGE = "#8a5a2b"


class DiskPreview(QWidget):
    """
    Top-down preview of one pizza to scale, in centimeters, with an inch
    ruler along the bottom and the ball weight as a caption.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)

        layout = QVBoxLayout(self)
        self.plot = pg.PlotWidget(background="w")
        self.plot.setAspectLocked(True)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()
        self.plot.showGrid(x=True, y=True, alpha=0.2)
        self.plot.setLabel("bottom", "cm")
        layout.addWidget(self.plot)

        self._curve = self.plot.plot([], [], pen=pg.mkPen(DOUGH_EDGE, width=2),
                                     fillLevel=0.0, brush=pg.mkBrush(*DOUGH_FILL))
        self._caption = pg.TextItem(anchor=(0.5, 0.5), color="k")
        self.plot.addItem(self._caption)
        self._ticks: list[pg.TextItem] = []

    def set_result(self, result: DoughResult) -> None:
        diameter = result.inputs.diameter_cm
        ring = disk_outline(diameter)
        self._curve.setData(ring[:, 0], ring[:, 1])

        view = present(result)
        self._caption.setText(f"{view.size} ({format_inches(result.diameter_in)})\n"
                              f"{result.individual_ball_weight_grams}g")
        self._caption.setPos(0.0, 0.0)

        self._draw_ticks(diameter)

        margin = 0.15 * diameter
        half = diameter / 2 + margin
        self.plot.setRange(xRange=(-half, half), yRange=(-half, half), padding=0.0)

    def _draw_ticks(self, diameter: float) -> None:
        for item in self._ticks:
            self.plot.removeItem(item)
        self._ticks.clear()

        y = -diameter / 2 - 0.06 * diameter
        for x, label in inch_ticks(diameter):
            item = pg.TextItem(label, anchor=(0.5, 0.0), color="#808080")
            item.setPos(float(np.round(x, 3)), y)
            self.plot.addItem(item)
            self._ticks.append(item)
