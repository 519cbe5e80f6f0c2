from __future__ import annotations

from functools import partial

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout, QSlider,
    QSizePolicy, QDoubleSpinBox,
)

from pizzadough.app.state import RATIO_KEYS, Store
from pizzadough.app.ui.panels.base import BasePanel
from pizzadough.config import INGREDIENT_NAMES, INPUT_RANGES
from pizzadough.model.dough import DoughResult, present


class InputPanel(BasePanel):
    """
    Sliders for count, size and hydration, plus a checkable group with the
    minor ingredient ratios. Every change goes to the Store as a named input.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        # main sliders
        self.dough_box = QGroupBox(self.tr("Dough"), self)
        root.addWidget(self.dough_box, 0)
        self.grid = QGridLayout(self.dough_box)
        self.grid.setVerticalSpacing(8)
        self._row = 0
        self._sliders: dict[str, QSlider] = {}

        self.count_value = self._add_slider("count", "Pizzas:")
        self.size_value = self._add_slider("size", "Size:")
        self.inch_value = QLabel(self.dough_box)
        self.inch_value.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.grid.addWidget(self.inch_value, self._next_row(), 2)
        self.hydration_badge = self._add_slider("hydration", "Hydration:")

        # minor ratios
        self.ratios_box = QGroupBox(self.tr("Custom ratios"), self)
        self.ratios_box.setCheckable(True)
        self.ratios_box.setChecked(store.custom_ratios)
        self.ratios_box.toggled.connect(self.store.set_custom_ratios)
        root.addWidget(self.ratios_box, 0)
        self.ratios_grid = QGridLayout(self.ratios_box)
        self._spins: dict[str, QDoubleSpinBox] = {}
        for i, key in enumerate(RATIO_KEYS):
            self._add_spin(key, f"{INGREDIENT_NAMES[key]}:", i)

        root.addStretch()

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_slider(self, key: str, label: str) -> QLabel:
        rng = INPUT_RANGES[key]
        row = self._next_row()
        self.grid.addWidget(QLabel(self.tr(label), self.dough_box), row, 0)

        slider = QSlider(Qt.Orientation.Horizontal, self.dough_box)
        slider.setRange(int(rng.minimum), int(rng.maximum))
        slider.setSingleStep(int(rng.step))
        slider.setValue(int(self.store.value(key)))
        slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        slider.valueChanged.connect(partial(self.store.set_input, key))
        self.grid.addWidget(slider, row, 1)
        self._sliders[key] = slider

        value = QLabel(self.dough_box)
        value.setMinimumWidth(48)
        value.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.grid.addWidget(value, row, 2)
        return value

    def _add_spin(self, key: str, label: str, row: int) -> QDoubleSpinBox:
        rng = INPUT_RANGES[key]
        self.ratios_grid.addWidget(QLabel(self.tr(label), self.ratios_box), row, 0)
        w = QDoubleSpinBox(self.ratios_box)
        w.setRange(rng.minimum, rng.maximum)
        w.setSingleStep(rng.step)
        w.setDecimals(1)
        w.setValue(self.store.value(key))
        w.setSuffix(" %")
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        w.valueChanged.connect(partial(self.store.set_input, key))
        self.ratios_grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    @Slot(object)
    def on_result_changed(self, result: DoughResult) -> None:
        view = present(result)
        self.count_value.setText(view.count)
        self.size_value.setText(view.size)
        self.inch_value.setText(view.inches)
        self.hydration_badge.setText(view.hydration_badge)
