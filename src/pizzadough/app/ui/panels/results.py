from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QGuiApplication, QTextDocument, QFont
from PySide6.QtPrintSupport import QPrintDialog, QPrinter
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QTableWidget,
    QTableWidgetItem, QHeaderView, QPushButton, QAbstractItemView, QDialog,
)

from pizzadough.app.state import Store
from pizzadough.app.ui.panels.base import BasePanel
from pizzadough.model.dough import DoughResult, format_recipe, present

logger = logging.getLogger(__name__)

HEADERS = ["Ingredient", "Baker's %", "Weight"]


class ResultsPanel(BasePanel):
    """
    Total dough weight, the ingredient table and the recipe actions.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        box = QGroupBox(self.tr("Total dough"), self)
        root.addWidget(box, 0)
        v = QVBoxLayout(box)

        self.total_label = QLabel(box)
        font = QFont(self.total_label.font())
        font.setPointSizeF(font.pointSizeF() * 2)
        font.setBold(True)
        self.total_label.setFont(font)
        v.addWidget(self.total_label)

        self.per_pizza_label = QLabel(box)
        v.addWidget(self.per_pizza_label)

        self.print_details = QLabel(box)
        self.print_details.setWordWrap(True)
        v.addWidget(self.print_details)

        self.table = QTableWidget(0, len(HEADERS), self)
        self.table.setHorizontalHeaderLabels([self.tr(h) for h in HEADERS])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        root.addWidget(self.table, 1)

        self.knead_note = QLabel(self)
        self.knead_note.setWordWrap(True)
        root.addWidget(self.knead_note, 0)

        buttons = QHBoxLayout()
        self.copy_button = QPushButton(self.tr("Copy recipe"), self)
        self.copy_button.clicked.connect(self.copy_recipe)
        self.print_button = QPushButton(self.tr("Print..."), self)
        self.print_button.clicked.connect(self.print_recipe)
        buttons.addStretch()
        buttons.addWidget(self.copy_button)
        buttons.addWidget(self.print_button)
        root.addLayout(buttons)

    @Slot(object)
    def on_result_changed(self, result: DoughResult) -> None:
        view = present(result)
        self.total_label.setText(view.total)
        self.per_pizza_label.setText(view.per_pizza)
        self.print_details.setText(view.print_details)
        self.knead_note.setText(view.knead_note)

        self.table.setRowCount(len(view.rows))
        for r, row in enumerate(view.rows):
            for c, text in enumerate(row):
                item = QTableWidgetItem(text)
                if c > 0:
                    item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
                self.table.setItem(r, c, item)

    def _recipe_text(self) -> str:
        if self.store.result is None:
            return ""
        return format_recipe(self.store.result)

    @Slot()
    def copy_recipe(self) -> None:
        QGuiApplication.clipboard().setText(self._recipe_text())
        logger.info("Recipe copied to clipboard.")

    @Slot()
    def print_recipe(self) -> None:
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        dialog = QPrintDialog(printer, self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return

        document = QTextDocument()
        document.setDefaultFont(QFont("Monospace"))
        document.setPlainText(self._recipe_text())
        document.print_(printer)
        logger.info("Recipe sent to printer '%s'.", printer.printerName())
