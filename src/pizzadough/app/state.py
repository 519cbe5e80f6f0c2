from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from pizzadough.config import DEFAULT_RATIOS, INPUT_RANGES
from pizzadough.model.dough import DoughInputs, DoughResult, calculate

logger = logging.getLogger(__name__)

RATIO_KEYS: tuple[str, ...] = tuple(DEFAULT_RATIOS)
INPUT_EVENTS: tuple[str, ...] = ("count", "size", "hydration", *RATIO_KEYS, "custom_ratios")


class Store(QObject):
    """
    Central state store: raw input values plus the last result.

    Every named input event is subscribed to `recalculate`, so one entry point
    serves all sliders. Panels listen to `result_changed`.
    """
    input_changed = Signal(str, object)
    result_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._values: dict[str, float] = {key: rng.default for key, rng in INPUT_RANGES.items()}
        self._custom_ratios = False
        self._subscribers: dict[str, list[Callable[[], None]]] = {event: [] for event in INPUT_EVENTS}
        self.result: Optional[DoughResult] = None

        for event in INPUT_EVENTS:
            self.subscribe(event, self.recalculate)

    # ---- observer wiring ----

    def subscribe(self, event: str, callback: Callable[[], None]) -> None:
        if event not in self._subscribers:
            raise KeyError(f"Unknown input event '{event}'.")
        self._subscribers[event].append(callback)

    def _notify(self, event: str) -> None:
        for callback in list(self._subscribers[event]):
            callback()

    # ---- inputs ----

    def value(self, name: str) -> float:
        return self._values[name]

    @property
    def custom_ratios(self) -> bool:
        return self._custom_ratios

    def set_input(self, name: str, value: float) -> None:
        """Update one named input and fire its event."""
        if name == "custom_ratios":
            self.set_custom_ratios(bool(value))
            return
        if name not in self._values:
            raise KeyError(f"Unknown input '{name}'.")

        self._values[name] = value
        self.input_changed.emit(name, value)
        self._notify(name)

    def set_custom_ratios(self, enabled: bool) -> None:
        self._custom_ratios = enabled
        self.input_changed.emit("custom_ratios", enabled)
        self._notify("custom_ratios")

    def current_inputs(self) -> DoughInputs:
        ratios = {key: self._values[key] for key in RATIO_KEYS} if self._custom_ratios else None
        return DoughInputs.clamped(
            count=self._values["count"],
            size=self._values["size"],
            hydration=self._values["hydration"],
            ratios=ratios,
        )

    def recalculate(self) -> DoughResult:
        self.result = calculate(self.current_inputs())
        logger.debug(
            "Recalculated: %d x %dg = %dg",
            self.result.inputs.pizza_count,
            self.result.individual_ball_weight_grams,
            self.result.total_weight_grams,
        )
        self.result_changed.emit(self.result)
        return self.result
