"""
Dough Calculator
================
Turns pizza parameters into absolute ingredient weights.

Why is this file needed?
------------------------
1. Math: It owns the surface-area based dough weight and the baker's
   percentage inversion, with no knowledge of widgets.
2. Boundary: `DoughInputs` is the validated record the UI builds from its
   sliders before every recalculation.
3. Presentation: It formats the strings the window shows, so the tests can
   check them without a display.

Classes:
    DoughInputs: Validated calculator inputs.
    IngredientLine: One row of the ingredient table.
    DoughResult: Everything derived from one set of inputs.
    DoughPresentation: Display strings for a DoughResult.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Optional

from pizzadough.config import (
    ADVISORY_HIGH_HYDRATION,
    CM_PER_INCH,
    DEFAULT_RATIOS,
    FLOUR_PERCENTAGE,
    HIGH_HYDRATION_THRESHOLD,
    INGREDIENT_NAMES,
    INPUT_RANGES,
    THICKNESS_FACTOR,
)

logger = logging.getLogger(__name__)


class InvalidDoughInputs(ValueError):
    """Raised when calculator inputs are outside their domain."""


@dataclass(frozen=True)
class DoughInputs:
    """
    The current calculator inputs.

    The four minor ratios are baker's percentages and default to the house
    recipe. A pizza count of 0 is accepted and yields an empty batch.
    """
    pizza_count: int
    diameter_cm: float
    hydration_pct: float
    salt_pct: float = DEFAULT_RATIOS["salt"]
    oil_pct: float = DEFAULT_RATIOS["oil"]
    sugar_pct: float = DEFAULT_RATIOS["sugar"]
    yeast_pct: float = DEFAULT_RATIOS["yeast"]

    def __post_init__(self) -> None:
        if isinstance(self.pizza_count, bool) or int(self.pizza_count) != self.pizza_count:
            raise InvalidDoughInputs(f"Pizza count must be a whole number, got {self.pizza_count!r}.")
        if self.pizza_count < 0:
            raise InvalidDoughInputs(f"Pizza count cannot be negative, got {self.pizza_count}.")
        if not math.isfinite(self.diameter_cm) or self.diameter_cm <= 0:
            raise InvalidDoughInputs(f"Diameter must be positive, got {self.diameter_cm}.")
        for name, value in self.percentages().items():
            if not math.isfinite(value) or value < 0:
                raise InvalidDoughInputs(f"{name} percentage must be zero or positive, got {value}.")
        object.__setattr__(self, "pizza_count", int(self.pizza_count))

    @classmethod
    def clamped(
        cls,
        count: float,
        size: float,
        hydration: float,
        ratios: Optional[dict[str, float]] = None,
    ) -> DoughInputs:
        """
        Build inputs from raw UI values, clamping each one into its range.

        Args:
            count: Number of pizzas.
            size: Pizza diameter in centimeters.
            hydration: Water as a percentage of flour.
            ratios: Minor ingredient percentages keyed by "salt", "oil",
                "sugar" and "yeast". Missing keys use the defaults.

        Returns:
            Validated DoughInputs.
        """
        raw = {"count": count, "size": size, "hydration": hydration}
        raw.update({**DEFAULT_RATIOS, **(ratios or {})})

        values: dict[str, float] = {}
        for key, value in raw.items():
            rng = INPUT_RANGES[key]
            clamped = min(max(float(value), rng.minimum), rng.maximum)
            if clamped != value:
                logger.debug("Clamped input '%s' from %s to %s.", key, value, clamped)
            values[key] = clamped

        return cls(
            pizza_count=int(round(values["count"])),
            diameter_cm=values["size"],
            hydration_pct=values["hydration"],
            salt_pct=values["salt"],
            oil_pct=values["oil"],
            sugar_pct=values["sugar"],
            yeast_pct=values["yeast"],
        )

    def percentages(self) -> dict[str, float]:
        """Baker's percentages keyed by ingredient, flour first."""
        return {
            "flour": FLOUR_PERCENTAGE,
            "water": self.hydration_pct,
            "salt": self.salt_pct,
            "oil": self.oil_pct,
            "sugar": self.sugar_pct,
            "yeast": self.yeast_pct,
        }

    @property
    def total_percentage(self) -> float:
        return sum(self.percentages().values())

    @property
    def uses_default_ratios(self) -> bool:
        return all(
            getattr(self, f"{key}_pct") == value for key, value in DEFAULT_RATIOS.items()
        )


@dataclass(frozen=True)
class IngredientLine:
    name: str
    percentage: float
    weight_grams: float


@dataclass(frozen=True)
class DoughResult:
    """Everything derived from one set of inputs."""
    inputs: DoughInputs
    diameter_in: float
    area_sq_in: float
    individual_ball_weight_grams: int
    total_weight_grams: int
    total_percentage: float
    flour_weight_grams: float
    ingredients: tuple[IngredientLine, ...] = field(default_factory=tuple)
    advisory: Optional[str] = None

    def ingredient(self, name: str) -> IngredientLine:
        """Look up a line by its display name."""
        for line in self.ingredients:
            if line.name == name:
                return line
        raise KeyError(f"No ingredient named '{name}'.")


def advisory_for(hydration_pct: float) -> Optional[str]:
    if hydration_pct > HIGH_HYDRATION_THRESHOLD:
        return ADVISORY_HIGH_HYDRATION
    return None


def calculate(inputs: DoughInputs) -> DoughResult:
    """
    Compute the ingredient weights for a batch of dough balls.

    Args:
        inputs: The current calculator inputs.

    Returns:
        The DoughResult with six ingredient lines (flour, water, salt, oil,
        sugar, yeast).
    """
    diameter_in = inputs.diameter_cm / CM_PER_INCH
    radius = diameter_in / 2
    area = math.pi * radius * radius

    individual_weight = round(area * THICKNESS_FACTOR)
    total_weight = individual_weight * inputs.pizza_count

    # Baker's percentage: every weight is pct * flour / 100
    total_percentage = inputs.total_percentage
    flour_weight = total_weight / total_percentage * FLOUR_PERCENTAGE

    ingredients = tuple(
        IngredientLine(
            name=INGREDIENT_NAMES[key],
            percentage=pct,
            weight_grams=flour_weight if key == "flour" else flour_weight * (pct / 100),
        )
        for key, pct in inputs.percentages().items()
    )

    return DoughResult(
        inputs=inputs,
        diameter_in=diameter_in,
        area_sq_in=area,
        individual_ball_weight_grams=individual_weight,
        total_weight_grams=total_weight,
        total_percentage=total_percentage,
        flour_weight_grams=flour_weight,
        ingredients=ingredients,
        advisory=advisory_for(inputs.hydration_pct),
    )


# -------------------------------------------------------------------------------
# Presentation
# -------------------------------------------------------------------------------

def format_number(value: float) -> str:
    """Shortest form of a number: 30.0 -> '30', 2.5 -> '2.5'."""
    return f"{value:g}"


def format_inches(diameter_in: float) -> str:
    return f'~{diameter_in:.1f}"'


def format_grams(weight: float, decimals: int = 1) -> str:
    return f"{weight:.{decimals}f}g"


@dataclass(frozen=True)
class DoughPresentation:
    """Display strings for one DoughResult."""
    count: str
    size: str
    inches: str
    hydration_badge: str
    total: str
    per_pizza: str
    print_details: str
    rows: tuple[tuple[str, str, str], ...]
    knead_note: str


def present(result: DoughResult) -> DoughPresentation:
    """Format a result for the display widgets."""
    inputs = result.inputs
    size = f"{format_number(inputs.diameter_cm)}cm"
    inches = format_inches(result.diameter_in)
    hydration = f"{format_number(inputs.hydration_pct)}%"

    return DoughPresentation(
        count=str(inputs.pizza_count),
        size=size,
        inches=inches,
        hydration_badge=hydration,
        total=f"{result.total_weight_grams}g",
        per_pizza=f"({result.individual_ball_weight_grams}g per ball)",
        print_details=f"{inputs.pizza_count} Pizzas @ {size} ({inches}) at {hydration} Hydration",
        rows=tuple(
            (line.name, f"{format_number(line.percentage)}%", format_grams(line.weight_grams))
            for line in result.ingredients
        ),
        knead_note=result.advisory or "",
    )


def format_recipe(result: DoughResult) -> str:
    """
    Render a result as a plain-text recipe card.

    Used for the clipboard and the printer.
    """
    view = present(result)
    name_width = max(len(name) for name, _, _ in view.rows)

    lines = [
        view.print_details,
        f"Total dough: {view.total} {view.per_pizza}",
    ]
    if not result.inputs.uses_default_ratios:
        lines.append("Custom ingredient ratios")
    lines.append("")
    for name, pct, weight in view.rows:
        lines.append(f"{name:<{name_width}}  {pct:>6}  {weight:>9}")
    if view.knead_note:
        lines += ["", view.knead_note]
    return "\n".join(lines)
