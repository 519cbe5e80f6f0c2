"""
Configuration & Constants
=========================
This module serves as the central registry for the calculator constants,
input ranges, display texts and resource paths.

Why is this file needed?
------------------------
1. Single source: the dough math, the sliders and the tests read the same
   numbers, so a changed default never drifts between them.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (icons) when the app is frozen into an executable.

Exports:
    THICKNESS_FACTOR (float): Grams of dough per square inch of pizza.
    DEFAULT_RATIOS (dict): Baker's percentages of the minor ingredients.
    INPUT_RANGES (dict): (min, max, default) of every named input.
    ASSETS_PATH (str): Absolute path to the assets directory.
    ICON_PATH (str): Absolute path to the application icon.
"""
import sys
import os
import logging
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/pizzadough/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


class InputRange(NamedTuple):
    minimum: float
    maximum: float
    default: float
    step: float = 1.0


# Dough math
CM_PER_INCH: float = 2.54
# 0.085 oz/in² dough thickness expressed in grams
THICKNESS_FACTOR: float = 2.41
FLOUR_PERCENTAGE: float = 100.0
HIGH_HYDRATION_THRESHOLD: float = 70.0

DEFAULT_RATIOS: dict[str, float] = {
    "salt": 2.0,
    "oil": 2.0,
    "sugar": 0.5,
    "yeast": 0.3,
}

INGREDIENT_NAMES: dict[str, str] = {
    "flour": "Bread Flour",
    "water": "Water",
    "salt": "Salt",
    "oil": "Olive Oil",
    "sugar": "Sugar",
    "yeast": "Instant Yeast",
}

# Named inputs as the UI exposes them
INPUT_RANGES: dict[str, InputRange] = {
    "count": InputRange(1, 20, 4),
    "size": InputRange(20, 45, 30),
    "hydration": InputRange(50, 90, 65),
    "salt": InputRange(0.0, 10.0, DEFAULT_RATIOS["salt"], 0.1),
    "oil": InputRange(0.0, 10.0, DEFAULT_RATIOS["oil"], 0.1),
    "sugar": InputRange(0.0, 10.0, DEFAULT_RATIOS["sugar"], 0.1),
    "yeast": InputRange(0.0, 10.0, DEFAULT_RATIOS["yeast"], 0.1),
}

ADVISORY_HIGH_HYDRATION: str = "(Note: Sticky dough. Use stretch & folds)."

# Wake lock display
WAKE_TEXT_AWAKE: str = "Screen Awake"
WAKE_TEXT_ASLEEP: str = "Stay Awake"
WAKE_ICON_AWAKE: str = "☀️"
WAKE_ICON_ASLEEP: str = "\U0001f319"
WAKE_LOCK_REASON: str = "Baking in progress"

# Application identity
APP_ID: str = "pizza-dough"
VISIBLE_APP_NAME: str = "Pizza Dough Calculator"

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
ICON_PATH: str = os.path.join(ASSETS_PATH, "icon.svg")

if not os.path.exists(ASSETS_PATH):
    logger.warning("Assets path not found at %s", ASSETS_PATH)
