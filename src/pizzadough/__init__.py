"""Pizza dough calculator: baker's percentages to gram weights."""

__version__ = "0.1.0"
