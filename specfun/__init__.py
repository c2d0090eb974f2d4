"""Special mathematical functions, windowed statistics and trimmed-mean smoothing."""

__version__ = "0.1.0"