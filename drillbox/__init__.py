"""Classic data-structure and algorithm drills with interactive menu programs."""

__version__ = "0.1.0"