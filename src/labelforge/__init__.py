"""labelforge - label and card template registry with sheet geometry."""

__version__ = "0.1.0"
