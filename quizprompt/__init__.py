"""Interactive terminal prompts (date picker and external editor) with pluggable backends."""

__version__ = "0.1.0"