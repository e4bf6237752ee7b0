"""Codemod that swaps the Iconify ``Icon`` component for a local ``LocalIcon``."""

__version__ = "0.1.0"
