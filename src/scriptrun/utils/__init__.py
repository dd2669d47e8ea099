"""Utility helpers for scriptrun."""

from .commands import is_command_available

__all__ = ["is_command_available"]
