"""User-interface contract and the scripted implementation."""

from .base import UI, format_selection
from .scripted import ScriptedUI

__all__ = ["UI", "ScriptedUI", "format_selection"]
