"""Controller layer for GUI business logic."""

from .timers_controller import TimersController

__all__ = ["TimersController"]
