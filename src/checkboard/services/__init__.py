"""Service layer for business logic."""

from .board_service import BoardService
from .config_service import ConfigService
from .scheduler import ManualClock, ReparseScheduler
from .task_writer import TaskWriter
from .transition_service import TransitionEvent, TransitionService

__all__ = [
    "BoardService",
    "ConfigService",
    "ManualClock",
    "ReparseScheduler",
    "TaskWriter",
    "TransitionEvent",
    "TransitionService",
]
