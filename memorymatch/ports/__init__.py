# Ports layer - Abstract interfaces (Protocols)

from .scheduler import CancelHandle, Scheduler

__all__ = [
    "CancelHandle",
    "Scheduler",
]
