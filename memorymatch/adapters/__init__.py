# Adapters layer - Concrete implementations (event loop, virtual clock)

from .asyncio_scheduler import AsyncioScheduler, RepeatingHandle
from .manual_scheduler import ManualHandle, ManualScheduler

__all__ = [
    "AsyncioScheduler",
    "ManualHandle",
    "ManualScheduler",
    "RepeatingHandle",
]
