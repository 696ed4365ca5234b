"""Memory Match - matching card game state machine and HTTP service."""

__version__ = "0.1.0"
