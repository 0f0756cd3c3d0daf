"""Game states, text-slot tracking, local configuration and HTTP entry handling for an interactive display wall."""

__version__ = "0.1.0"
__all__ = ["api", "data", "fsm", "interaction"]