"""Subject names and subject parsing for a NATS-based variable data hub."""

__version__ = "0.2.2"
__all__ = ["subjects"]