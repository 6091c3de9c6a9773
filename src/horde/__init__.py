"""horde: wave-based enemy spawning core."""

__version__ = "0.1.0"
