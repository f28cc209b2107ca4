"""pipeforge - typed datasets and structural deltas between their versions."""

__version__ = "0.1.0"
