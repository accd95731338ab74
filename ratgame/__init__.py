"""Room-based platformer game logic: a mouse, its cheese and the cats, driven frame by frame."""

__version__ = "0.1.0"