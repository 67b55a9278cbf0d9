"""A declarative UI toolkit: composable elements, shared values with cached text, and a pygame window to draw them in."""

__version__ = "0.1.0"