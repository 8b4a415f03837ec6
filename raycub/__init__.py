"""Building blocks for a grid-map raycasting viewer: XPM reading, images, game state, minimap and events."""

__version__ = "0.1.0"