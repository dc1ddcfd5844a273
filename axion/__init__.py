"""A small 2D physics scene editor: shapes, an entity world, camera and pygame interface."""

__version__ = "0.1.0"