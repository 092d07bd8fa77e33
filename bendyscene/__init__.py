"""BMP and OBJ/MTL loaders, pose controls and scene geometry for a posable cartoon character."""

__version__ = "0.1.0"
__all__ = ["bmp", "objmodel", "geometry", "controls", "scene"]