"""A small 3D game engine: shared game objects, transforms, meshes, a camera and a pygame renderer."""

__version__ = "0.1.0"