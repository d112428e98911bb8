"""Small 3D engine toolkit: vector math, mesh data, entity world, physics, textures and console output."""

__version__ = "0.1.0"

__all__ = ["console", "debug", "ecs", "files", "objects", "physics", "texture", "vector"]