"""Terrain noise, rays, integer vectors, items, keyboard input and render handles for a voxel sandbox game."""

__version__ = "1.0.0"