"""Read and check .cub raycasting maps, decode XPM textures and draw wall columns."""

__version__ = "0.1.0"