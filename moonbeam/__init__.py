"""A small 90s style raycasting game engine: pack files, tile map, player, raycaster, music and game loop."""

__version__ = "0.1.0"