"""Game logic for a vertical-scrolling space shooter: geometry, flags, input, resources, particles, weapons, ships and explosions."""

__version__ = "0.1.0"