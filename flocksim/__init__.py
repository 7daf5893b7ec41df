"""Boids flocking simulation with interchangeable neighbour-search structures."""

__version__ = "0.1.0"