"""Greedy quad meshing of occupancy grids with adjacency-aware coloring."""

__version__ = "0.1.0"
