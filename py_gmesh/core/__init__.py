"""
Core greedy meshing functionality.
"""

from .grid import OccupancyGrid
from .populator import PatternType, register_pattern, list_patterns
from .mesher import Quad, MeshResult, greedy_mesh
from .adjacency import build_adjacency, quads_adjacent
from .coloring import ColorAssignment, assign_color_ids, generate_palette
from .pipeline import MeshingPipeline, PipelineResult, populate, mesh, color

__all__ = ['OccupancyGrid', 'PatternType', 'register_pattern', 'list_patterns',
           'Quad', 'MeshResult', 'greedy_mesh', 'build_adjacency', 'quads_adjacent',
           'ColorAssignment', 'assign_color_ids', 'generate_palette',
           'MeshingPipeline', 'PipelineResult', 'populate', 'mesh', 'color']
