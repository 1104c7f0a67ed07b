"""
Sparse Game of Life on the 64-bit integer plane

``sparselife`` advances Conway's Game of Life without a grid: a generation is
just the set of coordinates that are alive, so patterns may sit anywhere on
the full signed 64-bit plane.  Patterns are read in the "Life 1.06" text
format, stepped a fixed number of generations, and the surviving coordinates
are printed one ``X Y`` pair per line.
"""

__version__ = "0.1.0"
__license__ = "MIT"
