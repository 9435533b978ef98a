"""Voronoizer - Render Voronoi diagrams to PPM images.

Voronoizer is a CLI tool that scatters random seed points over a raster,
colors every pixel after its nearest seed, stamps a marker disc on each seed
and writes the result as a binary PPM (P6) image.

Example:
    $ voronoizer --seeds 50 --random-seed 42

This will create output.ppm, a 1000x1000 diagram with 50 regions.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
