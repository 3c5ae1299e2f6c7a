"""Vectors, matrices, quaternions, bounding boxes, spectra, rays, hit records and lights."""

__version__ = "0.1.0"