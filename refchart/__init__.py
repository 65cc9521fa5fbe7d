"""
refchart - Reference Threshold Price Chart

Splits a time-series price chart into gain and loss regions around a fixed
reference price, with exact crossing points and hover interpolation for
cursor tracking. Rendering is done by a thin SVG adapter on top of the
framework-agnostic series algorithms.
"""

__version__ = "0.1.0"
__author__ = "refchart Team"
