"""Averaged solver statistics for textured flop subsets."""

__version__ = "0.1.0"
