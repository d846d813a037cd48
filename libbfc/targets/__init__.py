"""Compilation target specifications."""

from .target import Target, Triplet

__all__ = ["Target", "Triplet"]
