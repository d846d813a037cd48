"""Linker package that links *object* files into final executable."""

from .linker import link_object_files

__all__ = ["link_object_files"]
