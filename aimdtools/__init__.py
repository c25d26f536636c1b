"""Utilities for ab initio molecular dynamics: constants, standard grids, vectors, a thread pool, timers and UTF-8 helpers."""

__version__ = "0.1.0"