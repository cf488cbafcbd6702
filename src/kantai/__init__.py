"""Kantai Explorer: historical vessel timelines resolved to map positions.

The package is organised around a pure temporal-position engine
(:mod:`kantai.core.engine`) that turns a loaded dataset and a query time into
marker coordinates, track polylines and the dataset's time bounds.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
