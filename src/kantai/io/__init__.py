"""Dataset I/O (document loading and reference checks)."""

from __future__ import annotations

from .loader import check_references, load_dataset

__all__ = ["check_references", "load_dataset"]
