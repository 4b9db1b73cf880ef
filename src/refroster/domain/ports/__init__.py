"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import AsyncReferenceFetcher, FetchedBody, ReferenceFetcher

__all__ = ["AsyncReferenceFetcher", "FetchedBody", "ReferenceFetcher"]
