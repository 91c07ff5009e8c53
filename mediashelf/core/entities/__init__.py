"""
Business entities representing library records.

Exports:
- MovieRecord: A movie tracked in the library
- TVShowRecord: A TV show tracked in the library
"""

from mediashelf.core.entities.media import MovieRecord, TVShowRecord

__all__ = [
    "MovieRecord",
    "TVShowRecord",
]
