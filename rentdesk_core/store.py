"""
Store: reference data for a rental location.

Immutable. Orders point at stores; they do not own them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Store:
    """A rental location and the IANA time zone its times are shown in."""

    id: str
    name: str
    time_zone: str
