"""Instant quote engine for stanchion railings.

Computes stanchion placement, infill quantities, price breakdowns and the
schematic side-view diagram for a railing run built from flat and angled
sections.
"""

__version__ = "1.0.0"
