"""Aggregation of forward, backward, two-hop and tag links around a focal note."""

from twohop.aggregation.engine import TwoHopLinksEngine
from twohop.aggregation.visitation import VisitationContext

__all__ = [
    "TwoHopLinksEngine",
    "VisitationContext",
]
