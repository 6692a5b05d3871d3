"""
VenueRank — resolve publication venue names to SCImago quartiles and CORE ranks.
"""

from venuerank.resolver import CheckSummary, RankingResolver, build_resolver

__version__ = "1.0.0"

__all__ = ["CheckSummary", "RankingResolver", "build_resolver", "__version__"]
