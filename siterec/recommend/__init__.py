"""Interest analysis and page recommendation package."""

from siterec.recommend.analyzer import analyze
from siterec.recommend.recommender import recommend

__all__ = ["analyze", "recommend"]
