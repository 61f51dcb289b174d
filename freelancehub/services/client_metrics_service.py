"""
Client metrics service — searchable client reliability and fairness ratings.
"""

from freelancehub.domain.collections import CLIENT_METRICS
from freelancehub.domain.enums import RatingTier
from freelancehub.domain.models import ClientMetrics, ClientMetricsView
from freelancehub.services.crud_service import BaseCrudService, CollectionRepository
from freelancehub.services.filters import contains, parse_range


def rating_tier(rating: float | None) -> RatingTier:
    rating = rating or 0
    if rating >= 4.5:
        return RatingTier.HIGH
    if rating >= 3.5:
        return RatingTier.MEDIUM
    return RatingTier.LOW


class ClientMetricsService:
    def __init__(self, crud: BaseCrudService) -> None:
        self._clients = CollectionRepository(crud, CLIENT_METRICS, ClientMetrics)

    async def search(
        self,
        query: str | None = None,
        reliability: str | None = None,
        fairness: str | None = None,
    ) -> list[ClientMetricsView]:
        """
        Filter clients by name/email and by inclusive 'min-max' rating ranges.
        Raises ValueError for a malformed range.
        """
        reliability_range = parse_range(reliability) if reliability else None
        fairness_range = parse_range(fairness) if fairness else None

        results = await self._clients.all()
        if query:
            results = [c for c in results if contains(query, c.client_name, c.client_email)]
        if reliability_range:
            low, high = reliability_range
            results = [c for c in results if low <= (c.reliability_rating or 0) <= high]
        if fairness_range:
            low, high = fairness_range
            results = [c for c in results if low <= (c.fairness_rating or 0) <= high]

        return [
            ClientMetricsView(client=c, reliability_tier=rating_tier(c.reliability_rating))
            for c in results
        ]
