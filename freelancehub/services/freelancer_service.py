"""
Freelancer service — directory search and profile assembly.
"""

from freelancehub.domain.collections import FREELANCERS, REPUTATION_LEDGER
from freelancehub.domain.models import Freelancer, FreelancerProfileView, ReputationLedgerEntry
from freelancehub.services.crud_service import BaseCrudService, CollectionRepository
from freelancehub.services.filters import RATE_BANDS, contains, in_band, unique_tags

MAX_SKILLS = 20
MAX_PROFILE_REVIEWS = 5


class FreelancerService:
    """Filters the freelancer directory and builds profile pages."""

    def __init__(self, crud: BaseCrudService) -> None:
        self._freelancers = CollectionRepository(crud, FREELANCERS, Freelancer)
        self._ledger = CollectionRepository(crud, REPUTATION_LEDGER, ReputationLedgerEntry)

    async def search(
        self,
        query: str | None = None,
        skill: str | None = None,
        rate_band: str | None = None,
    ) -> list[Freelancer]:
        """
        Directory listing narrowed by free text, a skill, and an hourly
        rate band ('under-2000', '2000-4000', '4000-8000', 'over-8000').
        """
        results = await self._freelancers.all()

        if query:
            results = [
                f for f in results
                if contains(query, f.full_name, f.headline, f.skills, f.bio)
            ]
        if skill:
            results = [f for f in results if contains(skill, f.skills)]
        if rate_band:
            results = [f for f in results if in_band(RATE_BANDS, rate_band, f.hourly_rate)]

        return results

    async def unique_skills(self) -> list[str]:
        """Skills offered across the directory, for the filter dropdown."""
        freelancers = await self._freelancers.all()
        return unique_tags((f.skills for f in freelancers), MAX_SKILLS)

    async def profile(self, freelancer_id: str) -> FreelancerProfileView | None:
        freelancer = await self._freelancers.get(freelancer_id)
        if freelancer is None:
            return None

        entries = await self._ledger.all()
        reviews = [e for e in entries if e.freelancer == freelancer_id]
        return FreelancerProfileView(
            freelancer=freelancer,
            reviews=reviews[:MAX_PROFILE_REVIEWS],
        )
