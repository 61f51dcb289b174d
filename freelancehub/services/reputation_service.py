"""
Reputation service — the portable reputation ledger.

Splits ledger entries into client reviews and achievements, summarises
them, and produces a self-contained export a freelancer can take to
another platform.
"""

from datetime import datetime, timezone
from typing import Any

from freelancehub.domain.collections import REPUTATION_LEDGER
from freelancehub.domain.models import ReputationExport, ReputationLedgerEntry, ReputationSummary
from freelancehub.services.crud_service import BaseCrudService, CollectionRepository


def _iso(value) -> str | None:
    return value.isoformat() if value is not None else None


class ReputationService:
    def __init__(self, crud: BaseCrudService) -> None:
        self._ledger = CollectionRepository(crud, REPUTATION_LEDGER, ReputationLedgerEntry)

    async def _partition(
        self, freelancer_id: str | None
    ) -> tuple[list[ReputationLedgerEntry], list[ReputationLedgerEntry]]:
        entries = await self._ledger.all()
        if freelancer_id:
            entries = [e for e in entries if e.freelancer == freelancer_id]
        reviews = [e for e in entries if e.review_content]
        achievements = [e for e in entries if e.achievement_title]
        return reviews, achievements

    @staticmethod
    def _summarise(
        reviews: list[ReputationLedgerEntry], achievements: list[ReputationLedgerEntry]
    ) -> ReputationSummary:
        average = (
            sum(r.rating_score or 0 for r in reviews) / len(reviews) if reviews else 0.0
        )
        return ReputationSummary(
            total_reviews=len(reviews),
            average_rating=average,
            total_achievements=len(achievements),
            verified_achievements=sum(1 for a in achievements if a.is_verified_achievement),
        )

    async def summary(self, freelancer_id: str | None = None) -> ReputationSummary:
        reviews, achievements = await self._partition(freelancer_id)
        return self._summarise(reviews, achievements)

    async def export(
        self, freelancer_id: str | None = None, now: datetime | None = None
    ) -> ReputationExport:
        """Ledger as a JSON-ready document plus a dated download filename."""
        now = now or datetime.now(timezone.utc)
        reviews, achievements = await self._partition(freelancer_id)
        summary = self._summarise(reviews, achievements)

        document: dict[str, Any] = {
            "summary": {
                "totalReviews": summary.total_reviews,
                "averageRating": f"{summary.average_rating:.2f}",
                "totalAchievements": summary.total_achievements,
                "verifiedAchievements": summary.verified_achievements,
                "exportDate": now.isoformat(),
            },
            "reviews": [
                {
                    "client": r.client_name,
                    "project": r.job_title,
                    "rating": r.rating_score,
                    "review": r.review_content,
                    "date": _iso(r.review_date),
                }
                for r in reviews
            ],
            "achievements": [
                {
                    "title": a.achievement_title,
                    "description": a.achievement_description,
                    "verified": a.is_verified_achievement,
                    "date": _iso(a.achievement_date),
                }
                for a in achievements
            ],
        }
        return ReputationExport(
            filename=f"reputation-ledger-{now.date().isoformat()}.json",
            document=document,
        )

    async def share_text(self, freelancer_id: str | None = None) -> str:
        summary = await self.summary(freelancer_id)
        return (
            "Check out my verified professional achievements and client reviews. "
            f"Average rating: {summary.average_rating:.1f}/5 with {summary.total_reviews} reviews."
        )
