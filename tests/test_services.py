"""
Tests for the marketplace services built on BaseCrudService.
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from conftest import run
from freelancehub.domain.enums import RatingTier
from freelancehub.domain.models import JobPostingDraft, ProposalDraft
from freelancehub.services.client_metrics_service import ClientMetricsService, rating_tier
from freelancehub.services.crud_service import BaseCrudService
from freelancehub.services.filters import parse_range, unique_tags
from freelancehub.services.freelancer_service import FreelancerService
from freelancehub.services.job_service import JobService, format_time_ago
from freelancehub.services.reputation_service import ReputationService


@pytest.fixture
def seeded_crud(seeded_store) -> BaseCrudService:
    return BaseCrudService(seeded_store)


class TestFilters:
    def test_unique_tags_order_and_limit(self):
        tags = unique_tags(["Python, SQL", " sql, Python ,", None, "Go"], limit=3)
        assert tags == ["Python", "SQL", "sql"]

    def test_parse_range(self):
        assert parse_range("3.5-5") == (3.5, 5.0)
        with pytest.raises(ValueError):
            parse_range("high")


class TestFreelancerService:
    def test_search_text(self, seeded_crud):
        svc = FreelancerService(seeded_crud)
        results = run(svc.search(query="python"))
        assert [f.id for f in results] == ["f1", "f2"]

    def test_search_bio(self, seeded_crud):
        svc = FreelancerService(seeded_crud)
        assert [f.id for f in run(svc.search(query="PIPELINES"))] == ["f1"]

    @pytest.mark.parametrize(
        "band, expected",
        [
            ("under-2000", ["f3"]),
            ("4000-8000", ["f1"]),
            ("over-8000", ["f2"]),
            ("2000-4000", []),
            ("bogus", ["f1", "f2", "f3"]),
        ],
    )
    def test_rate_bands(self, seeded_crud, band, expected):
        svc = FreelancerService(seeded_crud)
        assert [f.id for f in run(svc.search(rate_band=band))] == expected

    def test_combined_filters(self, seeded_crud):
        svc = FreelancerService(seeded_crud)
        results = run(svc.search(skill="python", rate_band="over-8000"))
        assert [f.id for f in results] == ["f2"]

    def test_unique_skills(self, seeded_crud):
        svc = FreelancerService(seeded_crud)
        assert run(svc.unique_skills()) == ["Python", "SQL", "Airflow", "COBOL", "C", "Git"]

    def test_profile_with_reviews(self, seeded_crud):
        svc = FreelancerService(seeded_crud)
        profile = run(svc.profile("f1"))

        assert profile.freelancer.full_name == "Ada Lovelace"
        assert [r.id for r in profile.reviews] == ["r1", "r2", "r3"]

    def test_profile_unknown(self, seeded_crud):
        assert run(FreelancerService(seeded_crud).profile("nope")) is None


class TestJobService:
    def test_search_and_payment_model(self, seeded_crud):
        svc = JobService(seeded_crud)

        assert [j.id for j in run(svc.search(query="data"))] == ["j2"]
        assert [j.id for j in run(svc.search(payment_model="fixed"))] == ["j1", "j3"]
        assert [j.id for j in run(svc.search(category="kotlin"))] == ["j3"]

    @pytest.mark.parametrize(
        "band, expected",
        [("under-1000", ["j1"]), ("5000-10000", ["j2"]), ("over-10000", ["j3"]), ("1000-5000", [])],
    )
    def test_budget_bands(self, seeded_crud, band, expected):
        svc = JobService(seeded_crud)
        assert [j.id for j in run(svc.search(budget_band=band))] == expected

    def test_post_job(self, seeded_crud):
        svc = JobService(seeded_crud)
        draft = JobPostingDraft(
            job_title="Logo Design",
            job_description="Brand mark",
            budget_amount=500,
            skill_tags=["Illustrator", " Branding ", "Illustrator"],
        )

        job = run(svc.post_job(draft))

        assert job.id
        assert job.required_skills == "Illustrator, Branding"
        assert job.payment_model == "fixed"
        assert job.ai_structured_requirements is None
        assert run(svc.get_details(job.id)).job_title == "Logo Design"

    def test_post_job_ai_assisted(self, seeded_crud):
        svc = JobService(seeded_crud)
        draft = JobPostingDraft(
            job_title="Logo Design",
            job_description="Brand mark",
            budget_amount=500,
            project_deadline=date(2026, 12, 1),
            ai_assisted=True,
        )

        job = run(svc.post_job(draft))

        assert job.job_description.startswith("Brand mark\n\nBased on your project description")
        assert "Final delivery by 2026-12-01" in job.job_description
        assert "Proficiency in: relevant technologies" in job.job_description
        assert job.ai_structured_requirements == "AI-enhanced project requirements generated"

    def test_post_job_requires_budget(self):
        with pytest.raises(ValidationError):
            JobPostingDraft(job_title="Logo", job_description="x")

    def test_submit_proposal(self, seeded_crud):
        svc = JobService(seeded_crud)
        draft = ProposalDraft(proposal_title="Me", proposal_details="I can", proposed_amount=450)

        proposal = run(svc.submit_proposal("j1", draft))

        assert proposal.proposal_status == "submitted"
        assert proposal.job_posting == "j1"
        assert proposal.submission_date is not None
        assert [p.id for p in run(svc.proposals_for("j1"))] == [proposal.id]

    def test_submit_proposal_unknown_job(self, seeded_crud):
        svc = JobService(seeded_crud)
        draft = ProposalDraft(proposal_title="Me", proposal_details="I can", proposed_amount=1)
        with pytest.raises(LookupError):
            run(svc.submit_proposal("nope", draft))

    def test_format_time_ago(self):
        now = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
        assert format_time_ago(None, now) == "Recently posted"
        assert format_time_ago(now - timedelta(minutes=30), now) == "Just posted"
        assert format_time_ago(now - timedelta(hours=5), now) == "5h ago"
        assert format_time_ago(now - timedelta(days=3), now) == "3d ago"
        assert format_time_ago(now - timedelta(days=15), now) == "2w ago"


class TestClientMetricsService:
    def test_search_by_email(self, seeded_crud):
        svc = ClientMetricsService(seeded_crud)
        results = run(svc.search(query="GLOBEX.test"))
        assert [r.client.id for r in results] == ["c2"]

    def test_rating_ranges(self, seeded_crud):
        svc = ClientMetricsService(seeded_crud)

        reliable = run(svc.search(reliability="4.5-5"))
        unrated = run(svc.search(fairness="0-1"))

        assert [r.client.id for r in reliable] == ["c1"]
        assert reliable[0].reliability_tier == RatingTier.HIGH
        assert [r.client.id for r in unrated] == ["c3"]

    def test_malformed_range(self, seeded_crud):
        with pytest.raises(ValueError):
            run(ClientMetricsService(seeded_crud).search(reliability="4"))

    @pytest.mark.parametrize(
        "rating, tier",
        [(4.5, RatingTier.HIGH), (3.5, RatingTier.MEDIUM), (3.49, RatingTier.LOW), (None, RatingTier.LOW)],
    )
    def test_rating_tier(self, rating, tier):
        assert rating_tier(rating) == tier


class TestReputationService:
    def test_summary(self, seeded_crud):
        summary = run(ReputationService(seeded_crud).summary())

        assert summary.total_reviews == 2
        assert summary.average_rating == 4.5
        assert summary.total_achievements == 2
        assert summary.verified_achievements == 1

    def test_summary_for_freelancer(self, seeded_crud):
        summary = run(ReputationService(seeded_crud).summary("f2"))
        assert (summary.total_reviews, summary.total_achievements) == (0, 1)
        assert summary.average_rating == 0

    def test_export(self, seeded_crud):
        now = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)

        export = run(ReputationService(seeded_crud).export("f1", now=now))

        assert export.filename == "reputation-ledger-2026-10-18.json"
        assert export.document["summary"]["averageRating"] == "4.50"
        assert export.document["summary"]["exportDate"] == now.isoformat()
        assert export.document["reviews"][0] == {
            "client": "Acme Corp",
            "project": "ETL pipeline",
            "rating": 5,
            "review": "Great work",
            "date": "2026-03-01",
        }
        assert export.document["achievements"] == [
            {"title": "Top Rated", "description": "100 jobs", "verified": True, "date": "2026-01-15"}
        ]

    def test_share_text(self, seeded_crud):
        text = run(ReputationService(seeded_crud).share_text())
        assert text.endswith("Average rating: 4.5/5 with 2 reviews.")
