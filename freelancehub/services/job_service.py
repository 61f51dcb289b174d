"""
Job service — job board search, posting, and proposals.
Single Responsibility: only handles job and proposal data operations.
"""

import logging
import uuid
from datetime import datetime, timezone

from freelancehub.domain.collections import JOB_POSTINGS, PROPOSALS
from freelancehub.domain.enums import ProposalStatus
from freelancehub.domain.models import JobPosting, JobPostingDraft, Proposal, ProposalDraft
from freelancehub.services.crud_service import BaseCrudService, CollectionRepository
from freelancehub.services.filters import BUDGET_BANDS, contains, in_band, unique_tags

logger = logging.getLogger(__name__)

MAX_CATEGORIES = 15

_REQUIREMENTS_TEMPLATE = """Based on your project description, here are the structured requirements:

SCOPE OF WORK:
• {title} with focus on quality and timely delivery
• Implementation following industry best practices
• Regular progress updates and milestone reviews

DELIVERABLES:
• Complete project as per specifications
• Documentation and source code
• Testing and quality assurance
• Post-delivery support for 30 days

TIMELINE:
• Project kickoff within 3 days of award
• Weekly milestone reviews
• Final delivery by {deadline}

COMMUNICATION:
• Daily progress updates via platform messaging
• Weekly video calls for milestone reviews
• Immediate notification of any blockers or issues

TECHNICAL REQUIREMENTS:
• Proficiency in: {skills}
• Experience with similar projects
• Portfolio demonstrating relevant work"""


def structured_requirements(title: str, deadline: str, skills: str) -> str:
    """Boilerplate requirements block appended to AI-assisted postings."""
    return _REQUIREMENTS_TEMPLATE.format(
        title=title or "Project development",
        deadline=deadline or "agreed deadline",
        skills=skills or "relevant technologies",
    )


def format_time_ago(posted: datetime | None, now: datetime | None = None) -> str:
    """'Just posted', '5h ago', '3d ago', '2w ago'."""
    if posted is None:
        return "Recently posted"
    now = now or datetime.now(timezone.utc)
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)

    hours = int((now - posted).total_seconds() // 3600)
    if hours < 1:
        return "Just posted"
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return f"{days // 7}w ago"


class JobService:
    """Handles job posting and proposal operations."""

    def __init__(self, crud: BaseCrudService) -> None:
        self._jobs = CollectionRepository(crud, JOB_POSTINGS, JobPosting)
        self._proposals = CollectionRepository(crud, PROPOSALS, Proposal)

    async def search(
        self,
        query: str | None = None,
        category: str | None = None,
        budget_band: str | None = None,
        payment_model: str | None = None,
    ) -> list[JobPosting]:
        """Job board listing narrowed by text, skill category, budget and payment model."""
        results = await self._jobs.all()

        if query:
            results = [
                j for j in results
                if contains(query, j.job_title, j.job_description, j.required_skills)
            ]
        if category:
            results = [j for j in results if contains(category, j.required_skills)]
        if budget_band:
            results = [j for j in results if in_band(BUDGET_BANDS, budget_band, j.budget_amount)]
        if payment_model:
            wanted = payment_model.lower()
            results = [j for j in results if (j.payment_model or "").lower() == wanted]

        return results

    async def unique_categories(self) -> list[str]:
        jobs = await self._jobs.all()
        return unique_tags((j.required_skills for j in jobs), MAX_CATEGORIES)

    async def get_details(self, job_id: str) -> JobPosting | None:
        return await self._jobs.get(job_id)

    async def post_job(self, draft: JobPostingDraft) -> JobPosting:
        """Store a new posting; the caller gets back the stored record."""
        skills = ", ".join(dict.fromkeys(t.strip() for t in draft.skill_tags if t.strip()))
        description = draft.job_description
        ai_requirements = None

        if draft.ai_assisted:
            deadline = draft.project_deadline.isoformat() if draft.project_deadline else ""
            description += "\n\n" + structured_requirements(draft.job_title, deadline, skills)
            ai_requirements = "AI-enhanced project requirements generated"

        job = JobPosting(
            id=str(uuid.uuid4()),
            job_title=draft.job_title,
            job_description=description,
            budget_amount=draft.budget_amount,
            payment_model=draft.payment_model.value,
            required_skills=skills or None,
            project_deadline=draft.project_deadline,
            is_remote=draft.is_remote,
            ai_structured_requirements=ai_requirements,
        )
        stored = await self._jobs.add(job)
        logger.info("Job posted: %s (%s)", stored.id, stored.job_title)
        return stored

    async def submit_proposal(self, job_id: str, draft: ProposalDraft) -> Proposal:
        """Attach a new proposal to an existing job."""
        job = await self._jobs.get(job_id)
        if job is None:
            raise LookupError(f"Job {job_id} not found")

        proposal = Proposal(
            id=str(uuid.uuid4()),
            proposal_title=draft.proposal_title,
            proposal_details=draft.proposal_details,
            pricing_model=draft.pricing_model.value,
            proposed_amount=draft.proposed_amount,
            submission_date=datetime.now(timezone.utc),
            proposal_status=ProposalStatus.SUBMITTED.value,
            job_posting=job_id,
        )
        stored = await self._proposals.add(proposal)
        logger.info("Proposal %s submitted for job %s", stored.id, job_id)
        return stored

    async def proposals_for(self, job_id: str) -> list[Proposal]:
        proposals = await self._proposals.all()
        return [p for p in proposals if p.job_posting == job_id]
