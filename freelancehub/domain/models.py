"""
Pydantic models for collection records, requests, responses, and
internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from freelancehub.domain.enums import PaymentModel, ProposalStatus, RatingTier


# ── Query results ─────────────────────────────────────────────


class RecordPage(BaseModel):
    """One page of raw records plus pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[dict[str, Any]] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")
    has_next: bool = Field(False, alias="hasNext")
    has_prev: bool = Field(False, alias="hasPrev")


# ── Collection records ────────────────────────────────────────


class RecordModel(BaseModel):
    """
    Base shape of every stored record.

    Attributes are snake_case; the stored field names are camelCase,
    plus the system fields `_id`, `_createdDate` and `_updatedDate`.
    Unknown fields are kept so records round-trip untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str = Field(..., alias="_id")
    created_date: datetime | None = Field(None, alias="_createdDate")
    updated_date: datetime | None = Field(None, alias="_updatedDate")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


ModelT = TypeVar("ModelT", bound=RecordModel)


class Page(BaseModel, Generic[ModelT]):
    """A validated page of typed records."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[ModelT] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")
    has_next: bool = Field(False, alias="hasNext")
    has_prev: bool = Field(False, alias="hasPrev")


class Freelancer(RecordModel):
    """Collection: freelancers"""

    full_name: str | None = None
    profile_picture: str | None = None
    headline: str | None = None
    skills: str | None = None
    portfolio_url: str | None = None
    credibility_score: float | None = None
    credential_badges: str | None = None
    hourly_rate: float | None = None
    bio: str | None = None


class JobPosting(RecordModel):
    """Collection: jobpostings"""

    job_title: str | None = None
    job_description: str | None = None
    budget_amount: float | None = None
    payment_model: str | None = None
    required_skills: str | None = None
    project_deadline: date | datetime | None = None
    is_remote: bool | None = None
    ai_structured_requirements: str | None = None


class Proposal(RecordModel):
    """Collection: proposals"""

    proposal_title: str | None = None
    proposal_details: str | None = None
    pricing_model: str | None = None
    proposed_amount: float | None = None
    submission_date: datetime | None = None
    proposal_status: str | None = None
    job_posting: str | dict[str, Any] | None = None


class ClientMetrics(RecordModel):
    """Collection: clientmetrics"""

    client_name: str | None = None
    client_email: str | None = None
    client_profile_picture: str | None = None
    reliability_rating: float | None = None
    fairness_rating: float | None = None
    payment_punctuality_rating: float | None = None
    dispute_count: int | None = None
    registration_date: datetime | None = None


class ReputationLedgerEntry(RecordModel):
    """Collection: reputationledger"""

    review_content: str | None = None
    rating_score: float | None = None
    achievement_title: str | None = None
    achievement_description: str | None = None
    is_verified_achievement: bool | None = None
    achievement_date: date | datetime | None = None
    job_title: str | None = None
    client_name: str | None = None
    review_date: date | datetime | None = None
    export_link: str | None = None
    freelancer: str | dict[str, Any] | None = None


class ProjectMilestone(RecordModel):
    """Collection: projectmilestones"""

    milestone_name: str | None = None
    description: str | None = None
    due_date: date | datetime | None = None
    amount: float | None = None
    status: str | None = None
    payment_status: str | None = None
    completion_date: datetime | None = None
    job_posting: str | dict[str, Any] | None = None


# ── Requests ──────────────────────────────────────────────────


class JobPostingDraft(BaseModel):
    """Request body for POST /jobs."""

    job_title: str = Field(..., min_length=1, max_length=200)
    job_description: str = Field(..., min_length=1)
    budget_amount: float = Field(..., gt=0)
    payment_model: PaymentModel = PaymentModel.FIXED
    skill_tags: list[str] = Field(default_factory=list)
    project_deadline: date | None = None
    is_remote: bool = True
    ai_assisted: bool = False


class ProposalDraft(BaseModel):
    """Request body for POST /jobs/{id}/proposals."""

    proposal_title: str = Field(..., min_length=1)
    proposal_details: str = Field(..., min_length=1)
    pricing_model: PaymentModel = PaymentModel.FIXED
    proposed_amount: float = Field(..., gt=0)


# ── Responses ─────────────────────────────────────────────────


class FreelancerProfileView(BaseModel):
    """Response for GET /freelancers/{id}."""

    freelancer: Freelancer
    reviews: list[ReputationLedgerEntry] = Field(default_factory=list)


class JobBoardCard(BaseModel):
    """One card on the job board: the posting plus its age label."""

    job: JobPosting
    posted: str


class JobPostingView(BaseModel):
    """Response for GET /jobs/{id}."""

    job: JobPosting
    posted: str
    proposals: list[Proposal] = Field(default_factory=list)


class ClientMetricsView(BaseModel):
    """Client metrics row annotated with its reliability tier."""

    client: ClientMetrics
    reliability_tier: RatingTier


class ReputationSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_reviews: int
    average_rating: float
    total_achievements: int
    verified_achievements: int


class ReputationExport(BaseModel):
    """Portable, self-contained copy of a reputation ledger."""

    filename: str
    document: dict[str, Any]


class ProposalCreateResponse(BaseModel):
    id: str
    status: ProposalStatus = ProposalStatus.SUBMITTED
    message: str = "Proposal submitted successfully!"


# ── Members ───────────────────────────────────────────────────


class Member(BaseModel):
    """The signed-in member, as carried by their access token."""

    id: str
    login_email: str | None = None
    nickname: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class MemberSession(BaseModel):
    """An authenticated member plus the token that identifies the session."""

    member: Member
    token: str
    expires_at: datetime | None = None
