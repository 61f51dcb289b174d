"""Enums shared across the domain layer."""

from enum import Enum


class PaymentModel(str, Enum):
    FIXED = "fixed"
    HOURLY = "hourly"
    MILESTONE = "milestone"


class ProposalStatus(str, Enum):
    SUBMITTED = "submitted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class RatingTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecordStoreBackend(str, Enum):
    MEMORY = "memory"
    SUPABASE = "supabase"
