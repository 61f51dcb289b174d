"""
Known collection identifiers and the informal references between them.
"""

FREELANCERS = "freelancers"
JOB_POSTINGS = "jobpostings"
PROPOSALS = "proposals"
CLIENT_METRICS = "clientmetrics"
REPUTATION_LEDGER = "reputationledger"
PROJECT_MILESTONES = "projectmilestones"

KNOWN_COLLECTIONS: frozenset[str] = frozenset(
    {
        FREELANCERS,
        JOB_POSTINGS,
        PROPOSALS,
        CLIENT_METRICS,
        REPUTATION_LEDGER,
        PROJECT_MILESTONES,
    }
)

# collection → {referenced field → target collection}
REFERENCES: dict[str, dict[str, str]] = {
    PROPOSALS: {"jobPosting": JOB_POSTINGS},
    REPUTATION_LEDGER: {"freelancer": FREELANCERS},
    PROJECT_MILESTONES: {"jobPosting": JOB_POSTINGS},
}
