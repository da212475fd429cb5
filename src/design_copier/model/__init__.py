from design_copier.model.declaration import Declaration, Rule
from design_copier.model.result import (
    TAILWIND_PROCESSING_ERROR,
    Candidate,
    ProcessingError,
    ResultBundle,
    RuleCandidates,
)

__all__ = [
    "Declaration",
    "Rule",
    "Candidate",
    "RuleCandidates",
    "ProcessingError",
    "ResultBundle",
    "TAILWIND_PROCESSING_ERROR",
]
