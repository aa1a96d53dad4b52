from .config import RepoConfig
from .review import (
    NO_FEEDBACK,
    FileReviewResult,
    ModelInvocationConfig,
    ModelResponse,
    ReviewRequest,
    ReviewState,
    Verdict,
)

__all__ = [
    "NO_FEEDBACK",
    "RepoConfig",
    "FileReviewResult",
    "ModelInvocationConfig",
    "ModelResponse",
    "ReviewRequest",
    "ReviewState",
    "Verdict",
]
