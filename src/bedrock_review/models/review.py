from enum import Enum
from pydantic import BaseModel, ConfigDict, SecretStr

from bedrock_review.config import Settings


NO_FEEDBACK = "No feedback."

DEFAULT_REGION = "us-east-1"
DEFAULT_MODEL_ID = "anthropic.claude-3-sonnet-20240229-v1:0"


class ReviewRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_branch: str
    file_path: str


class AwsCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_key_id: str = ""
    secret_access_key: SecretStr = SecretStr("")


class ModelInvocationConfig(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    region: str = DEFAULT_REGION
    credentials: AwsCredentials = AwsCredentials()
    model_id: str = DEFAULT_MODEL_ID

    @classmethod
    def from_settings(cls, settings: Settings) -> "ModelInvocationConfig":
        """Resolve region, credentials and model id, each falling back independently."""
        return cls(
            region=settings.aws_region or DEFAULT_REGION,
            credentials=AwsCredentials(
                access_key_id=settings.aws_access_key_id or "",
                secret_access_key=SecretStr(settings.aws_secret_access_key or ""),
            ),
            model_id=settings.bedrock_model_id or DEFAULT_MODEL_ID,
        )


class ModelResponse(BaseModel):
    body: bytes
    content_type: str = "application/json"


class Verdict(BaseModel):
    text: str

    @property
    def is_clean(self) -> bool:
        return self.text == NO_FEEDBACK


class ReviewState(str, Enum):
    START = "start"
    DIFFED = "diffed"
    PROMPTED = "prompted"
    INVOKED = "invoked"
    PARSED = "parsed"
    PUBLISHED = "published"
    SKIPPED = "skipped"
    FAILED = "failed"


class FileReviewResult(BaseModel):
    file_path: str
    state: ReviewState
    feedback: str | None = None
