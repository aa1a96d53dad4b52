# src/bedrock_review/providers/base.py
from abc import ABC, abstractmethod
from bedrock_review.models.review import ModelResponse


class LLMProvider(ABC):
    @abstractmethod
    async def invoke(self, prompt: str) -> ModelResponse:
        """Send prompt to the model and return the raw response envelope."""
        pass
