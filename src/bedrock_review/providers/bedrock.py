# src/bedrock_review/providers/bedrock.py
import asyncio
import json
import logging
from typing import Any, Callable

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from bedrock_review.exceptions import InvocationError
from bedrock_review.models.review import ModelInvocationConfig, ModelResponse
from .base import LLMProvider


logger = logging.getLogger(__name__)

MAX_TOKENS_TO_SAMPLE = 500
TEMPERATURE = 0

# One attempt only; a failed call fails the file's review
CLIENT_CONFIG = Config(retries={"max_attempts": 1, "mode": "standard"})


def create_bedrock_client(config: ModelInvocationConfig) -> Any:
    return boto3.client(
        "bedrock-runtime",
        region_name=config.region,
        aws_access_key_id=config.credentials.access_key_id,
        aws_secret_access_key=config.credentials.secret_access_key.get_secret_value(),
        config=CLIENT_CONFIG,
    )


class BedrockProvider(LLMProvider):
    def __init__(
        self,
        config: ModelInvocationConfig,
        client_factory: Callable[[ModelInvocationConfig], Any] = create_bedrock_client,
    ):
        self.config = config
        self.client_factory = client_factory

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "modelId": self.config.model_id,
            "contentType": "application/json",
            "accept": "application/json",
            "body": json.dumps({
                "prompt": prompt,
                "max_tokens_to_sample": MAX_TOKENS_TO_SAMPLE,
                "temperature": TEMPERATURE,
            }),
        }

    async def invoke(self, prompt: str) -> ModelResponse:
        try:
            return await asyncio.to_thread(self._invoke_sync, prompt)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error invoking AWS Bedrock: {e}")
            raise InvocationError(str(e), {"model_id": self.config.model_id}) from e

    def _invoke_sync(self, prompt: str) -> ModelResponse:
        client = self.client_factory(self.config)
        response = client.invoke_model(**self.build_request(prompt))
        body = response["body"].read()
        logger.debug(f"Bedrock response length: {len(body)} bytes")
        return ModelResponse(
            body=body,
            content_type=response.get("contentType", "application/json"),
        )
