# tests/e2e/test_real_bedrock.py
"""
End-to-end tests for the Bedrock provider with real API calls.

These tests require valid AWS credentials with Bedrock model access:
- AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY
- AWS_REGION (optional, defaults to us-east-1)
- BEDROCK_MODEL_ID (optional, a model that accepts text-completion requests)

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from bedrock_review.config import Settings
from bedrock_review.models.review import ModelInvocationConfig
from bedrock_review.providers.bedrock import BedrockProvider
from bedrock_review.review.prompts import build_review_prompt
from bedrock_review.review.verdict import parse_verdict


BUGGY_PATCH = """--- a/src/check.js
+++ b/src/check.js
@@ -1,3 +1,3 @@
 function isOne(x) {
-  return x === 1;
+  if (x = 1) { return true; }
 }
"""


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_bedrock_real_review():
    """A patch with an obvious bug should not come back as the sentinel."""
    if not os.environ.get("AWS_ACCESS_KEY_ID"):
        pytest.skip("AWS_ACCESS_KEY_ID not set")

    provider = BedrockProvider(config=ModelInvocationConfig.from_settings(Settings()))
    response = await provider.invoke(build_review_prompt(BUGGY_PATCH))
    verdict = parse_verdict(response)

    assert verdict.text
    assert verdict.is_clean is False
