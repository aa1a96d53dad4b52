# src/bedrock_review/review/verdict.py
import json
from bedrock_review.exceptions import ParseError
from bedrock_review.models.review import ModelResponse, Verdict


def parse_verdict(response: ModelResponse) -> Verdict:
    """Extract the trimmed completion text from a Bedrock response body."""
    try:
        decoded = response.body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Model response is not valid UTF-8: {e}") from e

    try:
        data = json.loads(decoded)
    except json.JSONDecodeError as e:
        raise ParseError(f"Model response is not valid JSON: {e}", {"body": decoded[:500]}) from e

    if not isinstance(data, dict):
        raise ParseError("Model response is not a JSON object", {"body": decoded[:500]})

    completion = data.get("completion")
    if not isinstance(completion, str):
        raise ParseError("Model response has no 'completion' text", {"keys": sorted(data)})

    text = completion.strip()
    if not text:
        raise ParseError("Model response has an empty 'completion'")

    return Verdict(text=text)
