# src/bedrock_review/providers/__init__.py
from .base import LLMProvider
from .bedrock import BedrockProvider

__all__ = ["LLMProvider", "BedrockProvider"]
