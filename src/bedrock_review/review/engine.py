# src/bedrock_review/review/engine.py
import logging
from bedrock_review.platforms.base import GitPlatform
from bedrock_review.providers.base import LLMProvider
from bedrock_review.models.review import FileReviewResult, ReviewRequest, ReviewState
from .diff import DiffSource
from .prompts import build_review_prompt
from .verdict import parse_verdict


logger = logging.getLogger(__name__)


class ReviewEngine:
    """Reviews one changed file at a time: diff, prompt, invoke, parse, publish or skip.

    The engine holds no per-review state, so concurrent ``review_file`` calls
    for different files do not interfere.
    """

    def __init__(self, diff_source: DiffSource, provider: LLMProvider, platform: GitPlatform):
        self.diff_source = diff_source
        self.provider = provider
        self.platform = platform

    async def review_file(self, request: ReviewRequest) -> FileReviewResult:
        file_path = request.file_path
        state = ReviewState.START
        logger.info(f"Start reviewing {file_path} ...")

        try:
            patch = await self.diff_source.diff(request.target_branch, file_path)
            state = ReviewState.DIFFED

            prompt = build_review_prompt(patch)
            state = ReviewState.PROMPTED

            response = await self.provider.invoke(prompt)
            state = ReviewState.INVOKED

            verdict = parse_verdict(response)
            state = ReviewState.PARSED

            if not verdict.is_clean:
                await self.platform.post_file_comment(file_path, verdict.text)
                state = ReviewState.PUBLISHED
                logger.info(f"Comment added to PR for {file_path}")
            else:
                state = ReviewState.SKIPPED
                logger.info(f"No feedback for {file_path}")
        except Exception as e:
            logger.error(f"Review of {file_path} failed after state '{state.value}': {e}")
            raise

        logger.info(f"Review of {file_path} completed.")
        return FileReviewResult(
            file_path=file_path,
            state=state,
            feedback=None if verdict.is_clean else verdict.text,
        )
