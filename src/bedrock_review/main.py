# src/bedrock_review/main.py
import asyncio
import fnmatch
import logging
import os
import sys
from pathlib import Path

import click
import httpx
import yaml

from bedrock_review.config import Settings
from bedrock_review.exceptions import ReviewError
from bedrock_review.models.config import RepoConfig
from bedrock_review.models.review import ModelInvocationConfig, ReviewRequest
from bedrock_review.platforms.azure_devops import AzureDevOpsClient
from bedrock_review.providers.bedrock import BedrockProvider
from bedrock_review.review.diff import GitDiffSource
from bedrock_review.review.engine import ReviewEngine
from bedrock_review.review.parser import DiffFile


logger = logging.getLogger(__name__)

REPO_CONFIG_FILE = ".ai-review.yaml"


def resolve_target_branch(settings: Settings, override: str | None = None) -> str:
    """Target branch ref for diffs, e.g. refs/heads/main -> origin/main."""
    if override:
        return override
    if not settings.pull_request_target_branch:
        raise click.ClickException("SYSTEM_PULLREQUEST_TARGETBRANCH is not set")
    branch = settings.pull_request_target_branch.removeprefix("refs/heads/")
    return f"origin/{branch}"


def load_repo_config(repo_path: str) -> RepoConfig:
    """Load .ai-review.yaml from the repo root or use defaults."""
    config_path = Path(repo_path) / REPO_CONFIG_FILE
    if not config_path.is_file():
        return RepoConfig()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        return RepoConfig(**data)
    except Exception as e:
        logger.warning(f"Invalid {REPO_CONFIG_FILE}: {e}")
        return RepoConfig()


def is_reviewable(diff_file: DiffFile, config: RepoConfig) -> bool:
    if diff_file.is_deleted:
        return False
    if any(fnmatch.fnmatch(diff_file.path, pattern) for pattern in config.exclude):
        return False
    if config.file_extensions:
        allowed = {f".{ext.lower().lstrip('.')}" for ext in config.file_extensions}
        return os.path.splitext(diff_file.path)[1].lower() in allowed
    return True


async def run_review(settings: Settings, target_branch: str) -> int:
    """Review every changed file sequentially. Returns number of failed files."""
    diff_source = GitDiffSource(repo_path=settings.repo_path)
    repo_config = load_repo_config(settings.repo_path).with_overrides(
        settings.file_extensions, settings.file_excludes
    )
    provider = BedrockProvider(config=ModelInvocationConfig.from_settings(settings))

    async with httpx.AsyncClient(verify=not settings.support_self_signed_certificate) as transport:
        platform = AzureDevOpsClient(
            client=transport,
            token=settings.access_token,
            collection_uri=settings.collection_uri,
            project=settings.team_project_id,
            repository=settings.repository_name,
            pull_request_id=settings.pull_request_id or "",
        )
        engine = ReviewEngine(diff_source=diff_source, provider=provider, platform=platform)

        if settings.delete_existing_comments:
            await platform.delete_existing_comments()

        changed = await diff_source.changed_files(target_branch)
        files = [f.path for f in changed if is_reviewable(f, repo_config)]
        logger.info(f"Reviewing {len(files)} of {len(changed)} changed files against {target_branch}")

        failed = 0
        for file_path in files:
            try:
                await engine.review_file(ReviewRequest(target_branch=target_branch, file_path=file_path))
            except Exception:
                failed += 1

    return failed


@click.command()
@click.option("--target-branch", default=None, help="Ref to diff against (default: PR target branch on origin).")
@click.option("--repo-path", default=None, help="Path of the git checkout (default: current directory).")
def cli(target_branch: str | None, repo_path: str | None) -> None:
    """Review pull request changes with an AWS Bedrock model."""
    settings = Settings()
    if repo_path:
        settings = settings.model_copy(update={"repo_path": repo_path})

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not settings.pull_request_id:
        logger.warning("No pull request ID found, skipping review. Run this as a PR build validation.")
        return

    try:
        failed = asyncio.run(run_review(settings, resolve_target_branch(settings, target_branch)))
    except ReviewError as e:
        logger.error(f"Pull request review aborted: {e}")
        raise click.ClickException(e.message) from e

    if failed:
        logger.error(f"Review failed for {failed} file(s)")
        sys.exit(1)
    logger.info("Pull request review completed")


if __name__ == "__main__":
    cli()
