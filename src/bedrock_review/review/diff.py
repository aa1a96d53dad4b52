# src/bedrock_review/review/diff.py
import asyncio
import logging
from abc import ABC, abstractmethod
from bedrock_review.exceptions import DiffError
from .parser import DiffFile, parse_diff


logger = logging.getLogger(__name__)


class DiffSource(ABC):
    @abstractmethod
    async def diff(self, target_branch: str, file_path: str) -> str:
        """Return the unified diff of file_path against target_branch."""
        pass

    @abstractmethod
    async def changed_files(self, target_branch: str) -> list[DiffFile]:
        pass


class GitDiffSource(DiffSource):
    """Produces unified diffs of the working tree against a target branch."""

    def __init__(self, repo_path: str = "."):
        self.repo_path = repo_path

    async def diff(self, target_branch: str, file_path: str) -> str:
        """Return the patch of a single path; empty for binary or mode-only changes."""
        return await self._git("diff", "--no-color", target_branch, "--", file_path)

    async def changed_files(self, target_branch: str) -> list[DiffFile]:
        output = await self._git("diff", "--no-color", target_branch)
        return parse_diff(output)

    async def _git(self, *args: str) -> str:
        try:
            # Non-ASCII paths verbatim, so diff headers name the real file
            process = await asyncio.create_subprocess_exec(
                "git",
                "-c",
                "core.quotePath=false",
                *args,
                cwd=self.repo_path,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise DiffError(f"Could not run git: {e}") from e

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise DiffError(
                f"git {' '.join(args)} failed: {message}",
                {"returncode": process.returncode},
            )
        return stdout.decode("utf-8", errors="replace")
