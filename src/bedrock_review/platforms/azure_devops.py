import logging
from typing import Any
from urllib.parse import quote
import httpx
from bedrock_review.exceptions import PublishError
from .base import GitPlatform


logger = logging.getLogger(__name__)

API_VERSION = "7.0"


class AzureDevOpsClient(GitPlatform):
    """Pull request threads on Azure DevOps, sent over a caller-owned transport."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        collection_uri: str,
        project: str,
        repository: str,
        pull_request_id: str,
    ):
        self.client = client
        self.token = token
        self.collection_uri = collection_uri.rstrip("/") + "/"
        self.pr_url = (
            f"{self.collection_uri}{quote(project, safe='')}/_apis/git/repositories/"
            f"{quote(repository, safe='')}/pullRequests/{pull_request_id}"
        )

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.client.request(
                method,
                url,
                params={"api-version": API_VERSION},
                headers=self._headers(),
                timeout=30.0,
                **kwargs,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise PublishError(f"Azure DevOps {method} {url} failed: {e}") from e
        return response

    async def post_file_comment(self, file_path: str, comment: str) -> None:
        """Open an active comment thread attached to file_path."""
        await self._request(
            "POST",
            f"{self.pr_url}/threads",
            json={
                "comments": [{
                    "parentCommentId": 0,
                    "content": comment,
                    "commentType": 1,
                }],
                "status": 1,
                "threadContext": {"filePath": f"/{file_path.lstrip('/')}"},
            },
        )

    async def get_authenticated_user_id(self) -> str:
        response = await self._request("GET", f"{self.collection_uri}_apis/connectionData")
        return response.json()["authenticatedUser"]["id"]

    async def delete_existing_comments(self) -> int:
        """Delete comments left on the PR by the token's identity. Returns count of deleted."""
        user_id = await self.get_authenticated_user_id()
        response = await self._request("GET", f"{self.pr_url}/threads")
        threads = response.json().get("value", [])

        deleted = 0
        for thread in threads:
            for comment in thread.get("comments", []):
                if comment.get("isDeleted") or comment.get("author", {}).get("id") != user_id:
                    continue
                await self._request(
                    "DELETE",
                    f"{self.pr_url}/threads/{thread['id']}/comments/{comment['id']}",
                )
                deleted += 1

        logger.info(f"Deleted {deleted} existing review comments")
        return deleted
