# tests/integration/test_azure_devops_client.py
import json
import httpx
import pytest
from bedrock_review.exceptions import PublishError
from bedrock_review.platforms.azure_devops import AzureDevOpsClient


COLLECTION = "https://dev.azure.com/contoso/"
PR_URL = f"{COLLECTION}web/_apis/git/repositories/shop-api/pullRequests/17"


def make_client(transport: httpx.AsyncClient) -> AzureDevOpsClient:
    return AzureDevOpsClient(
        client=transport,
        token="pipeline-token",
        collection_uri=COLLECTION,
        project="web",
        repository="shop-api",
        pull_request_id="17",
    )


@pytest.mark.asyncio
async def test_post_file_comment(httpx_mock):
    httpx_mock.add_response(
        method="POST",
        url=f"{PR_URL}/threads?api-version=7.0",
        json={"id": 101},
    )

    async with httpx.AsyncClient() as transport:
        await make_client(transport).post_file_comment("src/app.ts", "Possible null dereference.")

    request = httpx_mock.get_request()
    assert request.headers["Authorization"] == "Bearer pipeline-token"
    assert json.loads(request.content) == {
        "comments": [{
            "parentCommentId": 0,
            "content": "Possible null dereference.",
            "commentType": 1,
        }],
        "status": 1,
        "threadContext": {"filePath": "/src/app.ts"},
    }


@pytest.mark.asyncio
async def test_post_file_comment_failure_raises_publish_error(httpx_mock):
    httpx_mock.add_response(
        method="POST",
        url=f"{PR_URL}/threads?api-version=7.0",
        status_code=401,
    )

    async with httpx.AsyncClient() as transport:
        with pytest.raises(PublishError):
            await make_client(transport).post_file_comment("src/app.ts", "feedback")


@pytest.mark.asyncio
async def test_delete_existing_comments_only_removes_own(httpx_mock):
    httpx_mock.add_response(
        method="GET",
        url=f"{COLLECTION}_apis/connectionData?api-version=7.0",
        json={"authenticatedUser": {"id": "build-service"}},
    )
    httpx_mock.add_response(
        method="GET",
        url=f"{PR_URL}/threads?api-version=7.0",
        json={
            "value": [
                {"id": 1, "comments": [
                    {"id": 1, "author": {"id": "build-service"}},
                    {"id": 2, "author": {"id": "alice"}},
                ]},
                {"id": 2, "comments": [
                    {"id": 1, "author": {"id": "build-service"}, "isDeleted": True},
                ]},
                {"id": 3, "comments": [
                    {"id": 1, "author": {"id": "build-service"}},
                ]},
            ]
        },
    )
    httpx_mock.add_response(method="DELETE", url=f"{PR_URL}/threads/1/comments/1?api-version=7.0")
    httpx_mock.add_response(method="DELETE", url=f"{PR_URL}/threads/3/comments/1?api-version=7.0")

    async with httpx.AsyncClient() as transport:
        deleted = await make_client(transport).delete_existing_comments()

    assert deleted == 2
    assert len(httpx_mock.get_requests(method="DELETE")) == 2
