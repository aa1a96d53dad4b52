from abc import ABC, abstractmethod


class GitPlatform(ABC):
    @abstractmethod
    async def post_file_comment(self, file_path: str, comment: str) -> None:
        pass

    @abstractmethod
    async def delete_existing_comments(self) -> int:
        pass
