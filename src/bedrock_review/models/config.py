from pydantic import BaseModel, Field


class RepoConfig(BaseModel):
    # Empty means every extension is reviewed
    file_extensions: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(
        default_factory=lambda: [
            "*.md",
            "*.lock",
            "*.min.js",
            "*.min.css",
            "*.generated.*",
            "package-lock.json",
            "yarn.lock",
            "pnpm-lock.yaml",
        ]
    )

    def with_overrides(self, file_extensions: str | None, file_excludes: str | None) -> "RepoConfig":
        """Apply comma-separated task input lists on top of the YAML values."""
        update = {}
        if file_extensions:
            update["file_extensions"] = _split_list(file_extensions)
        if file_excludes:
            update["exclude"] = _split_list(file_excludes)
        return self.model_copy(update=update)


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
