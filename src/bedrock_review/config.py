# src/bedrock_review/config.py
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    # AWS Bedrock
    aws_region: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    bedrock_model_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_BEDROCKMODELID", "BEDROCK_MODEL_ID"),
    )

    # Azure DevOps (predefined pipeline variables)
    collection_uri: str = Field(
        default="",
        validation_alias=AliasChoices("SYSTEM_TEAMFOUNDATIONCOLLECTIONURI", "SYSTEM_COLLECTIONURI"),
    )
    team_project_id: str = Field(
        default="",
        validation_alias=AliasChoices("SYSTEM_TEAMPROJECTID", "SYSTEM_TEAMPROJECT"),
    )
    repository_name: str = Field(default="", validation_alias="BUILD_REPOSITORY_NAME")
    pull_request_id: str | None = Field(default=None, validation_alias="SYSTEM_PULLREQUEST_PULLREQUESTID")
    pull_request_target_branch: str | None = Field(
        default=None, validation_alias="SYSTEM_PULLREQUEST_TARGETBRANCH"
    )
    access_token: str = Field(default="", validation_alias="SYSTEM_ACCESSTOKEN")

    # Task inputs
    support_self_signed_certificate: bool = Field(
        default=False, validation_alias="INPUT_SUPPORTSELFSIGNEDCERTIFICATE"
    )
    delete_existing_comments: bool = Field(default=True, validation_alias="INPUT_DELETEEXISTINGCOMMENTS")
    file_extensions: str | None = Field(default=None, validation_alias="INPUT_FILEEXTENSIONS")
    file_excludes: str | None = Field(default=None, validation_alias="INPUT_FILEEXCLUDES")

    # Defaults
    repo_path: str = "."
    log_level: str = "INFO"
