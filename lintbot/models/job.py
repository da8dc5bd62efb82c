"""Review job payload data models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ReviewJobPayload(BaseModel):
    """Message handed to the job queue for one (build, file, linter) tuple."""

    model_config = ConfigDict(frozen=True)

    filename: str
    commit_sha: str
    linter_name: str
    pull_request_number: int
    patch: str
    content: Optional[str] = None
    config: str  # canonical serialized ResolvedConfig
