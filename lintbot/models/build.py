"""Build and commit file data models."""

from typing import Optional

from pydantic import BaseModel


class Build(BaseModel):
    """One CI run for one pull request commit."""

    id: int
    commit_sha: str
    pull_request_number: int
    repo_name: str
    repo_owner: Optional[str] = None


class CommitFile(BaseModel):
    """File changed in a commit, as supplied by the source host."""

    filename: str
    patch: str = ""
    content: Optional[str] = None  # None for removed files

    @property
    def removed(self) -> bool:
        return self.content is None
