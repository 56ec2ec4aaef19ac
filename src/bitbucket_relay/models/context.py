"""Flattened views of a Bitbucket webhook payload.

Every field is optional: Bitbucket omits keys freely depending on the event,
and a missing value is carried as None rather than failing the request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class PullRequestContext(BaseModel):
    """Fields read from a ``pullrequest:*`` payload."""

    model_config = ConfigDict(frozen=True)

    pr_author: str | None = None  # display name
    pr_author_username: str | None = None
    pr_url: str | None = None
    pr_title: str | None = None

    actor: str | None = None  # who triggered the event
    actor_username: str | None = None

    repo_name: str | None = None
    repo_source_name: str | None = None  # source branch
    repo_destination_name: str | None = None  # destination branch

    reason: str | None = None
    state: str | None = None
    description: str | None = None

    comment_url: str | None = None
    comment_content_raw: str | None = None

    reviewers: list[Any] | None = None  # [{"username": ..., "display_name": ...}]


class RepoContext(BaseModel):
    """Fields read from a ``repo:*`` payload, including the first push change."""

    model_config = ConfigDict(frozen=True)

    actor: str | None = None
    actor_username: str | None = None
    repo_name: str | None = None

    reason: str | None = None
    state: str | None = None
    description: str | None = None

    comment_url: str | None = None
    comment_content_raw: str | None = None

    push_type: str | None = None  # branch, tag, named_branch, bookmark
    push_target: str | None = None  # ref name
    push_forced: bool | None = None
    push_commits: list[Any] | None = None
