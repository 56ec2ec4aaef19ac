"""Extract the fields the message builders need from Bitbucket payloads.

See https://support.atlassian.com/bitbucket-cloud/docs/event-payloads/ for
the payload shapes. Extraction never fails: anything missing becomes None.
"""

import logging
from collections.abc import Mapping
from typing import Any

from bitbucket_relay.bitbucket.lookup import get_key, get_list, get_str
from bitbucket_relay.models.context import PullRequestContext, RepoContext

logger = logging.getLogger(__name__)


def extract_pullrequest_data(event: Mapping[str, Any]) -> PullRequestContext:
    """Map a pull request event payload onto a PullRequestContext."""
    logger.info("Extracting pull request data")

    return PullRequestContext(
        pr_author=get_str(event, "pullrequest.author.display_name"),
        pr_author_username=get_str(event, "pullrequest.author.username"),
        pr_url=get_str(event, "pullrequest.links.html.href"),
        pr_title=get_str(event, "pullrequest.title"),
        actor=get_str(event, "actor.display_name"),
        actor_username=get_str(event, "actor.username"),
        repo_name=get_str(event, "pullrequest.source.repository.name"),
        repo_source_name=get_str(event, "pullrequest.source.branch.name"),
        repo_destination_name=get_str(event, "pullrequest.destination.branch.name"),
        reason=get_str(event, "repository.reason"),
        state=get_str(event, "repository.state"),
        description=get_str(event, "repository.description"),
        comment_url=get_str(event, "comment.links.html.href"),
        comment_content_raw=get_str(event, "comment.content.raw"),
        reviewers=get_list(event, "pullrequest.reviewers"),
    )


def extract_repo_data(event: Mapping[str, Any]) -> RepoContext:
    """Map a repository event payload onto a RepoContext.

    Only the first entry of ``push.changes`` is considered. Its ``new`` ref
    describes the push target; ``old`` is used when the ref was deleted.
    """
    logger.info("Extracting push data")

    push: dict[str, Any] = {}
    changes = get_list(event, "push.changes")
    change = changes[0] if changes else None
    if isinstance(change, Mapping):
        ref = get_key(change, "new")
        if ref is None:
            ref = get_key(change, "old")
        if isinstance(ref, Mapping):
            forced = get_key(change, "forced")
            push = {
                "push_type": get_str(ref, "type"),
                "push_target": get_str(ref, "name"),
                "push_forced": None if forced is None else bool(forced),
                "push_commits": get_list(change, "commits"),
            }

    return RepoContext(
        actor=get_str(event, "actor.display_name"),
        actor_username=get_str(event, "actor.username"),
        repo_name=get_str(event, "repository.name"),
        reason=get_str(event, "repository.reason"),
        state=get_str(event, "repository.state"),
        description=get_str(event, "repository.description"),
        comment_url=get_str(event, "comment.links.html.href"),
        comment_content_raw=get_str(event, "comment.content.raw"),
        **push,
    )
