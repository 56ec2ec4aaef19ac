"""Slack message builders for Bitbucket pull request and repository events.

Each builder takes the raw webhook payload plus the application settings and
returns a NotificationPayload with a single attachment. Pull request builders
share one base skeleton, and ``repo:push`` uses the repository skeleton.
"""

from collections.abc import Callable, Mapping
from typing import Any

from bitbucket_relay.bitbucket.extract import extract_pullrequest_data, extract_repo_data
from bitbucket_relay.bitbucket.formatting import (
    capitalize,
    format_commit_message,
    mention,
    mentions,
    text,
    truncate,
)
from bitbucket_relay.bitbucket.lookup import get_str
from bitbucket_relay.config import Settings
from bitbucket_relay.models.context import PullRequestContext, RepoContext
from bitbucket_relay.models.notification import Attachment, Color, NotificationPayload

Handler = Callable[[Mapping[str, Any], Settings], NotificationPayload]

COMMIT_HASH_LENGTH = 8


# -- Base skeletons --


def pullrequest_base(
    event: Mapping[str, Any],
) -> tuple[PullRequestContext, NotificationPayload]:
    """Extract pull request data and build the shared message skeleton."""
    data = extract_pullrequest_data(event)
    attachment = Attachment(title=data.pr_title, title_link=data.pr_url, color=Color.BLUE)
    if data.reason:
        attachment.add_field("Reason", data.reason)
    return data, NotificationPayload(attachments=[attachment])


def repo_base(event: Mapping[str, Any]) -> tuple[RepoContext, NotificationPayload]:
    """Extract repository data and build the shared message skeleton."""
    data = extract_repo_data(event)
    attachment = Attachment(color=Color.BLUE)
    if data.reason:
        attachment.add_field("Reason", data.reason)
    return data, NotificationPayload(attachments=[attachment])


def _headline(attachment: Attachment, data: PullRequestContext, summary: str) -> None:
    attachment.fallback = f"Pull-Request {summary}: {text(data.pr_title)}"
    attachment.pretext = f"_Pull-Request: *{summary}*_"


def _branches(data: PullRequestContext) -> str:
    return (
        f"{text(data.repo_name)} "
        f"({text(data.repo_source_name)} → {text(data.repo_destination_name)})"
    )


def _author(attachment: Attachment, data: PullRequestContext, settings: Settings) -> None:
    attachment.add_field(
        "Author", mention(data.pr_author_username, settings.user_map), short=True
    )


# -- Pull request handlers --


def pullrequest_created(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    data, result = pullrequest_base(event)
    attachment = result.attachment
    _headline(attachment, data, "Created")

    attachment.add_field("Repo / Branches", _branches(data), short=True)
    _author(attachment, data, settings)

    if settings.mention_reviewers and data.reviewers:
        attachment.add_field("Reviewers", mentions(data.reviewers, settings.user_map))

    return result


def _actor_update(
    event: Mapping[str, Any],
    settings: Settings,
    summary: str,
    actor_label: str,
    color: Color,
) -> NotificationPayload:
    """Pull request event reported as author plus the acting user."""
    data, result = pullrequest_base(event)
    attachment = result.attachment
    _headline(attachment, data, summary)
    attachment.color = color

    _author(attachment, data, settings)
    attachment.add_field(actor_label, text(data.actor), short=True)
    return result


def pullrequest_updated(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    return _actor_update(event, settings, "Updated", "Updated By", Color.BLUE)


def pullrequest_approved(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    return _actor_update(event, settings, "Approved", "Approved By", Color.GREEN)


def pullrequest_unapproved(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    return _actor_update(event, settings, "Unapproved", "Unapproved By", Color.YELLOW)


def pullrequest_rejected(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    return _actor_update(event, settings, "Rejected", "Rejected By", Color.RED)


def pullrequest_fulfilled(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    data, result = pullrequest_base(event)
    attachment = result.attachment
    _headline(attachment, data, "Merged")
    attachment.color = Color.GREEN

    attachment.add_field("Repo / Branches", _branches(data), short=True)
    _author(attachment, data, settings)
    attachment.add_field("Merged By", text(data.actor), short=True)
    return result


def _comment(
    event: Mapping[str, Any],
    settings: Settings,
    summary: str,
    color: Color,
) -> NotificationPayload:
    """Pull request comment event; the title links to the comment itself."""
    data, result = pullrequest_base(event)
    attachment = result.attachment
    _headline(attachment, data, summary)
    attachment.title_link = data.comment_url
    attachment.color = color

    _author(attachment, data, settings)
    attachment.add_field(
        "Comment",
        truncate(data.comment_content_raw, settings.comment_preview_length),
        short=True,
    )
    attachment.add_field("Comment By", text(data.actor), short=True)
    return result


def pullrequest_comment_created(
    event: Mapping[str, Any], settings: Settings
) -> NotificationPayload:
    return _comment(event, settings, "Comment Added", Color.GREEN)


def pullrequest_comment_updated(
    event: Mapping[str, Any], settings: Settings
) -> NotificationPayload:
    return _comment(event, settings, "Comment Updated", Color.YELLOW)


def pullrequest_comment_deleted(
    event: Mapping[str, Any], settings: Settings
) -> NotificationPayload:
    return _comment(event, settings, "Comment Deleted", Color.YELLOW)


# -- Repository handlers --


def format_commit_line(commit: Any) -> str:
    """One commit rendered as ``(<link|hash>) message - author``."""
    url = text(get_str(commit, "links.html.href"))
    short_hash = truncate(get_str(commit, "hash"), COMMIT_HASH_LENGTH, show_ellipsis=False)
    message = format_commit_message(get_str(commit, "message"))
    author = get_str(commit, "author.user.display_name") or get_str(commit, "author.raw")
    return f"(<{url}|{short_hash}>) {message} - {text(author)}"


def repo_push(event: Mapping[str, Any], settings: Settings) -> NotificationPayload:
    data, result = repo_base(event)
    attachment = result.attachment

    action = "Pushed"
    if data.push_forced:
        action = "REBASED"
        if settings.rebase_alert_handle:
            action += f" (attn: @{settings.rebase_alert_handle})"
    commits = data.push_commits or []
    headline = f"{len(commits)} Commits {action}"

    attachment.fallback = f"{text(data.repo_name)}: {headline}"
    attachment.pretext = f"_{text(data.repo_name)}: *{headline}*_"

    attachment.add_field(capitalize(data.push_type) or "Ref", text(data.push_target), short=True)
    attachment.add_field(
        "Rebased By" if data.push_forced else "Pushed By", text(data.actor), short=True
    )

    if commits:
        attachment.add_field(
            "Commits",
            "\n".join(format_commit_line(commit) for commit in commits),
            short=False,
        )

    return result
