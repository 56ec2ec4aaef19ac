"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from bitbucket_relay.app import app
from bitbucket_relay.config import Settings, get_settings

SLACK_PATH = "/services/T000/B000/XXXX"


def make_settings(**overrides: object) -> Settings:
    """Build Settings without reading any .env file."""
    values: dict = {
        "slack_webhook_path": SLACK_PATH,
        "user_map": {"alice": "alice_slack", "bob": "bob_slack", "carol": "carol_slack"},
        "mention_reviewers": True,
        "rebase_alert_handle": "",
        "comment_preview_length": 100,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings() -> Settings:
    """Default test settings with a small username map."""
    return make_settings()


@pytest.fixture()
def client(settings: Settings):
    """TestClient for the FastAPI app with settings overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def pullrequest_payload() -> dict:
    """A representative pullrequest:* webhook body."""
    return {
        "actor": {"display_name": "Bob Builder", "username": "bob"},
        "pullrequest": {
            "title": "Fix bug",
            "author": {"display_name": "Alice Smith", "username": "alice"},
            "links": {"html": {"href": "https://bitbucket.org/acme/widgets/pull-requests/7"}},
            "source": {
                "repository": {"name": "widgets"},
                "branch": {"name": "feature/fix-bug"},
            },
            "destination": {"branch": {"name": "main"}},
            "reviewers": [],
        },
        "repository": {"name": "widgets"},
    }


@pytest.fixture()
def push_payload() -> dict:
    """A repo:push webhook body with two commits."""
    return {
        "actor": {"display_name": "Carol Danvers", "username": "carol"},
        "repository": {"name": "widgets"},
        "push": {
            "changes": [
                {
                    "forced": False,
                    "new": {"type": "branch", "name": "main"},
                    "old": {"type": "branch", "name": "main"},
                    "commits": [
                        {
                            "hash": "0123456789abcdef0123456789abcdef01234567",
                            "message": "Add widget factory\n",
                            "links": {"html": {"href": "https://bitbucket.org/acme/widgets/commits/0123456"}},
                            "author": {"user": {"display_name": "Carol Danvers"}},
                        },
                        {
                            "hash": "fedcba9876543210fedcba9876543210fedcba98",
                            "message": "Merge branch 'feature'\n\nResolves conflicts in widgets.py",
                            "links": {"html": {"href": "https://bitbucket.org/acme/widgets/commits/fedcba9"}},
                            "author": {"raw": "Dan <dan@example.com>"},
                        },
                    ],
                }
            ]
        },
    }
