import pytest
from fastapi.testclient import TestClient

from blogdata.app import app

BLOG_VARS = ("BLOG_NAME", "BLOG_TITLE", "BLOG_FOOTER_TEXT", "EMAIL_CONTACT")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove blog variables a developer's shell or .env may have set."""
    for key in BLOG_VARS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def client(clean_env):
    # Let the app's exception handler produce the 500 instead of re-raising
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
