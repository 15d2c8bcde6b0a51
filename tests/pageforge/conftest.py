"""Test fixtures for Pageforge.

Provides two levels of test fixtures:
1. Unit tests (no server): Use `repo` / `home_repo` for the document core
2. API tests (no server): Use `test_client` for FastAPI endpoints
"""

from typing import Generator

import pytest

from pageforge.elements import PageElement
from pageforge.repository import PageRepository


HOME_TREE = [
    {
        "id": "section",
        "type": "container",
        "position": {"x": 0, "y": 0},
        "size": {"width": 800, "height": 400},
        "children": [
            {"id": "title", "type": "heading", "props": {"text": "Welcome"}},
            {
                "id": "row",
                "type": "container",
                "children": [
                    {"id": "cta", "type": "button", "props": {"label": "Go"}},
                ],
            },
        ],
    },
    {
        "id": "footer",
        "type": "text",
        "props": {"text": "(c) 2024"},
        "position": {"x": 0, "y": 500},
    },
]


@pytest.fixture
def repo() -> PageRepository:
    """Empty repository with default history limit and paste offset."""
    return PageRepository(history_limit=100, paste_offset=10.0)


@pytest.fixture
def home_repo(repo: PageRepository) -> PageRepository:
    """Repository with one page "Home" holding a nested element tree.

    Tree on "Home":
        section (container)
        ├── title (heading)
        └── row (container)
            └── cta (button)
        footer (text)

    The tree is injected directly and history is cleared, so tests start
    without undo checkpoints and with nothing selected.
    """
    repo.add_page("Home")
    repo.current_page.elements.extend(PageElement.model_validate(data) for data in HOME_TREE)
    repo.history.clear()
    return repo


@pytest.fixture
def test_client() -> Generator:
    """TestClient for FastAPI unit testing without a server.

    Sessions are cleared before and after each test so they do not leak.
    """
    from starlette.testclient import TestClient

    from pageforge.app import create_api_app
    from pageforge.sessions import session_manager

    session_manager._sessions.clear()
    app = create_api_app()
    with TestClient(app) as client:
        yield client
    session_manager._sessions.clear()
