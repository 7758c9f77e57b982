from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from colorhunt.app import create_app
from colorhunt.core.database import EmbeddedRankingStore
from colorhunt.services.commentary import CommentaryGenerator


@pytest.fixture
def store(tmp_path):
    store = EmbeddedRankingStore(tmp_path / "rankings.db")
    store.init_schema()
    yield store
    store.close()


@pytest.fixture
def client(tmp_path):
    app = create_app(
        store=EmbeddedRankingStore(tmp_path / "rankings.db"),
        commentary=CommentaryGenerator(api_key=None),
    )
    with TestClient(app) as test_client:
        yield test_client
