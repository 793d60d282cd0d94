"""
Fixtures pytest partagees pour les tests Applab.

Ce module contient les fixtures communes utilisees dans les tests:
- Services en memoire (identite, stockage de documents)
- AuthService branche sur ces services avec une date fixe
- Settings de test avec chemins temporaires
"""

from datetime import date
from pathlib import Path

import pytest

from applab.adapters.firebase.session_store import SessionStore
from applab.config import Settings
from applab.services.auth import AuthService
from tests.fixtures.fakes import InMemoryDocumentStore, InMemoryIdentityService

# Date locale figee pour les dates d'inscription
TODAY = date(2026, 10, 19)


@pytest.fixture
def identity_service() -> InMemoryIdentityService:
    """Service d'identite en memoire, sans compte."""
    return InMemoryIdentityService()


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    """Stockage de documents en memoire, vide."""
    return InMemoryDocumentStore()


@pytest.fixture
def auth_service(
    identity_service: InMemoryIdentityService,
    document_store: InMemoryDocumentStore,
) -> AuthService:
    """AuthService sur les services en memoire avec une date fixe."""
    return AuthService(
        identity_service=identity_service,
        document_store=document_store,
        today_fn=lambda: TODAY,
    )


@pytest.fixture
def session_store(tmp_path: Path) -> SessionStore:
    """SessionStore dans un repertoire temporaire."""
    store = SessionStore(session_dir=str(tmp_path / "session"))
    yield store
    store.close()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la session et les logs.
    """
    return Settings(
        firebase_api_key="test-api-key",
        firebase_database_url="https://applab-test-default-rtdb.firebaseio.com",
        session_dir=tmp_path / "session",
        log_file=tmp_path / "test.log",
    )
