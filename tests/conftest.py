# tests/conftest.py
import time
from types import SimpleNamespace

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from docsum.core.config import settings
from docsum.db.session import get_db, make_engine
from docsum.main import app
from docsum.models import Base, Document, DocumentFolder, Folder, Summary, User


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True, expire_on_commit=False)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def fake_queue(monkeypatch):
    """Record enqueued pipeline jobs instead of talking to Redis."""
    calls = []

    class _Queue:
        def enqueue(self, func, *args, **kwargs):
            calls.append((func, args))
            return SimpleNamespace(id=f"job-{len(calls)}")

    monkeypatch.setattr("docsum.services.regeneration.get_queue", lambda: _Queue())
    return calls


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


# ---- JWT helpers
def make_token(sub="user_alice", expires_in=3600):
    now = int(time.time())
    payload = {"sub": sub, "iat": now, "exp": now + int(expires_in)}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def bearer(sub="user_alice", expires_in=3600):
    return {"Authorization": f"Bearer {make_token(sub, expires_in)}"}


@pytest.fixture
def alice_headers():
    return bearer("user_alice")


@pytest.fixture
def bob_headers():
    return bearer("user_bob")


# ---- Seed helpers
@pytest.fixture
def seed(session_factory):
    """Create users, documents, folder links and summaries in their own committed session."""

    def _user(external_id):
        with session_factory() as db:
            user = User(external_id=external_id)
            db.add(user)
            db.commit()
            return user

    def _document(user, title="Report", file_name="report.pdf", folders=0):
        with session_factory() as db:
            document = Document(
                user_id=user.id,
                title=title,
                file_name=file_name,
                file_url=f"http://files.test/{file_name}",
                file_key=f"key-{file_name}",
                file_size=2048,
            )
            db.add(document)
            db.flush()
            for index in range(folders):
                folder = Folder(user_id=user.id, name=f"Folder {index}")
                db.add(folder)
                db.flush()
                db.add(DocumentFolder(document_id=document.id, folder_id=folder.id))
            db.commit()
            return document

    def _summary(document, type, content, title=None, order=None):
        with session_factory() as db:
            summary = Summary(document_id=document.id, type=type, content=content, title=title, order=order)
            db.add(summary)
            db.commit()
            return summary

    return SimpleNamespace(user=_user, document=_document, summary=_summary)


@pytest.fixture
def headers_for():
    return bearer


@pytest.fixture
def expired_headers():
    return bearer("user_alice", expires_in=-10)
