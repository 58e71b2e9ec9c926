"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - client is logged in (get_current_user overridden); anon_client is not
    - Reference data mirrors a small real install: en/de/es, three projects, a few keys

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Assertions on DB state use a new session (fresh_db) so no identity-map state leaks
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from translation_api.api.deps import get_current_user
from translation_api.db.base import Base
from translation_api.infrastructure.database import get_db
from translation_api.main import app
from translation_api.models import (
    Identifier, Language, Project, Revision, Translation, User,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fresh_db(test_session_factory):
    """Session factory for post-request assertions: `async with fresh_db() as db`."""
    return test_session_factory


@pytest.fixture
async def languages(test_db):
    """en, de, es — keyed by ISO code."""
    rows = {
        "en": Language(iso_code="en", name="English"),
        "de": Language(iso_code="de", name="German"),
        "es": Language(iso_code="es", name="Spanish"),
    }
    test_db.add_all(list(rows.values()))
    await test_db.commit()
    return rows


@pytest.fixture
async def seed_user(test_db):
    user = User(
        username="admin1", password_hash="not-a-real-hash",
        mail="admin1@example.com", admin=True,
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def seed_projects(test_db, languages):
    """Shared (en; de+en, two keys), Base (de; de, one key), Archived (de; no languages)."""
    en, de = languages["en"], languages["de"]
    shared = Project(name="Shared", base_language=en, languages=[de, en])
    base = Project(name="Base", base_language=de, languages=[de])
    archived = Project(name="Archived", base_language=de, archived=True)
    test_db.add_all([shared, base, archived])
    await test_db.flush()

    key1 = Identifier(identifier="key1", project_id=shared.id)
    key2 = Identifier(identifier="key2", project_id=shared.id)
    key3 = Identifier(identifier="key2", project_id=base.id)
    test_db.add_all([key1, key2, key3])
    await test_db.flush()

    t1 = Translation(translation="translation1", identifier_id=key1.id, language_id=de.id)
    t2 = Translation(translation='"translation2"', identifier_id=key2.id, language_id=de.id)
    t3 = Translation(
        translation="translation2", identifier_id=key3.id,
        language_id=de.id, approved=True,
    )
    test_db.add_all([t1, t2, t3])
    await test_db.flush()

    for t in (t1, t2, t3):
        test_db.add(Revision(
            translation_id=t.id, revision_translation=t.translation, approved=t.approved,
        ))
    await test_db.commit()
    return {"shared": shared, "base": base, "archived": archived}


@pytest.fixture
async def anon_client(test_session_factory):
    """FastAPI test client with DB overridden and no logged-in user."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def client(anon_client):
    """FastAPI test client with a logged-in user."""
    app.dependency_overrides[get_current_user] = lambda: User(
        id=1, username="tester", password_hash="", mail="tester@example.com",
    )
    yield anon_client
