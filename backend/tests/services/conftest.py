"""Service test fixtures: async DB + FastAPI test client + seeded league.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness check sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - seed_league builds one season with a 15-golfer pool in five groups of
      three, so both legal and illegal teams are easy to write
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from fairway.db.base import Base
from fairway.infrastructure.database import get_db, DatabaseSessionManager
import fairway.infrastructure.database as db_module
from fairway.main import app
from fairway.models import (
    Golfer, Season, Tier, Tour, TourCard, Tournament, TournamentGolfer,
)
from tests.services.seed_data import POOL_SIZE, group_of


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@dataclass
class SeededLeague:
    season_id: UUID
    tour_id: UUID
    tier_id: UUID
    tournament_id: UUID
    tour_card_ids: list[UUID]
    member_ids: list[UUID]


@pytest.fixture
async def seed_league(test_db) -> SeededLeague:
    """One season, one tour (2 gold / 2 silver), one upcoming tournament."""
    season = Season(year=2026)
    test_db.add(season)
    await test_db.flush()

    tour = Tour(season_id=season.id, name="Main Tour", playoff_spots=[2, 2])
    tier = Tier(
        season_id=season.id, name="Standard",
        points=[500, 300, 190, 135, 110], payouts=[2500, 1500, 950, 675, 550],
    )
    test_db.add_all([tour, tier])
    await test_db.flush()

    tournament = Tournament(
        season_id=season.id, tier_id=tier.id, name="Spring Open",
        start_date=datetime(2026, 4, 2, tzinfo=timezone.utc), status="upcoming",
    )
    test_db.add(tournament)

    member_ids = [uuid4() for _ in range(5)]
    cards = [
        TourCard(
            season_id=season.id, tour_id=tour.id, member_id=member_id,
            display_name=name, points=points,
        )
        for member_id, name, points in zip(
            member_ids,
            ["Ann", "Bo", "Cy", "Di", "Ed"],
            [400, 350, 300, 250, 200],
        )
    ]
    test_db.add_all(cards)

    for api_id in range(1, POOL_SIZE + 1):
        test_db.add(Golfer(api_id=api_id, player_name=f"Golfer {api_id}", world_rank=api_id))
    await test_db.flush()
    for api_id in range(1, POOL_SIZE + 1):
        test_db.add(TournamentGolfer(
            tournament_id=tournament.id, golfer_api_id=api_id,
            group=group_of(api_id),
        ))
    await test_db.commit()

    return SeededLeague(
        season_id=season.id,
        tour_id=tour.id,
        tier_id=tier.id,
        tournament_id=tournament.id,
        tour_card_ids=[c.id for c in cards],
        member_ids=member_ids,
    )
