"""Alembic config: project database and a single linear revision chain."""

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory


ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def _config() -> Config:
    return Config(str(ALEMBIC_INI))


def test_default_url_is_league_database():
    url = _config().get_main_option("sqlalchemy.url")
    assert url.startswith("postgresql+asyncpg://")
    assert url.endswith("/fairway_league")


def test_script_location_resolves_from_any_cwd():
    script = ScriptDirectory.from_config(_config())
    assert Path(script.dir).resolve() == ALEMBIC_INI.parent / "alembic"


def test_revisions_form_one_chain():
    script = ScriptDirectory.from_config(_config())
    assert script.get_heads() == ["002_tour_card_stats"]
    assert [r.revision for r in script.walk_revisions()] == [
        "002_tour_card_stats", "001_initial",
    ]
