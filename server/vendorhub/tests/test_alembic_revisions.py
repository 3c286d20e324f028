import re
from pathlib import Path

from vendorhub.db import Base
from vendorhub import models  # noqa: F401

VERSIONS_DIR = Path(__file__).resolve().parents[2] / "alembic" / "versions"


def _read_revisions():
    revisions = {}
    for migration_file in VERSIONS_DIR.glob("*.py"):
        text = migration_file.read_text(encoding="utf-8")
        revision = re.search(r'^revision = "([^"]+)"', text, re.MULTILINE)
        down = re.search(r'^down_revision = (None|"[^"]+")', text, re.MULTILINE)
        if revision:
            revisions[revision.group(1)] = (migration_file.name, down.group(1).strip('"') if down else None, text)
    return revisions


def test_revision_ids_fit_postgres_version_column():
    too_long = [(name, rev) for rev, (name, _, _) in _read_revisions().items() if len(rev) > 32]

    assert not too_long, f"Alembic revision IDs must be <= 32 chars: {too_long}"


def test_revisions_form_a_single_chain():
    revisions = _read_revisions()
    roots = [rev for rev, (_, down, _) in revisions.items() if down == "None"]
    parents = [down for _, down, _ in revisions.values() if down != "None"]

    assert len(roots) == 1
    assert len(parents) == len(set(parents))
    assert set(parents) <= set(revisions)


def test_migrations_create_every_mapped_table():
    created = set()
    for _, _, text in _read_revisions().values():
        created.update(re.findall(r'op\.create_table\(\s*"([^"]+)"', text))

    assert created == set(Base.metadata.tables)
