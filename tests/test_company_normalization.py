"""
Unit tests for the company normalization data steps.
Runs against a hand-built pre-normalization jobs table in SQLite.
"""
import logging
import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from app.db.company_normalization import (
    UNASSIGNED_COMPANY_NAME,
    backfill_company_ids,
    collect_company_pairs,
    has_unassigned_jobs,
    insert_companies,
    resolve_companies,
    restore_company_columns,
)

TRICKY_NAME = "O'Brien & Sons\"; DROP TABLE jobs; --"


@pytest.fixture
def conn():
    engine = create_engine("sqlite://", poolclass=StaticPool)
    with engine.begin() as connection:
        connection.execute(text(
            "CREATE TABLE jobs (id INTEGER PRIMARY KEY, title VARCHAR(255), "
            "company VARCHAR(100), company_logo VARCHAR(500), company_id INTEGER)"
        ))
        connection.execute(text(
            "CREATE TABLE companies (id INTEGER PRIMARY KEY, name VARCHAR(255) NOT NULL UNIQUE, "
            "about TEXT, logo VARCHAR(500))"
        ))
        yield connection
    engine.dispose()


def add_jobs(conn, rows):
    conn.execute(
        text("INSERT INTO jobs (id, title, company, company_logo) VALUES (:id, :title, :company, :logo)"),
        [{"id": i, "title": f"Job {i}", "company": company, "logo": logo} for i, (company, logo) in enumerate(rows, 1)],
    )


def test_collect_pairs_distinct_in_first_seen_order(conn):
    add_jobs(conn, [("Acme", "acme.png"), ("Beta", None), ("Acme", "acme.png"), (None, None)])
    assert collect_company_pairs(conn) == [("Acme", "acme.png"), ("Beta", None)]


def test_resolve_first_non_null_logo_wins(caplog):
    caplog.set_level(logging.WARNING, logger="app.db.company_normalization")
    companies = resolve_companies([
        ("Acme", None),
        ("Acme", "first.png"),
        ("Acme", "second.png"),
        ("Beta", "beta.png"),
    ])

    assert list(companies.items()) == [("Acme", "first.png"), ("Beta", "beta.png")]
    assert any("Acme" in record.getMessage() for record in caplog.records)


def test_has_unassigned_jobs(conn):
    add_jobs(conn, [("Acme", None)])
    assert has_unassigned_jobs(conn) is False
    add_jobs_more = [{"id": 10, "title": "Orphan", "company": None, "logo": None}]
    conn.execute(text("INSERT INTO jobs (id, title, company, company_logo) VALUES (:id, :title, :company, :logo)"), add_jobs_more)
    assert has_unassigned_jobs(conn) is True


def test_insert_and_backfill(conn):
    add_jobs(conn, [("Acme", "acme.png"), (TRICKY_NAME, "x.png"), ("Acme", "acme.png")])
    companies = resolve_companies(collect_company_pairs(conn))
    mapping = insert_companies(conn, companies)

    assert set(mapping) == {"Acme", TRICKY_NAME}
    about = conn.execute(text("SELECT about FROM companies WHERE name = :n"), {"n": "Acme"}).scalar()
    assert about == "Company profile for Acme"

    backfill_company_ids(conn, mapping)
    rows = conn.execute(text("SELECT company, company_id FROM jobs ORDER BY id")).fetchall()
    for company, company_id in rows:
        assert company_id == mapping[company]
    # the tricky name was bound as a parameter, the table is still there
    assert conn.execute(text("SELECT COUNT(*) FROM jobs")).scalar() == 3


def test_backfill_uses_placeholder_for_jobs_without_company(conn):
    add_jobs(conn, [("Acme", None), (None, None)])
    companies = resolve_companies(collect_company_pairs(conn))
    companies.setdefault(UNASSIGNED_COMPANY_NAME, None)
    mapping = insert_companies(conn, companies)

    backfill_company_ids(conn, mapping)
    orphan_company = conn.execute(text("SELECT company_id FROM jobs WHERE company IS NULL")).scalar()
    assert orphan_company == mapping[UNASSIGNED_COMPANY_NAME]


def test_backfill_fails_when_a_job_stays_unlinked(conn):
    add_jobs(conn, [("Acme", None), (None, None)])
    mapping = insert_companies(conn, resolve_companies(collect_company_pairs(conn)))
    with pytest.raises(RuntimeError):
        backfill_company_ids(conn, mapping)


def test_restore_company_columns(conn):
    add_jobs(conn, [(TRICKY_NAME, "t.png"), (None, None)])
    companies = resolve_companies(collect_company_pairs(conn))
    companies.setdefault(UNASSIGNED_COMPANY_NAME, None)
    backfill_company_ids(conn, insert_companies(conn, companies))
    conn.execute(text("UPDATE jobs SET company = NULL, company_logo = NULL"))

    restore_company_columns(conn)

    rows = conn.execute(text("SELECT company, company_logo FROM jobs ORDER BY id")).fetchall()
    assert [tuple(row) for row in rows] == [(TRICKY_NAME, "t.png"), (None, None)]
