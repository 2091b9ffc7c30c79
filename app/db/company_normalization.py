"""
Data steps of the company normalization migration.

Moves the company name/logo pairs embedded in ``jobs`` into the
``companies`` table and back. All statements are parameterized. The
schema changes around these steps live in the Alembic revision; the
functions here only read and write rows through a SQLAlchemy connection.
"""
import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)

# Owner of jobs that had no company before normalization
UNASSIGNED_COMPANY_NAME = "Unknown Company"

CompanyPair = Tuple[str, Optional[str]]


def collect_company_pairs(bind: Connection) -> List[CompanyPair]:
    """Distinct (company, company_logo) pairs in order of first appearance."""
    rows = bind.execute(text(
        "SELECT company, company_logo FROM jobs WHERE company IS NOT NULL ORDER BY id"
    )).fetchall()

    seen = set()
    pairs: List[CompanyPair] = []
    for company, logo in rows:
        if (company, logo) not in seen:
            seen.add((company, logo))
            pairs.append((company, logo))
    return pairs


def resolve_companies(pairs: Iterable[CompanyPair]) -> "OrderedDict[str, Optional[str]]":
    """
    Collapse pairs into one logo per company name.

    The first non-null logo seen wins. Names whose rows disagree on the
    logo are logged, since the discarded logos cannot be recovered.
    """
    companies: "OrderedDict[str, Optional[str]]" = OrderedDict()
    conflicts: Dict[str, set] = {}

    for name, logo in pairs:
        if name not in companies:
            companies[name] = logo
            continue
        current = companies[name]
        if current is None:
            companies[name] = logo
        elif logo is not None and logo != current:
            conflicts.setdefault(name, {current}).add(logo)

    for name, logos in conflicts.items():
        logger.warning(
            f"Company '{name}' has {len(logos)} different logos; keeping '{companies[name]}'"
        )
    return companies


def has_unassigned_jobs(bind: Connection) -> bool:
    return bool(bind.execute(text("SELECT COUNT(*) FROM jobs WHERE company IS NULL")).scalar())


def insert_companies(bind: Connection, companies: "OrderedDict[str, Optional[str]]") -> Dict[str, int]:
    """Insert one row per company and return the name -> id mapping."""
    if companies:
        bind.execute(
            text("INSERT INTO companies (name, about, logo) VALUES (:name, :about, :logo)"),
            [
                {"name": name, "about": f"Company profile for {name}", "logo": logo}
                for name, logo in companies.items()
            ],
        )

    rows = bind.execute(text("SELECT id, name FROM companies")).fetchall()
    mapping = {name: company_id for company_id, name in rows if name in companies}
    logger.info(f"Created {len(mapping)} companies from job rows")
    return mapping


def backfill_company_ids(bind: Connection, mapping: Dict[str, int]) -> None:
    """Point every job at the company row matching its old ``company`` string."""
    if mapping:
        bind.execute(
            text("UPDATE jobs SET company_id = :company_id WHERE company = :name"),
            [{"company_id": company_id, "name": name} for name, company_id in mapping.items()],
        )

    unassigned_id = mapping.get(UNASSIGNED_COMPANY_NAME)
    if unassigned_id is not None:
        bind.execute(
            text("UPDATE jobs SET company_id = :company_id WHERE company IS NULL"),
            {"company_id": unassigned_id},
        )

    missing = bind.execute(text("SELECT COUNT(*) FROM jobs WHERE company_id IS NULL")).scalar()
    if missing:
        raise RuntimeError(f"{missing} jobs could not be linked to a company")


def restore_company_columns(bind: Connection) -> None:
    """Copy company name/logo back onto jobs from the joined company row."""
    rows = bind.execute(text(
        "SELECT j.id, c.name, c.logo FROM jobs j JOIN companies c ON j.company_id = c.id"
    )).fetchall()
    if not rows:
        return

    bind.execute(
        text("UPDATE jobs SET company = :company, company_logo = :logo WHERE id = :id"),
        [
            {
                "id": job_id,
                "company": None if name == UNASSIGNED_COMPANY_NAME else name,
                "logo": logo,
            }
            for job_id, name, logo in rows
        ],
    )
    logger.info(f"Restored company columns on {len(rows)} jobs")
