"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in migrations and table creation.
"""
from app.db.models.company import Company
from app.db.models.job import Job, JobType, JobStatus, Gender, ContractType
from app.db.models.book import Book, BookFormat, BookStatus
from app.db.models.category import BookCategory, ArticleCategory

# Explicitly export all models for clarity
__all__ = [
    "Company",
    "Job",
    "JobType",
    "JobStatus",
    "Gender",
    "ContractType",
    "Book",
    "BookFormat",
    "BookStatus",
    "BookCategory",
    "ArticleCategory",
]
