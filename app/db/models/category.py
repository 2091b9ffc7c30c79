from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.db.base import Base


class BookCategory(Base):
    __tablename__ = "book_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)


class ArticleCategory(Base):
    __tablename__ = "article_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)


# Seed data for the category tables
DEFAULT_BOOK_CATEGORIES = [
    "Science", "Mathematics", "History", "Literature", "Technology",
    "Education", "Health & Medicine", "Business", "Arts & Design", "Languages",
]

DEFAULT_ARTICLE_CATEGORIES = [
    "Research", "Technology", "Education", "Science", "Mathematics",
    "Health & Wellness", "Business", "Arts & Culture", "History",
    "Language & Literature", "News & Current Events", "Tutorials & How-to",
]
