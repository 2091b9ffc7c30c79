import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.sql import func
from app.db.base import Base


class BookFormat(str, enum.Enum):
    PDF = "pdf"
    EPUB = "epub"
    MOBI = "mobi"
    DOCX = "docx"
    TXT = "txt"
    HTML = "html"


class BookStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    PENDING_REVIEW = "pending_review"


class Book(Base):
    """
    Book model.

    Download and view counters were dropped from this table.
    """
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    language = Column(String(50), nullable=False, default="English")
    format = Column(Enum(BookFormat, name="book_format", values_callable=lambda e: [m.value for m in e]), default=BookFormat.PDF)
    status = Column(Enum(BookStatus, name="book_status", values_callable=lambda e: [m.value for m in e]), nullable=False, default=BookStatus.DRAFT)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Book(id={self.id}, title='{self.title}')>"
