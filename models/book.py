from sqlalchemy import (
    Column,
    String,
    Integer,
    Boolean,
    Text,
    CheckConstraint,
    Index,
)

from models.base_model import BaseModel, Base

GENRES = ("Mystery", "Fantasy", "Biography", "History", "Self-Help")


class Book(BaseModel, Base):
    __tablename__ = "books"

    title = Column(String(200), nullable=False)
    # Free text; books do not reference Author records
    author = Column(String(100), nullable=False)
    # Uniqueness enforced here as well as in the handler pre-check
    isbn = Column(String(13), nullable=False, unique=True, index=True)
    genre = Column(String(20), nullable=False)
    publication_year = Column(Integer, nullable=False)
    pages = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)
    available = Column(Boolean, nullable=True)

    __table_args__ = (
        CheckConstraint("pages >= 1 AND pages <= 10000", name="ck_books_pages_range"),
        CheckConstraint("publication_year >= 1000", name="ck_books_publication_year_min"),
        Index("ix_books_genre", "genre"),
    )
