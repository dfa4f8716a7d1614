from sqlalchemy import Column, String

from models.base_model import BaseModel, Base

GENDERS = ("Male", "Female", "Other")


class Author(BaseModel, Base):
    __tablename__ = "authors"

    fullname = Column(String(50), nullable=False, unique=True, index=True)
    country = Column(String(50), nullable=False)
    gender = Column(String(10), nullable=False)
    # Stored as given; no date format is enforced
    birthdate = Column(String(64), nullable=False)
