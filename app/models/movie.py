"""ORM model for catalog movies."""

from sqlalchemy import Column, Integer, String, Text

from app.models.base import Base, RecordMixin


class Movie(RecordMixin, Base):
    """One catalog entry. No uniqueness among movies; episode_id may repeat."""

    __tablename__ = "movies"

    title = Column(String(512), nullable=False)
    episode_id = Column(Integer, nullable=False)
    opening_crawl = Column(Text, nullable=False)
    director = Column(String(512), nullable=False)
    producer = Column(String(512), nullable=False)
    release_date = Column(String(64), nullable=False)
    url = Column(String(2048), nullable=False)
