from sqlalchemy import Column, DateTime, String, Uuid

from chirpy_app.database.connection import Base


class User(Base):
    """
    A Chirpy account.

    Rows are written once on signup and only removed by the admin reset.
    id and timestamps are supplied by the service layer, not the database.
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    # unique=True makes a duplicate signup fail at the database
    email = Column(String, unique=True, nullable=False)
