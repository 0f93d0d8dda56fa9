from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid

from chirpy_app.database.connection import Base


class Chirp(Base):
    """A short post. Body is stored already cleaned."""
    __tablename__ = "chirps"

    id = Column(Uuid, primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    body = Column(String, nullable=False)
    # Referential integrity is left to the database
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
