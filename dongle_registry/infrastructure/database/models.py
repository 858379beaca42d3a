"""SQLAlchemy ORM models."""
from sqlalchemy import Boolean, Column, DateTime, Index, Integer, LargeBinary, String, Text

from .base import Base


class BindingRecord(Base):
    __tablename__ = "bindings"
    __table_args__ = (Index("uq_bindings_port_path", "port_path", unique=True),)

    # Surrogate key for the ORM; bindings are addressed by port path.
    id = Column(Integer, primary_key=True, autoincrement=True)
    physical_id = Column(String(64), nullable=False, index=True)
    subscriber_id = Column(String(64), nullable=False, default="")
    port_path = Column(String(255), nullable=False)
    is_symlinked = Column(Boolean, nullable=False, default=False)
    port_index = Column(Integer, nullable=False)
    identity = Column(Text, nullable=False, default="")
    properties = Column(LargeBinary)
    created_on = Column(DateTime(timezone=True), nullable=False)
    updated_on = Column(DateTime(timezone=True), nullable=False)
