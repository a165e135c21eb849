"""
EVPlanner - Map Model
Infrastructure planning diagrams placed over map tiles
"""
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from evplanner.database import Base, JSONText


class Map(Base):
    """
    Saved infrastructure diagram.

    Icons and connections are embedded as JSON lists rather than child rows.
    A connection's endpoints are icon ids inside the same map; the editor
    keeps them consistent, the table does not enforce it.
    """
    __tablename__ = "maps"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # [lat, lng]
    center: Mapped[List[float]] = mapped_column(JSONText(empty=None), nullable=False)
    layer: Mapped[str] = mapped_column(String(20), nullable=False, default="satellite")

    icons: Mapped[List[Dict[str, Any]]] = mapped_column(JSONText(), nullable=False, default=list)
    connections: Mapped[List[Dict[str, Any]]] = mapped_column(JSONText(), nullable=False, default=list)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Map(id={self.id}, name='{self.name}')>"
