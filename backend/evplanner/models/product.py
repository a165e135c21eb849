"""
EVPlanner - Product Model
EV charging equipment catalog
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import String, DateTime, Text, Float, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from evplanner.database import Base, JSONText


class Product(Base):
    """
    Catalog item.

    `documents` is an ordered list of document titles kept as JSON text.
    Updates replace every field (PUT semantics), deletes are hard deletes.
    """
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cost: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="USD")
    rating: Mapped[str] = mapped_column(String(50), nullable=False)
    manufacturer: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    origin: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Technical / lifecycle data
    efficiency: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    lifetime: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    maintenance_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    footprint: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    nevi_eligible: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    documents: Mapped[List[str]] = mapped_column(JSONText(), nullable=True, default=list)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', manufacturer='{self.manufacturer}')>"
