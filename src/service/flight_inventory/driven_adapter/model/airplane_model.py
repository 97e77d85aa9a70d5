from typing import Optional

from sqlalchemy import JSON, CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class AirplaneModel(Base):
    __tablename__ = 'airplane'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    airline_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('airline.id'), nullable=True
    )
    model_number: Mapped[str] = mapped_column(String(50), nullable=False)
    manufacturer: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    model: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_configuration: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    __table_args__ = (
        CheckConstraint('capacity >= 1 AND capacity <= 850', name='ck_airplane_capacity'),
    )
