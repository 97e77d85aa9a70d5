from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('flight.id'), nullable=False, index=True
    )
    seat_number: Mapped[str] = mapped_column(String(5), nullable=False)
    row: Mapped[int] = mapped_column(Integer, nullable=False)
    column: Mapped[str] = mapped_column(String(1), nullable=False)
    seat_class: Mapped[str] = mapped_column(String(20), nullable=False)
    seat_type: Mapped[str] = mapped_column(String(10), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    __table_args__ = (UniqueConstraint('flight_id', 'seat_number', name='uq_seat_flight_number'),)
