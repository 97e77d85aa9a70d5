from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base

if TYPE_CHECKING:
    from src.service.flight_inventory.driven_adapter.model.airline_model import AirlineModel
    from src.service.flight_inventory.driven_adapter.model.airplane_model import AirplaneModel
    from src.service.flight_inventory.driven_adapter.model.airport_model import AirportModel


class FlightModel(Base):
    __tablename__ = 'flight'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_number: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    airline_id: Mapped[int] = mapped_column(Integer, ForeignKey('airline.id'), nullable=False)
    airplane_id: Mapped[int] = mapped_column(Integer, ForeignKey('airplane.id'), nullable=False)
    departure_airport_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('airport.id'), nullable=False
    )
    arrival_airport_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('airport.id'), nullable=False
    )
    departure_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    arrival_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    estimated_departure_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    estimated_arrival_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    actual_departure_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    actual_arrival_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    status: Mapped[str] = mapped_column(String(20), default='scheduled', nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default='USD', nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    gate: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    terminal: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    delay_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # Relationships
    airline: Mapped['AirlineModel'] = relationship('AirlineModel', lazy='selectin')
    airplane: Mapped['AirplaneModel'] = relationship('AirplaneModel', lazy='selectin')
    departure_airport: Mapped['AirportModel'] = relationship(
        'AirportModel', foreign_keys=[departure_airport_id], lazy='selectin'
    )
    arrival_airport: Mapped['AirportModel'] = relationship(
        'AirportModel', foreign_keys=[arrival_airport_id], lazy='selectin'
    )

    __table_args__ = (
        CheckConstraint('arrival_time > departure_time', name='ck_flight_time_sequence'),
        CheckConstraint(
            'available_seats >= 0 AND available_seats <= total_seats', name='ck_flight_seat_counts'
        ),
        CheckConstraint(
            'departure_airport_id <> arrival_airport_id', name='ck_flight_distinct_airports'
        ),
    )
