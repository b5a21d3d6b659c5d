from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from core.exceptions import (
    SlotConflictError,
    StoreUnavailableError,
    TableNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from crud import tables as crud_tables
from models.reservations import Reservation
from schemas.reservations import ReservationCreate
from schemas.tables import TableCreate
from services.reservation_service import ReservationService


def count_reservations(db) -> int:
    return len(db.exec(select(Reservation)).all())


class TestCreateReservation:
    @pytest.fixture
    def service(self, db):
        return ReservationService(db)

    @pytest.fixture
    def table(self, db):
        return crud_tables.create_table(db, TableCreate(id="T1", number=5, places=4, is_vip=False))

    @pytest.fixture
    def request_data(self):
        def _request(**overrides) -> ReservationCreate:
            data = {
                "tableNumber": 5,
                "clientName": "Bob",
                "phoneNumber": "555-0100",
                "date": "2024-06-01",
                "slotTimeStart": "18:00",
                "slotTimeEnd": "19:00",
            }
            data.update(overrides)
            return ReservationCreate(**data)

        return _request

    def test_books_free_slot(self, db, service, table, request_data):
        reservation_id = service.create_reservation(request_data(), "bob")

        stored = db.get(Reservation, reservation_id)
        assert stored.table_id == "T1"
        assert stored.table_number == 5
        assert stored.client_name == "Bob"
        assert stored.phone_number == "555-0100"
        assert stored.username == "bob"
        assert stored.date == "2024-06-01"
        assert stored.slot_time_start == "18:00"
        assert stored.slot_time_end == "19:00"
        assert stored.created_at is not None

    def test_identical_request_conflicts(self, db, service, table, request_data):
        service.create_reservation(request_data(), "bob")

        with pytest.raises(SlotConflictError):
            service.create_reservation(request_data(), "bob")

        assert count_reservations(db) == 1

    def test_slot_inside_existing_booking_conflicts(self, db, service, table, request_data):
        service.create_reservation(request_data(slotTimeStart="10:00", slotTimeEnd="11:00"), "bob")

        with pytest.raises(SlotConflictError):
            service.create_reservation(request_data(slotTimeStart="10:30", slotTimeEnd="10:45"), "alice")

    def test_slot_enclosing_existing_booking_conflicts(self, service, table, request_data):
        service.create_reservation(request_data(slotTimeStart="10:30", slotTimeEnd="10:45"), "bob")

        with pytest.raises(SlotConflictError):
            service.create_reservation(request_data(slotTimeStart="10:00", slotTimeEnd="11:00"), "alice")

    def test_slot_starting_when_existing_ends_conflicts(self, db, service, table, request_data):
        service.create_reservation(request_data(slotTimeStart="10:00", slotTimeEnd="11:00"), "bob")

        with pytest.raises(SlotConflictError):
            service.create_reservation(request_data(slotTimeStart="11:00", slotTimeEnd="12:00"), "alice")

        assert count_reservations(db) == 1

    def test_unpadded_times_are_compared_by_clock(self, db, service, table, request_data):
        service.create_reservation(request_data(slotTimeStart="9:00", slotTimeEnd="9:30"), "bob")

        with pytest.raises(SlotConflictError):
            service.create_reservation(request_data(slotTimeStart="09:15", slotTimeEnd="10:00"), "alice")

        assert db.exec(select(Reservation)).one().slot_time_start == "09:00"

    def test_later_slot_same_day_is_accepted(self, db, service, table, request_data):
        service.create_reservation(request_data(slotTimeStart="10:00", slotTimeEnd="11:00"), "bob")
        service.create_reservation(request_data(slotTimeStart="11:01", slotTimeEnd="12:00"), "alice")

        assert count_reservations(db) == 2

    def test_same_slot_other_date_or_table_is_accepted(self, db, service, table, request_data):
        crud_tables.create_table(db, TableCreate(number=6, places=2))
        service.create_reservation(request_data(), "bob")
        service.create_reservation(request_data(date="2024-06-02"), "bob")
        service.create_reservation(request_data(tableNumber=6), "bob")

        assert count_reservations(db) == 3

    def test_unknown_table(self, db, service, table, request_data):
        with pytest.raises(TableNotFoundError):
            service.create_reservation(request_data(tableNumber=99), "bob")

        assert count_reservations(db) == 0

    @pytest.mark.parametrize("field", ["tableNumber", "date", "slotTimeStart", "slotTimeEnd"])
    def test_missing_required_field(self, db, service, table, request_data, field):
        with pytest.raises(ValidationError, match=field):
            service.create_reservation(request_data(**{field: None}), "bob")

        assert count_reservations(db) == 0

    def test_blank_required_field(self, db, service, table, request_data):
        with pytest.raises(ValidationError, match="date"):
            service.create_reservation(request_data(date="  "), "bob")

    @pytest.mark.parametrize("overrides", [
        {"date": "01/06/2024"},
        {"slotTimeStart": "6pm"},
        {"slotTimeStart": "19:00", "slotTimeEnd": "18:00"},
        {"tableNumber": 0},
    ])
    def test_malformed_request(self, db, service, table, request_data, overrides):
        with pytest.raises(ValidationError):
            service.create_reservation(request_data(**overrides), "bob")

        assert count_reservations(db) == 0

    def test_missing_user_is_checked_before_fields(self, db, service, table, request_data):
        with pytest.raises(UnauthorizedError):
            service.create_reservation(request_data(tableNumber=None), None)

        assert count_reservations(db) == 0

    def test_store_failure_leaves_no_reservation(self, db, service, table, request_data):
        with patch(
            "services.reservation_service.crud_reservations.create_reservation",
            side_effect=OperationalError("INSERT", {}, Exception("disk I/O error")),
        ):
            with pytest.raises(StoreUnavailableError) as exc_info:
                service.create_reservation(request_data(), "bob")

        assert exc_info.value.status_code == 500
        assert "disk" not in exc_info.value.message
        assert count_reservations(db) == 0


class TestListReservations:
    @pytest.fixture
    def service(self, db):
        crud_tables.create_table(db, TableCreate(number=1, places=2))
        service = ReservationService(db)
        for username, start, end in [("alice", "12:00", "13:00"), ("bob", "14:00", "15:00"), ("alice", "16:00", "17:00")]:
            service.create_reservation(
                ReservationCreate(tableNumber=1, date="2024-06-01", slotTimeStart=start, slotTimeEnd=end),
                username,
            )
        return service

    def test_filter_by_user(self, service):
        reservations = service.list_reservations("bob", user="alice")
        assert [r.slot_time_start for r in reservations] == ["12:00", "16:00"]
        assert {r.username for r in reservations} == {"alice"}

    def test_without_filter_returns_all(self, service):
        assert len(service.list_reservations("bob")) == 3

    def test_requires_user(self, service):
        with pytest.raises(UnauthorizedError):
            service.list_reservations(None)

    def test_store_failure_is_rolled_back(self, db, service):
        with patch(
            "services.reservation_service.crud_reservations.list_reservations",
            side_effect=OperationalError("SELECT", {}, Exception("database is locked")),
        ), patch.object(db, "rollback", wraps=db.rollback) as rollback:
            with pytest.raises(StoreUnavailableError):
                service.list_reservations("bob")

        rollback.assert_called_once()
        assert len(service.list_reservations("bob")) == 3
