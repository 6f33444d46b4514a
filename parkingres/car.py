"""Registered cars and their identifiers."""

from __future__ import annotations

from dataclasses import dataclass

from .db import Database

_DEFAULT_LATEST_ID = "C0000001"


@dataclass
class Car:
    """A car registered to a user."""

    car_id: str = ""
    user_id: str = ""
    car_model: str = ""
    license_plate: str = ""
    car_date: str = ""

    def insert(self, db: Database) -> bool:
        """Store the car; return True when a row was written."""
        count = db.execute(
            "INSERT INTO Car (CarID, UserID, CarModel, CarLicensePlate, CarDate) "
            "VALUES (?, ?, ?, ?, ?)",
            (self.car_id, self.user_id, self.car_model, self.license_plate, self.car_date),
        )
        return count > 0


def next_car_id(db: Database) -> str:
    """Return the identifier following the highest stored CarID."""
    row = db.query_one("SELECT CarID FROM Car ORDER BY CarID DESC LIMIT 1;")
    latest = row["CarID"] if row is not None else _DEFAULT_LATEST_ID
    try:
        number = int(latest[1:])
    except ValueError as exc:
        raise ValueError(f"Malformed car identifier: {latest!r}") from exc
    return f"C{number + 1:07d}"


def user_exists(db: Database, user_id: str) -> bool:
    """Return True when the user is present in the user table."""
    row = db.query_one("SELECT COUNT(*) FROM user WHERE UserID = ?;", (user_id,))
    return row is not None and row[0] > 0