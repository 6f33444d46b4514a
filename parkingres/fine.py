"""Fines charged to users and their history."""

from __future__ import annotations

from dataclasses import dataclass

from .db import Database

_DEFAULT_LATEST_ID = "F0000001"
UNPAID = "No"


@dataclass
class Fine:
    """A fine charged to a user; status "No" means unpaid."""

    fine_id: str = ""
    user_id: str = ""
    amount: float = 0.0
    reason: str = ""
    status: str = UNPAID
    date: str = ""

    def insert(self, db: Database) -> bool:
        """Store the fine; return True when a row was written."""
        count = db.execute(
            "INSERT INTO fines (FineID, UserID, FineAmount, FineReason, FineStatus, FineDate) "
            "VALUES (?, ?, ?, ?, ?, ?);",
            (self.fine_id, self.user_id, float(self.amount), self.reason, self.status, self.date),
        )
        return count > 0


@dataclass(frozen=True)
class FineRecord:
    """One entry of a user's fine history."""

    amount: float
    reason: str
    status: str
    date: str


def next_fine_id(db: Database) -> str:
    """Return the identifier following the highest stored FineID."""
    row = db.query_one("SELECT FineID FROM fines ORDER BY FineID DESC LIMIT 1;")
    latest = row["FineID"] if row is not None else _DEFAULT_LATEST_ID
    try:
        number = int(latest[1:])
    except ValueError as exc:
        raise ValueError(f"Malformed fine identifier: {latest!r}") from exc
    return f"F{number + 1:07d}"


def total_unpaid(db: Database, user_id: str) -> float:
    """Return the sum of the user's unpaid fines."""
    row = db.query_one(
        "SELECT SUM(FineAmount) AS TotalFine FROM fines WHERE UserID = ? AND FineStatus = 'No';",
        (user_id,),
    )
    if row is None or row["TotalFine"] is None:
        return 0.0
    return float(row["TotalFine"])


def fine_history(db: Database, user_id: str) -> list[FineRecord]:
    """Return every fine charged to the user."""
    rows = db.query(
        "SELECT FineAmount, FineReason, FineStatus, FineDate FROM fines WHERE UserID = ?;",
        (user_id,),
    )
    return [
        FineRecord(float(r["FineAmount"]), r["FineReason"], r["FineStatus"], r["FineDate"])
        for r in rows
    ]


def format_history(records: list[FineRecord]) -> str:
    """Render fine records as the text block shown to the user."""
    return "".join(
        f"Fine Amount: {r.amount:g}\n"
        f"Reason: {r.reason}\n"
        f"Status: {r.status}\n"
        f"Date: {r.date}\n"
        "----------\n"
        for r in records
    )


def unpaid_reason(db: Database, user_id: str) -> str:
    """Return the reason of the user's first unpaid fine, or "Unknown"."""
    row = db.query_one(
        "SELECT FineReason FROM fines WHERE UserID = ? AND FineStatus = 'No';",
        (user_id,),
    )
    return "Unknown" if row is None else row["FineReason"]