import pytest

from parkingres.db import Database, DatabaseError
from parkingres.fine import (
    Fine,
    FineRecord,
    fine_history,
    format_history,
    next_fine_id,
    total_unpaid,
    unpaid_reason,
)


@pytest.fixture
def db():
    with Database() as database:
        database.create_schema()
        yield database


def test_default_status_is_unpaid():
    fine = Fine()
    assert fine.status == "No"
    assert fine.amount == 0.0


def test_insert_and_history_round_trip(db):
    Fine("F0000002", "U1", 12.5, "Overstay", "No", "2024-01-01").insert(db)
    Fine("F0000003", "U1", 30.0, "Wrong bay", "Yes", "2024-01-02").insert(db)
    Fine("F0000004", "U2", 7.0, "Overstay", "No", "2024-01-03").insert(db)
    assert fine_history(db, "U1") == [
        FineRecord(12.5, "Overstay", "No", "2024-01-01"),
        FineRecord(30.0, "Wrong bay", "Yes", "2024-01-02"),
    ]


def test_duplicate_insert_raises(db):
    Fine("F0000002", "U1", 1.0).insert(db)
    with pytest.raises(DatabaseError):
        Fine("F0000002", "U1", 2.0).insert(db)


def test_next_id_on_empty_table(db):
    assert next_fine_id(db) == "F0000002"


def test_next_id_is_unused_after_insert(db):
    for _ in range(3):
        new_id = next_fine_id(db)
        existing = {row["FineID"] for row in db.query("SELECT FineID FROM fines")}
        assert new_id not in existing
        assert len(new_id) == 8 and new_id.startswith("F")
        Fine(new_id, "U1", 5.0).insert(db)
    assert len(fine_history(db, "U1")) == 3


def test_next_id_malformed_raises(db):
    Fine("Fbad", "U1").insert(db)
    with pytest.raises(ValueError):
        next_fine_id(db)


def test_total_unpaid_ignores_paid_and_other_users(db):
    Fine("F0000002", "U1", 10.5, "Overstay", "No").insert(db)
    Fine("F0000003", "U1", 4.5, "Overstay", "No").insert(db)
    Fine("F0000004", "U1", 100.0, "Overstay", "Yes").insert(db)
    Fine("F0000005", "U2", 50.0, "Overstay", "No").insert(db)
    assert total_unpaid(db, "U1") == pytest.approx(15.0)


def test_total_unpaid_without_fines(db):
    assert total_unpaid(db, "U1") == 0.0


def test_total_unpaid_matches_history(db):
    Fine("F0000002", "U1", 3.25, "A", "No").insert(db)
    Fine("F0000003", "U1", 8.75, "B", "Yes").insert(db)
    Fine("F0000004", "U1", 1.5, "C", "No").insert(db)
    unpaid = [r.amount for r in fine_history(db, "U1") if r.status == "No"]
    assert total_unpaid(db, "U1") == pytest.approx(sum(unpaid))


def test_unpaid_reason(db):
    Fine("F0000002", "U1", 10.0, "Paid already", "Yes").insert(db)
    Fine("F0000003", "U1", 10.0, "Overstay", "No").insert(db)
    assert unpaid_reason(db, "U1") == "Overstay"


def test_unpaid_reason_defaults_to_unknown(db):
    Fine("F0000002", "U1", 10.0, "Paid already", "Yes").insert(db)
    assert unpaid_reason(db, "U1") == "Unknown"


def test_format_history_single_record():
    text = format_history([FineRecord(50.0, "Overstay", "No", "2024-01-01")])
    assert text == "Fine Amount: 50\nReason: Overstay\nStatus: No\nDate: 2024-01-01\n----------\n"


def test_format_history_one_block_per_record(db):
    Fine("F0000002", "U1", 12.5, "Overstay", "No", "2024-01-01").insert(db)
    Fine("F0000003", "U1", 30.0, "Wrong bay", "Yes", "2024-01-02").insert(db)
    text = format_history(fine_history(db, "U1"))
    assert text.count("----------\n") == 2
    assert "Reason: Wrong bay\n" in text
    assert "Fine Amount: 12.5\n" in text


def test_format_history_empty():
    assert format_history([]) == ""