# parkingres

Record keeping for a car parking reservation system. It stores registered
cars and parking fines in a SQLite database.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Open a database with `parkingres.db.Database`. It takes a file path and
defaults to `":memory:"`. It works as a context manager and closes the
connection on exit. `create_schema()` creates the `user`, `Car` and `fines`
tables if they are not already there. Each statement is committed as soon
as it runs.

```python
from parkingres.db import Database
from parkingres.car import Car, next_car_id, user_exists
from parkingres.fine import (
    Fine,
    fine_history,
    format_history,
    next_fine_id,
    total_unpaid,
    unpaid_reason,
)

with Database("parking.db") as db:
    db.create_schema()
    db.execute("INSERT INTO user (UserID) VALUES (?)", ("U0000001",))

    if user_exists(db, "U0000001"):
        car = Car(
            car_id=next_car_id(db),
            user_id="U0000001",
            car_model="Hatchback",
            license_plate="TEST-0000",
            car_date="2024-01-15",
        )
        car.insert(db)

    fine = Fine(
        fine_id=next_fine_id(db),
        user_id="U0000001",
        amount=25.0,
        reason="Overstayed reserved slot",
        status="No",
        date="2024-01-16",
    )
    fine.insert(db)

    print(total_unpaid(db, "U0000001"))
    print(unpaid_reason(db, "U0000001"))
    print(format_history(fine_history(db, "U0000001")), end="")
```

`Database` also gives you lower-level access:

- `execute(query, params)` runs a statement and returns the number of rows it affected.
- `query(query, params)` returns all rows.
- `query_one(query, params)` returns the first row, or `None` if there is none.
- `last_insert_id()` returns the row id of the last insert.
- `close()` closes the connection.

### Identifiers

Car identifiers look like `C0000002` and fine identifiers like `F0000002`:
one letter followed by seven zero-padded digits. `next_car_id` and
`next_fine_id` read the highest stored identifier and add one to it. On an
empty table, counting starts from `C0000001` or `F0000001`, so the first
identifier handed out ends in `2`.

### Fines

A fine's status is `"No"` while it is unpaid, and this is the default for
`Fine`.

- `total_unpaid` adds up a user's unpaid amounts and returns `0.0` when there are none.
- `unpaid_reason` returns the reason of the first unpaid fine it finds, or `"Unknown"`.
- `fine_history` lists every fine a user has, paid or not, as `FineRecord` values.
- `format_history` renders a list of `FineRecord` values as text. Each record becomes `Fine Amount:`, `Reason:`, `Status:` and `Date:` lines, followed by a `----------` separator.

### Errors

When SQLite reports a failure, including a duplicate identifier on insert,
the package raises `parkingres.db.DatabaseError`. Using a closed
`Database` also raises `DatabaseError`. `next_car_id` and `next_fine_id`
raise `ValueError` if the highest stored identifier has no number after
its first letter.

## What it does not do

This package only stores and queries cars and fines. It does not include:

- a command or interactive menu;
- reservations or parking slots;
- user registration, login or payment handling.

The `user` table holds only user identifiers, and you fill it yourself.
Marking a fine as paid means updating its `FineStatus` through
`Database.execute`.