# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DuckDB-backed marketplace store.

Users, offices (real and subdivided) and contracts live in three tables.
Inserts go through a registered pandas DataFrame and a single
``INSERT ... SELECT`` with explicit casts; reads rebuild the typed entities.
Subdivisions are office rows whose ``parent_office_id`` is set.

Example:
    ```python
    from sora.persistence import Store

    with Store("sora.duckdb") as store:
        users = store.users()
        offices = store.leaf_offices()
        contracts = store.contracts_within(simulation.start, simulation.end)
    ```
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

import duckdb
import pandas as pd

from ..core.primitives import ContractId, RealOfficeId, SubdivisionId, UserId
from ..entities import Contract, Office, User

logger = logging.getLogger(__name__)

TABLES = ("users", "offices", "contracts")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id UUID PRIMARY KEY,
    created_at TIMESTAMP NOT NULL,              -- UTC, stored without zone
    first_name VARCHAR NOT NULL,
    last_name VARCHAR NOT NULL
);

CREATE TABLE IF NOT EXISTS offices (
    id UUID PRIMARY KEY,
    created_at TIMESTAMP NOT NULL,
    name VARCHAR NOT NULL,
    address VARCHAR NOT NULL,
    latitude DOUBLE NOT NULL,
    longitude DOUBLE NOT NULL,
    owner_id UUID NOT NULL,
    available_positions INTEGER NOT NULL,
    surface INTEGER NOT NULL,
    position_price INTEGER NOT NULL,            -- cents per seat per month
    parent_office_id UUID                       -- set for subdivisions only
);

CREATE TABLE IF NOT EXISTS contracts (
    id UUID PRIMARY KEY,
    created_at TIMESTAMP NOT NULL,
    host_id UUID NOT NULL,
    guest_id UUID NOT NULL,
    office_id UUID NOT NULL,
    rent BIGINT NOT NULL,                       -- cents per month
    start DATE NOT NULL,
    "end" DATE NOT NULL
);
"""

_OFFICE_COLUMNS = (
    "id, created_at, name, address, latitude, longitude, owner_id, "
    "available_positions, surface, position_price, parent_office_id"
)
_CONTRACT_COLUMNS = (
    "c.id, c.created_at, c.host_id, c.guest_id, c.office_id, "
    "c.rent, c.start, c.\"end\", o.parent_office_id IS NOT NULL AS is_subdivision"
)


def _to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _from_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _uuid(value) -> Optional[UUID]:
    if value is None:
        return None
    return value if isinstance(value, UUID) else UUID(str(value))


class Store:
    """
    Persistent store for the marketplace, backed by a DuckDB connection.

    Args:
        database: Path of the DuckDB file, or ``":memory:"``
    """

    def __init__(self, database: str = ":memory:"):
        self.database = database
        self.con = duckdb.connect(database=database, read_only=False)
        for statement in _SCHEMA.split(";"):
            if statement.strip():
                self.con.execute(statement)
        logger.debug(f"DuckDB store opened on '{database}'")

    def close(self) -> None:
        self.con.close()

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # --- Writes ---

    def reset(self) -> None:
        """Delete every contract, office and user."""
        for table in reversed(TABLES):
            self.con.execute(f"DELETE FROM {table}")
        logger.info("All existing data deleted")

    def add_users(self, users: Iterable[User]) -> int:
        frame = pd.DataFrame(
            [
                {
                    "id": str(user.id.uuid),
                    "created_at": _to_utc_naive(user.created_at),
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                }
                for user in users
            ],
            columns=["id", "created_at", "first_name", "last_name"],
        )
        return self._insert(
            frame,
            """
            INSERT INTO users
            SELECT id::UUID, created_at::TIMESTAMP, first_name::VARCHAR, last_name::VARCHAR
            FROM staging
            """,
        )

    def add_offices(self, offices: Iterable[Office]) -> int:
        frame = pd.DataFrame(
            [
                {
                    "id": str(office.id.uuid),
                    "created_at": _to_utc_naive(office.created_at),
                    "name": office.name,
                    "address": office.address,
                    "latitude": office.latitude,
                    "longitude": office.longitude,
                    "owner_id": str(office.owner.uuid),
                    "available_positions": office.available_positions,
                    "surface": office.surface,
                    "position_price": office.position_price,
                    "parent_office_id": (
                        str(office.parent_office.uuid) if office.parent_office else None
                    ),
                }
                for office in offices
            ],
            columns=[column.strip() for column in _OFFICE_COLUMNS.split(",")],
        )
        return self._insert(
            frame,
            """
            INSERT INTO offices
            SELECT
                id::UUID,
                created_at::TIMESTAMP,
                name::VARCHAR,
                address::VARCHAR,
                latitude::DOUBLE,
                longitude::DOUBLE,
                owner_id::UUID,
                available_positions::INTEGER,
                surface::INTEGER,
                position_price::INTEGER,
                CASE WHEN parent_office_id IS NOT NULL THEN parent_office_id::UUID ELSE NULL END
            FROM staging
            """,
        )

    def add_contracts(self, contracts: Iterable[Contract]) -> int:
        """Insert contracts, silently ignoring ids that already exist."""
        frame = pd.DataFrame(
            [
                {
                    "id": str(contract.id.uuid),
                    "created_at": _to_utc_naive(contract.created_at),
                    "host_id": str(contract.host.uuid),
                    "guest_id": str(contract.guest.uuid),
                    "office_id": str(contract.office.uuid),
                    "rent": contract.rent,
                    "start": contract.start.isoformat(),
                    "end": contract.end.isoformat(),
                }
                for contract in contracts
            ],
            columns=[
                "id", "created_at", "host_id", "guest_id",
                "office_id", "rent", "start", "end",
            ],
        )
        return self._insert(
            frame,
            """
            INSERT OR IGNORE INTO contracts
            SELECT
                id::UUID,
                created_at::TIMESTAMP,
                host_id::UUID,
                guest_id::UUID,
                office_id::UUID,
                rent::BIGINT,
                start::DATE,
                "end"::DATE
            FROM staging
            """,
        )

    def _insert(self, frame: pd.DataFrame, insert_sql: str) -> int:
        if frame.empty:
            return 0
        self.con.register("staging", frame)
        try:
            self.con.execute(insert_sql)
        finally:
            self.con.unregister("staging")
        logger.debug(f"Inserted {len(frame)} rows")
        return len(frame)

    # --- Reads ---

    def users(self) -> List[User]:
        rows = self.con.execute(
            "SELECT id, created_at, first_name, last_name FROM users ORDER BY id"
        ).fetchall()
        return [
            User(
                id=UserId(uuid=_uuid(row[0])),
                created_at=_from_utc_naive(row[1]),
                first_name=row[2],
                last_name=row[3],
            )
            for row in rows
        ]

    def offices(self) -> List[Office]:
        rows = self.con.execute(
            f"SELECT {_OFFICE_COLUMNS} FROM offices ORDER BY id"
        ).fetchall()
        return [self._office_from_row(row) for row in rows]

    def leaf_offices(self) -> List[Office]:
        """Rentable offices: real offices that were never split, plus all subdivisions."""
        rows = self.con.execute(
            f"""
            SELECT {_OFFICE_COLUMNS} FROM offices
            WHERE NOT EXISTS (
                SELECT sub.id FROM offices AS sub WHERE sub.parent_office_id = offices.id
            )
            ORDER BY id
            """
        ).fetchall()
        return [self._office_from_row(row) for row in rows]

    def contracts(self) -> List[Contract]:
        rows = self.con.execute(
            f"""
            SELECT {_CONTRACT_COLUMNS}
            FROM contracts AS c LEFT JOIN offices AS o ON o.id = c.office_id
            ORDER BY c.id
            """
        ).fetchall()
        return [self._contract_from_row(row) for row in rows]

    def contracts_within(self, start: date, end: date) -> List[Contract]:
        """Contracts lying entirely inside ``[start, end]``, ordered by start date."""
        rows = self.con.execute(
            f"""
            SELECT {_CONTRACT_COLUMNS}
            FROM contracts AS c LEFT JOIN offices AS o ON o.id = c.office_id
            WHERE c.start >= ?::DATE AND c."end" <= ?::DATE
            ORDER BY c.start, c.id
            """,
            [start.isoformat(), end.isoformat()],
        ).fetchall()
        return [self._contract_from_row(row) for row in rows]

    def count(self, table: str) -> int:
        self._check_table(table)
        return self.con.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    def table(self, table: str, condition: Optional[str] = None) -> pd.DataFrame:
        """Raw table content as a DataFrame, for display."""
        self._check_table(table)
        where = f"WHERE {condition}" if condition else ""
        return self.con.execute(f"SELECT * FROM {table} {where} ORDER BY id").df()

    def row(self, table: str, uuid: UUID) -> pd.DataFrame:
        self._check_table(table)
        return self.con.execute(
            f"SELECT * FROM {table} WHERE id = ?::UUID", [str(uuid)]
        ).df()

    @staticmethod
    def _check_table(table: str) -> None:
        if table not in TABLES:
            raise ValueError(f"Unknown table '{table}', expected one of {TABLES}")

    @staticmethod
    def _office_from_row(row: Sequence) -> Office:
        parent = _uuid(row[10])
        office_id = (
            SubdivisionId(uuid=_uuid(row[0]))
            if parent is not None
            else RealOfficeId(uuid=_uuid(row[0]))
        )
        return Office(
            id=office_id,
            created_at=_from_utc_naive(row[1]),
            name=row[2],
            address=row[3],
            latitude=row[4],
            longitude=row[5],
            owner=UserId(uuid=_uuid(row[6])),
            available_positions=row[7],
            surface=row[8],
            position_price=row[9],
            parent_office=RealOfficeId(uuid=parent) if parent is not None else None,
        )

    @staticmethod
    def _contract_from_row(row: Sequence) -> Contract:
        office_uuid = _uuid(row[4])
        office_id = (
            SubdivisionId(uuid=office_uuid) if row[8] else RealOfficeId(uuid=office_uuid)
        )
        return Contract(
            id=ContractId(uuid=_uuid(row[0])),
            created_at=_from_utc_naive(row[1]),
            host=UserId(uuid=_uuid(row[2])),
            guest=UserId(uuid=_uuid(row[3])),
            office=office_id,
            rent=row[5],
            start=row[6],
            end=row[7],
        )
