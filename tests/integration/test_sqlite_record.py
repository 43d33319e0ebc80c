"""
Integration test: probes against a record backed by an in-memory SQLite
table through SQLAlchemy Core. Uniqueness is checked by querying the table,
so persist() really has to write the row.
"""

import copy
from typing import Any, Dict, Iterator, List

import pytest
from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    create_engine,
    func,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from recordprobe import (
    ProbeAssertionError,
    probe_max_length,
    probe_required,
    probe_uniqueness,
)

pytestmark = pytest.mark.integration

metadata = MetaData()
users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("email", String(64), nullable=False),
    Column("account_id", Integer, nullable=False),
    UniqueConstraint("email", "account_id"),
)


class SqlUserRecord:
    """Record adapter validating against the users table"""

    def __init__(self, engine: Engine, values: Dict[str, Any]) -> None:
        self.engine = engine
        self.values = copy.deepcopy(values)
        self.errors: Dict[str, List[str]] = {}

    def get(self, attribute: str) -> Any:
        return self.values.get(attribute)

    def set(self, attribute: str, value: Any) -> None:
        self.values[attribute] = value

    def is_valid(self) -> bool:
        self.errors = {}
        email = self.values.get("email")
        if email is None or not str(email).strip():
            self.errors.setdefault("email", []).append("can't be blank")
        elif len(email) > 64:
            self.errors.setdefault("email", []).append("is too long (maximum is 64 characters)")
        elif self._taken(email):
            self.errors.setdefault("email", []).append("has already been taken")
        return not self.errors

    def _taken(self, email: str) -> bool:
        query = (
            select(func.count())
            .select_from(users)
            .where(func.lower(users.c.email) == email.lower())
            .where(users.c.account_id == self.values.get("account_id"))
        )
        with self.engine.connect() as conn:
            return conn.execute(query).scalar_one() > 0

    def errors_for(self, attribute: str) -> str:
        return ", ".join(self.errors.get(attribute, []))

    def duplicate(self) -> "SqlUserRecord":
        return SqlUserRecord(self.engine, self.values)

    def persist(self) -> None:
        with self.engine.begin() as conn:
            conn.execute(insert(users).values(**self.values))


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine("sqlite://")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def record(engine: Engine) -> SqlUserRecord:
    return SqlUserRecord(engine, {"email": "dana@example.com", "account_id": 1})


def _row_count(engine: Engine) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(users)).scalar_one()


class TestSqliteRecord:
    """Probes on a database-backed record"""

    def test_required_and_length(self, record: SqlUserRecord) -> None:
        probe_required(record, "email")
        probe_max_length(record, "email", 64, options={"end_with": "@example.com"})
        assert record.get("email") == "dana@example.com"

    def test_scoped_uniqueness_writes_one_row(
        self, engine: Engine, record: SqlUserRecord
    ) -> None:
        probe_uniqueness(record, "email", options={"account_id": 2})
        assert _row_count(engine) == 1

    def test_wrong_limit_is_caught(self, record: SqlUserRecord) -> None:
        with pytest.raises(ProbeAssertionError, match="Should allow a string of 65"):
            probe_max_length(record, "email", 65)

    def test_persist_errors_propagate(self, engine: Engine) -> None:
        """A NOT NULL violation on persist is not turned into a probe failure"""
        record = SqlUserRecord(engine, {"email": "dana@example.com", "account_id": None})

        with pytest.raises(IntegrityError):
            probe_uniqueness(record, "email")

        assert _row_count(engine) == 0
