"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Transaction Design:
-------------------
``create`` holds its INSERT inside a ``conn.transaction()`` block that stays
open while the caller's ``with`` body runs. The registration service sends
the activation email inside that body, so an email failure propagates
through the block and the INSERT is rolled back. The UNIQUE constraint on
``email`` is the authoritative duplicate check; concurrent signups that
both pass the service's pre-check are resolved here.

``activate`` is a single ``UPDATE ... RETURNING`` so token lookup and the
state flip cannot interleave with a concurrent activation.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from src.domain.exceptions import EmailAlreadyInUse
from src.domain.models import NewUser, User

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, username, email, password_hash, activation_token, inactive"


def _row_to_user(row: tuple) -> User:
    return User(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        activation_token=row[4],
        inactive=row[5],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> User | None:
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s"
        with self._pool.connection() as conn:
            row = conn.execute(sql, (email,)).fetchone()
        return _row_to_user(row) if row is not None else None

    @contextmanager
    def create(self, user: NewUser) -> Iterator[int]:
        """
        Insert an inactive user and keep the transaction open for the caller.

        Yields:
            The new user's id

        Raises:
            EmailAlreadyInUse: If the email UNIQUE constraint is violated
        """
        sql = """
            INSERT INTO users (username, email, password_hash, activation_token, inactive)
            VALUES (%s, %s, %s, %s, TRUE)
            RETURNING id
        """

        with self._pool.connection() as conn, conn.transaction():
            try:
                row = conn.execute(
                    sql,
                    (user.username, user.email, user.password_hash, user.activation_token),
                ).fetchone()
            except UniqueViolation as e:
                # Activation tokens are 128-bit random, so a collision here is the email
                raise EmailAlreadyInUse(user.email) from e
            yield row[0]

    def activate(self, token: str) -> int | None:
        sql = """
            UPDATE users
            SET inactive = FALSE, activation_token = NULL
            WHERE activation_token = %s
            RETURNING id
        """
        with self._pool.connection() as conn:
            row = conn.execute(sql, (token,)).fetchone()
            conn.commit()
        return row[0] if row is not None else None

    def count(self) -> int:
        with self._pool.connection() as conn:
            row = conn.execute("SELECT COUNT(*) FROM users").fetchone()
        return row[0]

    def delete_all(self) -> None:
        with self._pool.connection() as conn:
            conn.execute("DELETE FROM users")
            conn.commit()


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
