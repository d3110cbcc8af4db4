"""PostgreSQL implementation of the storage gateway."""

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Generator, List, Optional, Tuple
from uuid import UUID

import psycopg
from psycopg.errors import UniqueViolation

from ..errors import Conflict, DatabaseConnectionError, NotFound, StorageError
from ..models import Feed, FeedFollow, Post, User
from .connection import get_connection
from .gateway import Gateway

# Unique constraint name -> (entity, field)
UNIQUE_CONSTRAINTS: Dict[str, Tuple[str, str]] = {
    "users_name_key": ("user", "name"),
    "feeds_url_key": ("feed", "url"),
    "feed_follows_user_id_feed_id_key": ("follow", "feed"),
    "posts_url_key": ("post", "url"),
}


def conflict_from_violation(error: UniqueViolation, value: Optional[str] = None) -> Conflict:
    """Translate a unique violation into a Conflict naming the clashing field."""
    constraint = getattr(error.diag, "constraint_name", None)
    entity, field = UNIQUE_CONSTRAINTS.get(constraint, ("record", constraint or "key"))
    return Conflict(entity, field, value)


class PostgresGateway(Gateway):
    """Gateway backed by the pooled psycopg connection."""

    def __init__(self, db_config: Dict[str, Any]) -> None:
        """Initialize gateway with the database configuration dict."""
        self.db_config = db_config

    @contextmanager
    def _cursor(self, conflict_value: Optional[str] = None) -> Generator[psycopg.Cursor, None, None]:
        """Yield a cursor inside one transaction, translating driver errors."""
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    yield cur
        except UniqueViolation as e:
            raise conflict_from_violation(e, conflict_value) from e
        except psycopg.OperationalError as e:
            raise DatabaseConnectionError(f"Database unavailable: {e}") from e
        except psycopg.Error as e:
            raise StorageError(f"Database error: {e}") from e

    # Users

    def get_user_by_name(self, name: str) -> User:
        with self._cursor() as cur:
            cur.execute("SELECT * FROM users WHERE name = %s", (name,))
            row = cur.fetchone()
        if row is None:
            raise NotFound("user", name)
        return User(**row)

    def create_user(self, id: UUID, created_at: datetime, updated_at: datetime, name: str) -> User:
        with self._cursor(conflict_value=name) as cur:
            cur.execute(
                """
                INSERT INTO users (id, created_at, updated_at, name)
                VALUES (%s, %s, %s, %s)
                RETURNING *
                """,
                (id, created_at, updated_at, name),
            )
            row = cur.fetchone()
        return User(**row)

    def delete_all_users(self) -> None:
        with self._cursor() as cur:
            cur.execute("DELETE FROM users")

    def list_users(self) -> List[User]:
        with self._cursor() as cur:
            cur.execute("SELECT * FROM users ORDER BY name")
            rows = cur.fetchall()
        return [User(**row) for row in rows]

    # Feeds

    def create_feed(
        self,
        id: UUID,
        created_at: datetime,
        updated_at: datetime,
        name: str,
        url: str,
        user_id: UUID,
    ) -> Feed:
        with self._cursor(conflict_value=url) as cur:
            cur.execute(
                """
                INSERT INTO feeds (id, created_at, updated_at, name, url, user_id)
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING *
                """,
                (id, created_at, updated_at, name, url, user_id),
            )
            row = cur.fetchone()
        return Feed(**row)

    def list_feeds(self) -> List[Feed]:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT feeds.*, users.name AS user_name
                FROM feeds
                JOIN users ON users.id = feeds.user_id
                ORDER BY feeds.created_at, feeds.id
                """
            )
            rows = cur.fetchall()
        return [Feed(**row) for row in rows]

    def get_feed_by_url(self, url: str) -> Feed:
        with self._cursor() as cur:
            cur.execute("SELECT * FROM feeds WHERE url = %s", (url,))
            row = cur.fetchone()
        if row is None:
            raise NotFound("feed", url)
        return Feed(**row)

    def get_next_feed_to_fetch(self) -> Optional[Feed]:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT * FROM feeds
                ORDER BY last_fetched_at ASC NULLS FIRST, created_at ASC, id ASC
                LIMIT 1
                """
            )
            row = cur.fetchone()
        return Feed(**row) if row else None

    def mark_feed_fetched(self, id: UUID, fetched_at: datetime) -> None:
        with self._cursor() as cur:
            # GREATEST ignores NULL, and keeps the stamp from moving backwards
            cur.execute(
                """
                UPDATE feeds
                SET last_fetched_at = GREATEST(last_fetched_at, %s),
                    updated_at = %s
                WHERE id = %s
                """,
                (fetched_at, fetched_at, id),
            )

    # Follows

    def create_follow(
        self,
        id: UUID,
        created_at: datetime,
        updated_at: datetime,
        user_id: UUID,
        feed_id: UUID,
    ) -> FeedFollow:
        with self._cursor() as cur:
            cur.execute(
                """
                WITH inserted AS (
                    INSERT INTO feed_follows (id, created_at, updated_at, user_id, feed_id)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING *
                )
                SELECT inserted.*, feeds.name AS feed_name, users.name AS user_name
                FROM inserted
                JOIN feeds ON feeds.id = inserted.feed_id
                JOIN users ON users.id = inserted.user_id
                """,
                (id, created_at, updated_at, user_id, feed_id),
            )
            row = cur.fetchone()
        return FeedFollow(**row)

    def list_follows_for_user(self, user_id: UUID) -> List[FeedFollow]:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT feed_follows.*, feeds.name AS feed_name, users.name AS user_name
                FROM feed_follows
                JOIN feeds ON feeds.id = feed_follows.feed_id
                JOIN users ON users.id = feed_follows.user_id
                WHERE feed_follows.user_id = %s
                ORDER BY feed_follows.created_at, feeds.name
                """,
                (user_id,),
            )
            rows = cur.fetchall()
        return [FeedFollow(**row) for row in rows]

    def delete_follows_for_user(self, user_id: UUID, feed_url: str) -> int:
        with self._cursor() as cur:
            cur.execute(
                """
                DELETE FROM feed_follows
                USING feeds
                WHERE feed_follows.feed_id = feeds.id
                  AND feed_follows.user_id = %s
                  AND feeds.url = %s
                """,
                (user_id, feed_url),
            )
            return cur.rowcount

    # Posts

    def create_post(
        self,
        id: UUID,
        created_at: datetime,
        updated_at: datetime,
        title: str,
        url: str,
        description: Optional[str],
        published_at: datetime,
        feed_id: UUID,
    ) -> Post:
        with self._cursor(conflict_value=url) as cur:
            cur.execute(
                """
                INSERT INTO posts (
                    id, created_at, updated_at, title, url,
                    description, published_at, feed_id
                ) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                RETURNING *
                """,
                (id, created_at, updated_at, title, url, description, published_at, feed_id),
            )
            row = cur.fetchone()
        return Post(**row)

    def list_recent_posts_for_user(self, user_id: UUID, limit: int) -> List[Post]:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT posts.*, feeds.name AS feed_name
                FROM posts
                JOIN feed_follows ON feed_follows.feed_id = posts.feed_id
                JOIN feeds ON feeds.id = posts.feed_id
                WHERE feed_follows.user_id = %s
                ORDER BY posts.published_at DESC, posts.created_at DESC
                LIMIT %s
                """,
                (user_id, limit),
            )
            rows = cur.fetchall()
        return [Post(**row) for row in rows]
