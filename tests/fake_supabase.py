# =============================================================================
# tests/fake_supabase.py - In-Memory Supabase Stand-In
# =============================================================================
# A small in-memory replacement for the parts of the supabase client the
# app uses: the PostgREST query builder, one storage bucket API and the
# password auth API. Installed by the fixtures in conftest.py.
# =============================================================================

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

NO_ROWS_MESSAGE = "JSON object requested, multiple (or no) rows returned (PGRST116)"
UNIQUE_VIOLATION_MESSAGE = (
    "{{'code': '23505', 'message': 'duplicate key value violates unique constraint "
    "\"{constraint}\"'}}"
)


class FakeAPIError(Exception):
    """Mimics postgrest.APIError closely enough for string matching."""


# =============================================================================
# Database
# =============================================================================

class FakeQuery:
    """Chainable query builder mirroring supabase's table() API."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.operation = "select"
        self.columns = "*"
        self.count_mode = None
        self.payload: Any = None
        self.filters: list[tuple[str, str, Any]] = []
        self.order_by: tuple[str, bool] | None = None
        self.limit_to: int | None = None
        self.want_single = False

    # Operations ---------------------------------------------------------

    def select(self, columns: str = "*", count: str | None = None):
        self.operation = "select"
        self.columns = columns
        self.count_mode = count
        return self

    def insert(self, data):
        self.operation = "insert"
        self.payload = data
        return self

    def update(self, data):
        self.operation = "update"
        self.payload = data
        return self

    def upsert(self, data):
        self.operation = "upsert"
        self.payload = data
        return self

    def delete(self):
        self.operation = "delete"
        return self

    # Modifiers ----------------------------------------------------------

    def eq(self, column: str, value: Any):
        self.filters.append(("eq", column, value))
        return self

    def in_(self, column: str, values: list[Any]):
        self.filters.append(("in", column, list(values)))
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def limit(self, count: int):
        self.limit_to = count
        return self

    def single(self):
        self.want_single = True
        return self

    # Execution ----------------------------------------------------------

    def _matches(self, row: dict) -> bool:
        for kind, column, value in self.filters:
            if kind == "eq" and row.get(column) != value:
                return False
            if kind == "in" and row.get(column) not in value:
                return False
        return True

    def _project(self, row: dict) -> dict:
        if self.columns.strip() == "*":
            return dict(row)
        wanted = [c.strip() for c in self.columns.split(",")]
        return {c: row.get(c) for c in wanted}

    def execute(self):
        if self.table in self.db.failing_tables:
            raise FakeAPIError(f"relation \"{self.table}\" is unavailable")

        rows = self.db.tables.setdefault(self.table, [])

        if self.operation == "select":
            found = [r for r in rows if self._matches(r)]
            if self.order_by:
                column, desc = self.order_by
                found.sort(key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
            if self.limit_to:
                found = found[: self.limit_to]
            data = [self._project(r) for r in found]
            if self.want_single:
                if len(data) != 1:
                    raise FakeAPIError(NO_ROWS_MESSAGE)
                return SimpleNamespace(data=data[0], count=None)
            count = len(data) if self.count_mode else None
            return SimpleNamespace(data=data, count=count)

        if self.operation in ("insert", "upsert"):
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            written = []
            for item in items:
                row = self.db.prepare_row(self.table, dict(item))
                existing = next((r for r in rows if r.get("id") == row["id"]), None)
                if existing is not None:
                    if self.operation == "insert":
                        raise FakeAPIError(UNIQUE_VIOLATION_MESSAGE.format(constraint=f"{self.table}_pkey"))
                for column in self.db.unique_columns.get(self.table, ()):
                    if any(r.get(column) == row.get(column) for r in rows if r is not existing):
                        raise FakeAPIError(UNIQUE_VIOLATION_MESSAGE.format(
                            constraint=f"{self.table}_{column}_key"
                        ))
                if existing is not None:
                    existing.update(row)
                    written.append(dict(existing))
                else:
                    rows.append(row)
                    written.append(dict(row))
            return SimpleNamespace(data=written, count=None)

        if self.operation == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(self.payload)
                    updated.append(dict(row))
            return SimpleNamespace(data=updated, count=None)

        if self.operation == "delete":
            deleted = [dict(r) for r in rows if self._matches(r)]
            self.db.tables[self.table] = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=deleted, count=None)

        raise AssertionError(f"Unknown operation {self.operation}")


# =============================================================================
# Storage
# =============================================================================

class FakeBucket:
    def __init__(self, storage: "FakeStorage", name: str):
        self.storage = storage
        self.name = name

    @property
    def files(self) -> dict[str, dict[str, Any]]:
        return self.storage.buckets.setdefault(self.name, {})

    def upload(self, path: str, file: bytes, file_options: dict | None = None):
        options = file_options or {}
        if path in self.files and options.get("upsert") != "true":
            raise FakeAPIError("The resource already exists")
        self.files[path] = {"content": file, "options": options}
        return SimpleNamespace(path=path)

    def download(self, path: str) -> bytes:
        if path not in self.files:
            raise FakeAPIError(f"Object not found: {path}")
        return self.files[path]["content"]

    def get_public_url(self, path: str) -> str:
        return f"https://test-project.supabase.co/storage/v1/object/public/{self.name}/{path}"

    def remove(self, paths: list[str]):
        return [{"name": p} for p in paths if self.files.pop(p, None) is not None]

    def list(self, path: str = ""):
        if self.storage.listing_fails:
            raise FakeAPIError("Bucket not found")
        prefix = f"{path.strip('/')}/" if path.strip("/") else ""
        entries: dict[str, dict[str, Any]] = {}
        for file_path in self.files:
            if not file_path.startswith(prefix):
                continue
            child, _, rest = file_path[len(prefix):].partition("/")
            if rest:
                entries.setdefault(child, {"name": child, "id": None, "metadata": None})
            else:
                entries[child] = {"name": child, "id": str(uuid4()), "metadata": {}}
        return list(entries.values())


class FakeStorage:
    def __init__(self):
        self.buckets: dict[str, dict[str, dict[str, Any]]] = {}
        self.listing_fails = False

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self, bucket)


# =============================================================================
# Auth
# =============================================================================

class FakeAdminAuth:
    def __init__(self):
        self.signed_out_tokens: list[str] = []
        self.fail = False

    def sign_out(self, jwt: str, scope: str = "global"):
        if self.fail:
            raise FakeAPIError("Auth service unavailable")
        self.signed_out_tokens.append(jwt)


class FakeAuth:
    def __init__(self):
        self.users: dict[str, dict[str, Any]] = {}
        self.admin = FakeAdminAuth()
        self.sign_out_calls = 0

    def add_user(self, email: str, password: str, app_metadata: dict | None = None) -> str:
        user_id = str(uuid4())
        self.users[email] = {
            "password": password,
            "user": SimpleNamespace(
                id=user_id,
                email=email,
                app_metadata=app_metadata or {},
                user_metadata={},
            ),
        }
        return user_id

    def sign_in_with_password(self, credentials: dict):
        entry = self.users.get(credentials.get("email"))
        if entry is None or entry["password"] != credentials.get("password"):
            raise FakeAPIError("Invalid login credentials")
        return SimpleNamespace(
            user=entry["user"],
            session=SimpleNamespace(access_token="access-token", refresh_token="refresh-token"),
        )

    def sign_out(self):
        self.sign_out_calls += 1


# =============================================================================
# Client
# =============================================================================

class FakeSupabase:
    """
    Stand-in for supabase.Client.

    Integer ids are assigned on insert when a row has none, and created_at
    is filled with strictly increasing timestamps so ordering is stable.
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.failing_tables: set[str] = set()
        self.unique_columns: dict[str, tuple[str, ...]] = {}
        self.storage = FakeStorage()
        self.auth = FakeAuth()
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def prepare_row(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        if row.get("id") is None:
            row["id"] = self._next_id
            self._next_id += 1
        if "created_at" not in row:
            self._clock += timedelta(seconds=1)
            row["created_at"] = self._clock.isoformat()
        return row

    def seed(self, table: str, *rows: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert rows directly, returning them as stored."""
        stored = [self.prepare_row(table, dict(row)) for row in rows]
        self.tables.setdefault(table, []).extend(stored)
        return [dict(row) for row in stored]
