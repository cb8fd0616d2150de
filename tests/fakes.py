"""In-memory stand-ins for the supabase client used by the store tests."""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError

# Tables whose "id" column is a caller-supplied primary key
_PRIMARY_KEY_TABLES = {"profiles"}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class FakeQuery:
    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table_name = table
        self.op = "select"
        self.columns: Optional[List[str]] = None
        self.filters: List[tuple] = []
        self.payload: Optional[Dict[str, Any]] = None
        self.on_conflict: Optional[str] = None
        self.single_mode: Optional[str] = None

    def select(self, columns: str = "*"):
        self.op = "select"
        if columns.strip() != "*":
            self.columns = [c.strip() for c in columns.split(",")]
        return self

    def eq(self, column: str, value: Any):
        self.filters.append((column, value))
        return self

    def single(self):
        self.single_mode = "single"
        return self

    def maybe_single(self):
        self.single_mode = "maybe"
        return self

    def insert(self, row: Dict[str, Any]):
        self.op = "insert"
        self.payload = row
        return self

    def upsert(self, row: Dict[str, Any], on_conflict: Optional[str] = None):
        self.op = "upsert"
        self.payload = row
        self.on_conflict = on_conflict
        return self

    def delete(self):
        self.op = "delete"
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(col) == val for col, val in self.filters)

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self.columns is None:
            return dict(row)
        return {c: row.get(c) for c in self.columns}

    def execute(self):
        self.store.calls.append((self.table_name, self.op))
        if self.store.fail_with is not None:
            raise self.store.fail_with
        rows = self.store.tables.setdefault(self.table_name, [])

        if self.op == "insert":
            if self.table_name in _PRIMARY_KEY_TABLES and any(r["id"] == self.payload.get("id") for r in rows):
                raise APIError({"message": "duplicate key value violates unique constraint",
                                "code": "23505", "hint": None, "details": None})
            row = {"id": str(uuid.uuid4()), "created_at": _now(), **self.payload}
            rows.append(row)
            return SimpleNamespace(data=[row])

        if self.op == "upsert":
            keys = [k.strip() for k in (self.on_conflict or "id").split(",")]
            for row in rows:
                if all(row.get(k) == self.payload.get(k) for k in keys):
                    row.update(self.payload)
                    row["updated_at"] = _now()
                    return SimpleNamespace(data=[row])
            row = {"id": str(uuid.uuid4()), "created_at": _now(), "updated_at": _now(), **self.payload}
            rows.append(row)
            return SimpleNamespace(data=[row])

        if self.op == "delete":
            removed = [r for r in rows if self._matches(r)]
            self.store.tables[self.table_name] = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=removed)

        found = [self._project(r) for r in rows if self._matches(r)]
        if self.single_mode == "maybe":
            # supabase-py returns None instead of a response when no row matches
            return SimpleNamespace(data=found[0]) if found else None
        if self.single_mode == "single":
            if len(found) != 1:
                raise APIError({"message": "JSON object requested, multiple (or no) rows returned",
                                "code": "PGRST116", "hint": None, "details": None})
            return SimpleNamespace(data=found[0])
        return SimpleNamespace(data=found)


class FakeAuth:
    """Email/password users held in memory; access tokens are opaque strings."""

    def __init__(self):
        self.users: Dict[str, Dict[str, Any]] = {}
        self.tokens: Dict[str, str] = {}

    def _user(self, record: Dict[str, Any]) -> SimpleNamespace:
        return SimpleNamespace(id=record["id"], email=record["email"], user_metadata=record["metadata"])

    def _session(self, record: Dict[str, Any]) -> SimpleNamespace:
        token = f"token-{uuid.uuid4().hex}"
        self.tokens[token] = record["email"]
        return SimpleNamespace(access_token=token)

    def sign_up(self, credentials: Dict[str, Any]):
        email = credentials["email"]
        if email in self.users:
            raise Exception("User already registered")
        record = {
            "id": str(uuid.uuid4()),
            "email": email,
            "password": credentials["password"],
            "metadata": dict(credentials.get("options", {}).get("data") or {}),
        }
        self.users[email] = record
        return SimpleNamespace(user=self._user(record), session=self._session(record))

    def sign_in_with_password(self, credentials: Dict[str, Any]):
        record = self.users.get(credentials["email"])
        if record is None or record["password"] != credentials["password"]:
            raise Exception("Invalid login credentials")
        return SimpleNamespace(user=self._user(record), session=self._session(record))

    def get_user(self, jwt: Optional[str] = None):
        email = self.tokens.get(jwt)
        if email is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=self._user(self.users[email]))


class FakeSupabase:
    def __init__(self, auth: Optional[FakeAuth] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.fail_with: Optional[Exception] = None
        self.auth = auth or FakeAuth()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)
