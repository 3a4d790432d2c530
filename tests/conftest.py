import os
import sys
import uuid
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

# Ensure predictable environment variables for tests before importing the app.
BASE_DIR = Path(__file__).resolve().parents[1]

if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-key")
os.environ.setdefault("AUTH_RATE_LIMIT", "1000/minute")
os.environ.setdefault("RATE_LIMIT", "1000/minute")
os.environ.setdefault("ENVIRONMENT", "test")

import portfolio.main as main  # noqa: E402  (import after env vars are set)
from portfolio.config import settings  # noqa: E402
from portfolio.core.dependencies import get_current_user  # noqa: E402
from portfolio.database.supabase_client import get_supabase, get_service_supabase  # noqa: E402
from portfolio.modules.auth.service import clear_auth_cache  # noqa: E402

TEST_PASSWORD = "Str0ng!Pass"
CREATED_AT = "2024-01-01T00:00:00+00:00"


class FakeQuery:
    """Chainable stand-in for the postgrest query builder over in-memory rows."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.action = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.max_rows = None

    def select(self, columns="*"):
        self.action = "select"
        return self

    def insert(self, rows):
        self.action = "insert"
        self.payload = rows
        return self

    def update(self, values):
        self.action = "update"
        self.payload = values
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row.get(column) >= value)
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.max_rows = count
        return self

    def _matching(self):
        return [row for row in self.db.rows(self.table) if all(f(row) for f in self.filters)]

    def execute(self):
        if self.action == "insert":
            rows = self.payload if isinstance(self.payload, list) else [self.payload]
            return SimpleNamespace(data=[dict(self.db.add_row(self.table, row)) for row in rows])
        if self.action == "update":
            matched = self._matching()
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched])
        if self.action == "delete":
            matched = self._matching()
            self.db.tables[self.table] = [
                row for row in self.db.rows(self.table) if not any(row is m for m in matched)
            ]
            return SimpleNamespace(data=[dict(row) for row in matched])

        rows = self._matching()
        if self.order_by:
            column, desc = self.order_by
            rows = sorted(
                rows,
                key=lambda row: (row.get(column) is None, row.get(column) if row.get(column) is not None else 0),
                reverse=desc,
            )
        if self.max_rows is not None:
            rows = rows[:self.max_rows]
        return SimpleNamespace(data=[dict(row) for row in rows])


class FakeBucket:
    def __init__(self, storage, name):
        self.objects = storage.buckets.setdefault(name, {})
        self.name = name

    def list(self, path="", options=None):
        options = options or {}
        prefix = path.strip("/")
        base = f"{prefix}/" if prefix else ""
        folders = set()
        files = []
        for key, obj in self.objects.items():
            if not key.startswith(base):
                continue
            rest = key[len(base):]
            if "/" in rest:
                folders.add(rest.split("/", 1)[0])
            else:
                files.append({
                    "name": rest,
                    "id": obj["id"],
                    "metadata": {"size": len(obj["content"]), "mimetype": obj["content_type"]},
                    "user_metadata": dict(obj["metadata"]),
                    "created_at": obj["created_at"],
                    "updated_at": obj["created_at"],
                })
        entries = [{"name": name, "id": None, "metadata": None} for name in folders] + files
        search = options.get("search")
        if search:
            entries = [e for e in entries if search in e["name"]]
        entries.sort(key=lambda e: e["name"])
        return entries[:options.get("limit", 100)]

    def upload(self, path, file, file_options=None):
        file_options = file_options or {}
        if path in self.objects and str(file_options.get("upsert", "false")).lower() != "true":
            raise Exception("The resource already exists")
        self.objects[path] = {
            "id": uuid.uuid4().hex,
            "content": file,
            "content_type": file_options.get("content-type", "application/octet-stream"),
            "metadata": dict(file_options.get("metadata") or {}),
            "created_at": CREATED_AT,
        }
        return SimpleNamespace(path=path)

    def update(self, path, file, file_options=None):
        if path not in self.objects:
            raise Exception("Object not found")
        file_options = file_options or {}
        self.objects[path]["content"] = file
        self.objects[path]["metadata"] = dict(file_options.get("metadata") or {})
        return SimpleNamespace(path=path)

    def download(self, path):
        if path not in self.objects:
            raise Exception("Object not found")
        return self.objects[path]["content"]

    def remove(self, paths):
        removed = [{"name": p} for p in paths if self.objects.pop(p, None) is not None]
        return removed

    def copy(self, from_path, to_path):
        if from_path not in self.objects:
            raise Exception("Object not found")
        self.objects[to_path] = {**self.objects[from_path], "id": uuid.uuid4().hex}
        return {"path": to_path}

    def get_public_url(self, path):
        return f"{settings.supabase_url}/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self):
        self.buckets = {}

    def from_(self, name):
        return FakeBucket(self, name)


class FakeAuthAdmin:
    def __init__(self, auth):
        self.auth = auth

    def update_user_by_id(self, uid, attributes):
        user = self.auth.users.get(uid)
        if user is None:
            raise Exception("User not found")
        if "email" in attributes:
            user["email"] = attributes["email"]
        if "password" in attributes:
            user["password"] = attributes["password"]
        if "user_metadata" in attributes:
            user["user_metadata"] = {**user["user_metadata"], **attributes["user_metadata"]}
        return SimpleNamespace(user=self.auth.as_user(user))


class FakeAuth:
    def __init__(self):
        self.users = {}
        self.tokens = {}
        self.admin = FakeAuthAdmin(self)

    @staticmethod
    def as_user(user):
        return SimpleNamespace(id=user["id"], email=user["email"], user_metadata=dict(user["user_metadata"]))

    def sign_in_with_password(self, credentials):
        for user in self.users.values():
            if user["email"] == credentials["email"] and user["password"] == credentials["password"]:
                token = f"token-{user['id']}"
                self.tokens[token] = user["id"]
                return SimpleNamespace(user=self.as_user(user), session=SimpleNamespace(access_token=token))
        raise Exception("Invalid login credentials")

    def get_user(self, jwt=None):
        auth_id = self.tokens.get(jwt)
        if auth_id is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=self.as_user(self.users[auth_id]))

    def sign_out(self):
        return None


class FakeSupabase:
    """In-memory double for the parts of supabase.Client the services use."""

    def __init__(self):
        self.tables = {}
        self.next_ids = {}
        self.storage = FakeStorage()
        self.auth = FakeAuth()

    def rows(self, table):
        return self.tables.setdefault(table, [])

    def add_row(self, table, values):
        row = dict(values)
        if row.get("id") is None:
            self.next_ids[table] = self.next_ids.get(table, 0) + 1
            row["id"] = self.next_ids[table]
        row.setdefault("created_at", CREATED_AT)
        self.rows(table).append(row)
        return row

    def table(self, name):
        return FakeQuery(self, name)

    def add_user(self, email, password=TEST_PASSWORD, role="admin", name="Test User"):
        """Create a Supabase Auth user and its users row"""
        auth_id = f"auth-{len(self.auth.users) + 1}"
        self.auth.users[auth_id] = {
            "id": auth_id,
            "email": email,
            "password": password,
            "user_metadata": {"name": name},
        }
        return self.add_row("users", {"name": name, "email": email, "role": role, "auth_id": auth_id})

    def put_object(self, key, content=b"data", content_type="application/pdf", metadata=None):
        self.storage.from_(settings.storage_bucket).upload(
            key, content, {"content-type": content_type, "metadata": metadata or {}, "upsert": "true"}
        )

    def objects(self):
        return self.storage.buckets.get(settings.storage_bucket, {})


def public_url(key):
    return f"{settings.storage_public_prefix}{key}"


@pytest.fixture()
def fake():
    return FakeSupabase()


@pytest.fixture()
def client(fake):
    """Provide a TestClient backed by the in-memory Supabase double."""
    main.app.dependency_overrides[get_supabase] = lambda: fake
    main.app.dependency_overrides[get_service_supabase] = lambda: fake
    clear_auth_cache()

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.clear()
    clear_auth_cache()


@pytest.fixture()
def login_as(fake):
    """Create a user with the given role and resolve every request to it."""
    def _login(role="admin", email=None, name="Test User"):
        email = email or f"{role}@example.com"
        row = fake.add_user(email, role=role, name=name)
        user = {"id": row["id"], "auth_id": row["auth_id"], "email": email, "name": name, "role": role}
        main.app.dependency_overrides[get_current_user] = lambda: user
        return user
    return _login
