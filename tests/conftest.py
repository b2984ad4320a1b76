import os
import time
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

os.environ["ENVIRONMENT"] = "test"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret"
os.environ.pop("DATABASE_URL", None)

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from postgrest.exceptions import APIError
from supabase import AuthError

from pointbet.core.supabase import get_optional_supabase, get_supabase
from pointbet.main import app

JWT_SECRET = "test-jwt-secret"
PASSWORD = "Password123!"


def make_token(sub, email="player@example.com", role=None, secret=JWT_SECRET,
               audience="authenticated", expires_in=3600):
    claims = {
        "sub": sub,
        "email": email,
        "aud": audience,
        "exp": int(time.time()) + expires_in,
        "app_metadata": {"role": role} if role else {},
    }
    return jwt.encode(claims, secret, algorithm="HS256")


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """In-memory stand-in for a PostgREST request builder."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.row_limit = None

    def select(self, *columns, count=None):
        self.op = "select"
        return self

    def insert(self, row):
        self.op = "insert"
        self.payload = row
        return self

    def update(self, changes):
        self.op = "update"
        self.payload = changes
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column, value):
        self.filters.append(lambda row: row.get(column) != value)
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def execute(self):
        hook = self.db.hooks.pop((self.table, self.op), None)
        if hook:
            hook()
        error = self.db.failures.get((self.table, self.op))
        if isinstance(error, Exception):
            raise error
        if error:
            raise APIError({"message": error, "code": "XX000"})

        rows = self.db.tables.setdefault(self.table, [])
        if self.op == "insert":
            row = dict(self.payload)
            row.setdefault("id", str(uuid.uuid4()))
            row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if all(f(row) for f in self.filters)]
        if self.op == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])

        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: row.get(column), reverse=desc)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return FakeResponse([dict(row) for row in matched], count=len(matched))


class FakeRpc:
    def __init__(self, db, name, params):
        self.db = db
        self.name = name
        self.params = params

    def execute(self):
        self.db.rpc_calls.append((self.name, self.params))
        error = self.db.failures.get(("rpc", self.name))
        if error:
            raise APIError({"message": error, "code": "P0001"})
        if self.name == "insert_user":
            row = {
                "id": str(uuid.uuid4()),
                "auth_id": self.params["p_auth_id"],
                "email": self.params["p_email"],
                "username": self.params["p_username"],
                "points_balance": self.params["p_points_balance"],
                "is_active": self.params["p_is_active"],
                "profile_image_url": None,
                "last_login_at": None,
                "created_at": datetime.now(timezone.utc).isoformat(),
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            self.db.tables.setdefault("users", []).append(row)
            return FakeResponse(dict(row))
        return FakeResponse(None)


class FakeAdmin:
    def __init__(self, auth):
        self.auth = auth
        self.deleted = []
        self.delete_error = None

    def delete_user(self, user_id):
        if self.delete_error:
            raise AuthError(self.delete_error, None)
        self.deleted.append(user_id)
        self.auth.accounts = {
            email: account for email, account in self.auth.accounts.items()
            if account["user"].id != user_id
        }


class FakeAuth:
    def __init__(self):
        self.accounts = {}
        self.admin = FakeAdmin(self)
        self.sign_up_error = None
        self.issued = {}

    def _session(self, user):
        token = make_token(user.id, user.email)
        self.issued[token] = user
        return SimpleNamespace(
            access_token=token,
            refresh_token="refresh-" + user.id,
            token_type="bearer",
            expires_in=3600,
            expires_at=int(time.time()) + 3600,
        )

    def sign_up(self, credentials):
        if self.sign_up_error:
            raise AuthError(self.sign_up_error, None)
        email = credentials["email"]
        if email in self.accounts:
            raise AuthError("User already registered", None)
        user = SimpleNamespace(
            id=str(uuid.uuid4()),
            email=email,
            app_metadata={},
            user_metadata=credentials.get("options", {}).get("data", {}),
        )
        self.accounts[email] = {"user": user, "password": credentials["password"]}
        return SimpleNamespace(user=user, session=self._session(user))

    def sign_in_with_password(self, credentials):
        account = self.accounts.get(credentials["email"])
        if not account or account["password"] != credentials["password"]:
            raise AuthError("Invalid login credentials", None)
        user = account["user"]
        return SimpleNamespace(user=user, session=self._session(user))

    def get_user(self, token):
        if token in self.issued:
            return SimpleNamespace(user=self.issued[token])
        raise AuthError("invalid JWT", None)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.failures = {}
        self.hooks = {}
        self.rpc_calls = []
        self.auth = FakeAuth()

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params=None):
        return FakeRpc(self, name, params or {})

    def fail(self, target, operation, message="database unavailable"):
        self.failures[(target, operation)] = message

    def before(self, target, operation, callback):
        """Run ``callback`` once, just before the next matching call executes."""
        self.hooks[(target, operation)] = callback

    def add_user(self, username="player_one", email="player@example.com",
                 password=PASSWORD, points_balance=1000, role=None):
        response = self.auth.sign_up({"email": email, "password": password})
        user = response.user
        if role:
            user.app_metadata = {"role": role}
        row = {
            "id": str(uuid.uuid4()),
            "auth_id": user.id,
            "email": email,
            "username": username,
            "points_balance": points_balance,
            "profile_image_url": None,
            "last_login_at": None,
            "is_active": True,
            "created_at": "2024-01-01T00:00:00+00:00",
            "updated_at": "2024-01-01T00:00:00+00:00",
        }
        self.tables.setdefault("users", []).append(row)
        return row

    def add_event(self, **overrides):
        row = {
            "id": str(uuid.uuid4()),
            "title": "Lions vs Tigers",
            "description": None,
            "category": "football",
            "image_url": None,
            "team_a": "Lions",
            "team_b": "Tigers",
            "team_a_score": None,
            "team_b_score": None,
            "start_time": "2030-05-01T18:00:00+00:00",
            "end_time": "2030-05-01T20:00:00+00:00",
            "is_featured": False,
            "status": "upcoming",
            "initial_odds_a": 1.8,
            "initial_odds_b": 2.2,
            "current_odds_a": 1.8,
            "current_odds_b": 2.2,
            "total_bets_a": 0,
            "total_bets_b": 0,
            "winner": None,
        }
        row.update(overrides)
        self.tables.setdefault("events", []).append(row)
        return row

    def rows(self, table):
        return self.tables.get(table, [])


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_supabase] = lambda: fake_db
    app.dependency_overrides[get_optional_supabase] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def player(fake_db):
    row = fake_db.add_user()
    return row, make_token(row["auth_id"], row["email"])


@pytest.fixture
def admin(fake_db):
    row = fake_db.add_user(username="house", email="admin@example.com", role="admin")
    return row, make_token(row["auth_id"], row["email"], role="admin")
