import json

import pytest

from service.models.records import UserRecord


def make_user(email: str, *subscribers: str, created_at: str = None) -> UserRecord:
    return UserRecord(
        nick=email.split("@")[0].lower(),
        email=email,
        created_at=created_at or f"created-{email}",
        subscribers=[{"email": s, "created_at": f"created-{s}"} for s in subscribers],
    )


@pytest.fixture
def chain_users() -> list[UserRecord]:
    # B subscribed to A, C subscribed to B: edges B -> A, C -> B; D is isolated
    return [make_user("A", "B"), make_user("B", "C"), make_user("D")]


@pytest.fixture
def users_file(tmp_path):
    rows = [
        {"Nick": "a", "Email": "A", "Created_at": "2020-01-01", "Subscribers": [{"Email": "B", "Created_at": "2020-01-02"}]},
        {"Nick": "b", "Email": "B", "Created_at": "2020-01-02", "Subscribers": [{"Email": "C", "Created_at": "2020-01-03"}]},
        {"Nick": "c", "Email": "C", "Created_at": "2020-01-03", "Subscribers": []},
    ]
    path = tmp_path / "users.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path
