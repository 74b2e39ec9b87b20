from types import SimpleNamespace

import pytest

from models.setting import Setting
from models.user import MS_PER_HOUR, UserUpdate, activity_score, resolve_user_id


@pytest.mark.parametrize(
    "identifier, expected",
    [
        (42, 42),
        ("42", 42),
        (-100123, -100123),
        ({"id": 5}, 5),
        ({"uid": 7}, 7),
        ({"id": None, "uid": 8}, 8),
        ({"id": 9, "uid": 10}, 9),
        (SimpleNamespace(id=11, first_name="Ann"), 11),
        (SimpleNamespace(uid=12), 12),
    ],
)
def test_resolve_user_id_accepts_ids_and_records(identifier, expected):
    assert resolve_user_id(identifier) == expected


@pytest.mark.parametrize(
    "identifier",
    [None, 0, "", "abc", "--5", "²", "-", True, {}, {"name": "x"}, {"id": 0, "uid": ""}, SimpleNamespace(name="x")],
)
def test_resolve_user_id_rejects_unusable(identifier):
    assert resolve_user_id(identifier) is None


def test_activity_score_is_messages_per_hour():
    assert activity_score(4, 0, 2 * MS_PER_HOUR) == 2.0


def test_activity_score_floors_elapsed_time():
    # registered this instant: 1 message / 0.01 h
    assert activity_score(1, 1000, 1000) == pytest.approx(100.0)


def test_user_update_only_last_seen():
    sql, params = UserUpdate(last_seen=123).to_sql(42)
    assert sql == "UPDATE users SET last_seen = %s, updated_at = CURRENT_TIMESTAMP WHERE id = %s;"
    assert params == (123, 42)


def test_user_update_skips_unchanged_or_empty_username():
    assert UserUpdate(last_seen=1).with_username("bob", "bob").username is None
    assert UserUpdate(last_seen=1).with_username("bob", "").username is None
    assert UserUpdate(last_seen=1).with_username("bob", None).username is None
    assert UserUpdate(last_seen=1).with_username("bob", "alice").username == "alice"


def test_user_update_activity_columns():
    now = 3 * MS_PER_HOUR
    update = UserUpdate(last_seen=now).with_activity(None, 0)
    sql, params = update.to_sql(1)
    assert "message_count = %s" in sql
    assert "activity_score = %s" in sql
    assert "username" not in sql
    assert params == (now, 1, pytest.approx(1 / 3), 1)


def test_setting_as_int():
    assert Setting("k", "15").as_int() == 15
    assert Setting("k", "nope").as_int() == 0
    assert Setting("k", "").as_int(default=3) == 3


@pytest.mark.parametrize("value, expected", [("5abc", 5), ("3.7", 3), (" -2", -2), ("+4", 4)])
def test_setting_as_int_uses_leading_integer(value, expected):
    assert Setting("k", value).as_int() == expected
