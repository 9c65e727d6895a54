import pytest

from app.database.query_builder import bind_named


def test_binds_in_order_of_appearance():
    query, values = bind_named(
        "SELECT * FROM t WHERE a = :a AND b = :b", {"b": 2, "a": 1}
    )

    assert query == "SELECT * FROM t WHERE a = $1 AND b = $2"
    assert values == [1, 2]


def test_repeated_name_reuses_slot():
    query, values = bind_named("WHERE x = :id OR y = :id", {"id": "g-1"})

    assert query == "WHERE x = $1 OR y = $1"
    assert values == ["g-1"]


def test_prefix_names_do_not_collide():
    query, values = bind_named(
        "SET email = :email, email_verified = :email_verified",
        {"email": "a@b.c", "email_verified": True},
    )

    assert query == "SET email = $1, email_verified = $2"
    assert values == ["a@b.c", True]


def test_type_casts_are_untouched():
    query, values = bind_named("SELECT :id::text", {"id": "u-1"})

    assert query == "SELECT $1::text"
    assert values == ["u-1"]


def test_missing_parameter_raises():
    with pytest.raises(ValueError, match="Missing parameter: user_id"):
        bind_named("WHERE id = :user_id", {})
