"""
SQL builder tests
"""

import pytest

from esigma.database.mappers import QUESTION_OPTIONS_EMBED, USER_ROLE_EMBED
from esigma.database.query import (
    OrderBy,
    build_count,
    build_delete,
    build_insert,
    build_select,
    build_update,
)


class TestBuildSelect:
    """SELECT generation"""

    def test_ordered_select(self):
        query, params = build_select("roles", order_by=[OrderBy("level")])

        assert query == "SELECT t.* FROM roles t ORDER BY t.level ASC"
        assert params == []

    def test_filters_and_many_to_one_embed(self):
        query, params = build_select(
            "users",
            filters={"email": "admin@esigma.com", "is_active": True},
            embeds=[USER_ROLE_EMBED]
        )

        assert query == (
            "SELECT t.*, (SELECT row_to_json(j) FROM roles j "
            "WHERE j.id = t.role_id LIMIT 1) AS role "
            "FROM users t WHERE t.email = $1 AND t.is_active = $2"
        )
        assert params == ["admin@esigma.com", True]

    def test_one_to_many_embed_is_ordered_array(self):
        query, _ = build_select(
            "questions",
            filters={"section_id": "s1"},
            order_by=[OrderBy("question_order")],
            embeds=[QUESTION_OPTIONS_EMBED]
        )

        assert (
            "(SELECT COALESCE(json_agg(j ORDER BY j.option_order), '[]'::json) "
            "FROM question_options j WHERE j.question_id = t.id) AS options"
        ) in query
        assert query.endswith("WHERE t.section_id = $1 ORDER BY t.question_order ASC")

    def test_multiple_orderings(self):
        query, params = build_select(
            "surveys",
            order_by=[OrderBy("is_active", descending=True), OrderBy("created_at", descending=True)]
        )

        assert query == "SELECT t.* FROM surveys t ORDER BY t.is_active DESC, t.created_at DESC"
        assert params == []

    def test_null_filter_uses_is_null(self):
        query, params = build_select("certificates", filters={"valid_until": None})

        assert query.endswith("WHERE t.valid_until IS NULL")
        assert params == []

    def test_rejects_unsafe_identifier(self):
        with pytest.raises(ValueError):
            build_select("users; DROP TABLE users")


class TestBuildWrites:
    """INSERT / UPDATE / DELETE / COUNT generation"""

    def test_single_insert_returns_row(self):
        query, params = build_insert("roles", [{"name": "Auditor", "level": 5}])

        assert query == "INSERT INTO roles (name, level) VALUES ($1, $2) RETURNING *"
        assert params == ["Auditor", 5]

    def test_multi_row_insert_fills_missing_columns_with_default(self):
        query, params = build_insert("question_options", [
            {"text": "A", "option_order": 1},
            {"text": "B", "option_order": 2, "is_correct": True},
        ])

        assert query == (
            "INSERT INTO question_options (text, option_order, is_correct) "
            "VALUES ($1, $2, DEFAULT), ($3, $4, $5) RETURNING *"
        )
        assert params == ["A", 1, "B", 2, True]

    def test_insert_with_embed_wraps_in_cte(self):
        query, _ = build_insert("users", [{"email": "a@x.com"}], embeds=[USER_ROLE_EMBED])

        assert query.startswith(
            "WITH inserted AS (INSERT INTO users (email) VALUES ($1) RETURNING *) SELECT t.*, "
        )
        assert query.endswith("FROM inserted t")

    def test_insert_requires_rows(self):
        with pytest.raises(ValueError):
            build_insert("roles", [])

    def test_update(self):
        query, params = build_update("roles", {"name": "Admin", "description": "Root"}, {"id": "r1"})

        assert query == "UPDATE roles SET name = $1, description = $2 WHERE id = $3 RETURNING *"
        assert params == ["Admin", "Root", "r1"]

    def test_update_with_embed_wraps_in_cte(self):
        query, params = build_update("users", {"name": "N"}, {"id": "u1"}, embeds=[USER_ROLE_EMBED])

        assert query.startswith("WITH updated AS (UPDATE users SET name = $1 WHERE id = $2 RETURNING *)")
        assert "FROM updated t" in query
        assert params == ["N", "u1"]

    def test_update_requires_values_and_filters(self):
        with pytest.raises(ValueError):
            build_update("roles", {}, {"id": "r1"})
        with pytest.raises(ValueError):
            build_update("roles", {"name": "x"}, {})

    def test_delete(self):
        assert build_delete("users", {"id": "u1"}) == ("DELETE FROM users WHERE id = $1", ["u1"])

    def test_delete_requires_filter(self):
        with pytest.raises(ValueError):
            build_delete("users", {})

    def test_count(self):
        assert build_count("surveys") == ("SELECT COUNT(*) FROM surveys", [])
        assert build_count("users", {"is_active": True}) == (
            "SELECT COUNT(*) FROM users WHERE is_active = $1",
            [True],
        )
