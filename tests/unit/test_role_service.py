"""
Role management tests
"""

import pytest

from esigma.database.connection import DatabaseError
from esigma.database.query import OrderBy
from esigma.models.enums import ErrorType
from esigma.services.base_service import NOT_CONFIGURED_MESSAGE
from esigma.services.role_service import NEW_ROLE_LEVEL, RoleService


class TestDemoMode:

    @pytest.mark.asyncio
    async def test_list_is_empty(self):
        result = await RoleService().get_roles()

        assert result.success is True
        assert result.data == []

    @pytest.mark.asyncio
    async def test_menu_access_refused(self):
        result = await RoleService().update_role_menu_access("role-1", ["dashboard"])

        assert result.success is False
        assert result.message == NOT_CONFIGURED_MESSAGE


class TestRoleOperations:

    @pytest.mark.asyncio
    async def test_get_roles_ordered_by_level(self, db, role_row):
        db.select.return_value = [role_row, {**role_row, "id": "role-5", "name": "Enumerator", "level": 5}]

        result = await RoleService(db).get_roles()

        assert result.success is True
        assert [role.level for role in result.data] == [1, 5]
        db.select.assert_awaited_once_with("roles", order_by=[OrderBy("level")])

    @pytest.mark.asyncio
    async def test_create_role_defaults(self, db, role_row):
        db.insert.return_value = {**role_row, "name": "Auditor", "level": NEW_ROLE_LEVEL, "menu_access": []}

        result = await RoleService(db).create_role({"name": "Auditor", "description": "Reviews results"})

        assert result.success is True
        assert result.data.level == 5
        db.insert.assert_awaited_once_with("roles", {
            "name": "Auditor",
            "description": "Reviews results",
            "level": 5,
            "is_active": True,
        })

    @pytest.mark.asyncio
    async def test_update_preserves_level(self, db, role_row):
        db.update_one.return_value = {**role_row, "description": "Root"}

        result = await RoleService(db).update_role("role-1", {"description": "Root"})

        assert result.success is True
        assert result.data.level == 1
        db.update_one.assert_awaited_once_with("roles", {"description": "Root"}, filters={"id": "role-1"})

    @pytest.mark.asyncio
    async def test_update_ignores_level_in_payload(self, db, role_row):
        db.update_one.return_value = role_row

        await RoleService(db).update_role("role-1", {"name": "Admin", "level": 9})

        args, _ = db.update_one.call_args
        assert args[1] == {"name": "Admin"}

    @pytest.mark.asyncio
    async def test_delete_failure(self, db):
        db.delete.side_effect = DatabaseError("violates foreign key constraint")

        result = await RoleService(db).delete_role("role-1")

        assert result.success is False
        assert result.message == "Failed to delete role"
        assert result.error_type == ErrorType.EXECUTION_ERROR.value

    @pytest.mark.asyncio
    async def test_update_menu_access(self, db):
        menu = ["dashboard", "surveys", "results"]

        result = await RoleService(db).update_role_menu_access("role-2", menu)

        assert result.success is True
        assert result.data is None
        db.update.assert_awaited_once_with("roles", {"menu_access": menu}, filters={"id": "role-2"})

    @pytest.mark.asyncio
    async def test_update_rejects_null_name(self, db):
        result = await RoleService(db).update_role("role-1", {"name": None})

        assert result.success is False
        assert result.error_type == ErrorType.VALIDATION_ERROR.value
        db.update_one.assert_not_awaited()
