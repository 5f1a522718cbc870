"""Console commands for employee records."""
import json

import pytest

from framework.database.manager import DatabaseManager
from apps.employees.scripts.manage_employees import build_parser, execute, main


async def run(manager, *argv):
    return await execute(build_parser().parse_args(list(argv)), manager)


@pytest.mark.asyncio
async def test_add_then_get(sqlite_manager):
    added = await run(sqlite_manager, "add", "Jack", "Bauer")
    employee_id = added["data"].id

    fetched = await run(sqlite_manager, "get", str(employee_id))

    assert added["code"] == 200
    assert fetched["data"].last_name == "Bauer"


@pytest.mark.asyncio
async def test_get_unknown_is_empty_success(sqlite_manager):
    payload = await run(sqlite_manager, "get", "31")

    assert payload == {"code": 200, "message": "success", "data": None}


@pytest.mark.asyncio
async def test_search_and_list(sqlite_manager):
    for first, last in [("John", "Smith"), ("Anna", "Smithson"), ("Mary", "Jones")]:
        await run(sqlite_manager, "add", first, last)

    listed = await run(sqlite_manager, "list")
    found = await run(sqlite_manager, "search", "mith")

    assert len(listed["data"]) == 3
    assert sorted(e.last_name for e in found["data"]) == ["Smith", "Smithson"]


@pytest.mark.asyncio
async def test_update_and_delete(sqlite_manager):
    employee_id = (await run(sqlite_manager, "add", "Jack", "Bauer"))["data"].id

    updated = await run(sqlite_manager, "update", str(employee_id), "--first-name", "Jonathan")
    deleted = await run(sqlite_manager, "delete", str(employee_id))
    deleted_again = await run(sqlite_manager, "delete", str(employee_id))

    assert updated["data"].first_name == "Jonathan"
    assert deleted == deleted_again == {"code": 200, "message": "success", "data": {"deleted": employee_id}}
    assert (await run(sqlite_manager, "get", str(employee_id)))["data"] is None


@pytest.mark.asyncio
async def test_update_unknown_fails_with_404(sqlite_manager):
    payload = await run(sqlite_manager, "update", "8", "--last-name", "Nobody")

    assert payload["code"] == 404


@pytest.mark.asyncio
async def test_missing_table_is_storage_failure(sqlite_settings):
    manager = DatabaseManager(sqlite_settings)
    try:
        payload = await run(manager, "list")
    finally:
        await manager.sql.disconnect()

    assert payload["code"] == 500
    assert payload["message"] == "Service temporarily unavailable"


def test_main_prints_envelope_and_exit_code(sqlite_settings, capsys, monkeypatch):
    def use_sqlite(*args):
        DatabaseManager._instance = DatabaseManager(sqlite_settings)

    monkeypatch.setattr(DatabaseManager, "_instance", None)

    use_sqlite()
    assert main(["init-db"]) == 0
    use_sqlite()
    assert main(["add", "Jack", "Bauer"]) == 0
    use_sqlite()
    assert main(["update", "99", "--last-name", "X"]) == 1

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[0]["data"] == {"tables": ["employees"]}
    assert lines[1]["data"]["last_name"] == "Bauer"
    assert lines[2]["code"] == 404
