#!/usr/bin/env python3
"""
Employee records console.

Usage:
    python -m apps.employees.scripts.manage_employees init-db
    python -m apps.employees.scripts.manage_employees add Jack Bauer
    python -m apps.employees.scripts.manage_employees get 1
    python -m apps.employees.scripts.manage_employees list
    python -m apps.employees.scripts.manage_employees update 1 --last-name Palmer
    python -m apps.employees.scripts.manage_employees delete 1
    python -m apps.employees.scripts.manage_employees search auer

Every command prints one JSON envelope {"code", "message", "data"} on stdout
and exits with status 1 when code is not 200.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from sqlmodel import SQLModel

import apps.models  # noqa: F401  (registers tables on SQLModel metadata)
from framework.database.manager import DatabaseManager
from framework.exceptions.handler import handle_exception
from framework.logging.logger import LogConfig, get_logger, trace_context
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from apps.employees.service import EmployeeService

logger = get_logger("manage_employees")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="manage-employees", description="Manage employee records")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log to stderr and rotating files under LOG_DIR at LOG_LEVEL"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create missing tables")

    add = subparsers.add_parser("add", help="Register an employee")
    add.add_argument("first_name")
    add.add_argument("last_name")

    get = subparsers.add_parser("get", help="Show one employee")
    get.add_argument("employee_id", type=int)

    subparsers.add_parser("list", help="List every employee")

    update = subparsers.add_parser("update", help="Rename an employee")
    update.add_argument("employee_id", type=int)
    update.add_argument("--first-name", dest="first_name")
    update.add_argument("--last-name", dest="last_name")

    delete = subparsers.add_parser("delete", help="Delete an employee (no-op when absent)")
    delete.add_argument("employee_id", type=int)

    search = subparsers.add_parser("search", help="Find employees whose last name contains TEXT")
    search.add_argument("text")

    return parser


async def _dispatch(args: argparse.Namespace, service: EmployeeService):
    if args.command == "add":
        return await service.register_employee(args.first_name, args.last_name)
    if args.command == "get":
        return await service.get_employee(args.employee_id)
    if args.command == "list":
        return await service.list_employees()
    if args.command == "update":
        return await service.update_employee(
            args.employee_id, first_name=args.first_name, last_name=args.last_name
        )
    if args.command == "delete":
        await service.remove_employee(args.employee_id)
        return {"deleted": args.employee_id}
    # remaining sub-command is "search"; argparse rejects anything else
    return await service.search_by_last_name(args.text)


async def execute(args: argparse.Namespace, manager: Optional[DatabaseManager] = None) -> dict:
    """Run one parsed command and return its response envelope."""
    manager = manager or DatabaseManager.get_instance()
    with trace_context():
        try:
            if args.command == "init-db":
                await manager.sql.create_tables()
                logger.info("Tables created")
                return ResponseModel.success(data={"tables": sorted(SQLModel.metadata.tables)})

            async with UnitOfWork.begin(manager) as uow:
                data = await _dispatch(args, EmployeeService(uow))
            return ResponseModel.success(data=data)
        except Exception as e:
            return handle_exception(e)


async def _run(args: argparse.Namespace) -> dict:
    try:
        return await execute(args)
    finally:
        await DatabaseManager.reset_instance()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        LogConfig.setup_logging()
    else:
        LogConfig.setup_cli_logging()
    payload = asyncio.run(_run(args))
    print(ResponseModel.render(payload))
    return 0 if ResponseModel.is_success(payload) else 1


if __name__ == "__main__":
    sys.exit(main())
