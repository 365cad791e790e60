"""
Bootstrap script - grants admin to an existing user.

The HTTP admin endpoints require an admin caller, so the first admin has to
be created out of band:
    python bin/promote_admin.py <username>
    python bin/promote_admin.py --demote <username>
"""

import argparse
import asyncio
import os
import sys

# bin/promote_admin.py  ->  ../  ->  project root
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from sqlmodel import SQLModel  # noqa: E402

from pastebin.adapter.services.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from pastebin.app.use_cases.admin import ManageAdminsUseCase  # noqa: E402
from pastebin.depends import AsyncSessionLocal, engine  # noqa: E402


async def run(username: str, demote: bool) -> int:
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        async with AsyncSessionLocal() as session:
            uow = SqlAlchemyUnitOfWork(session)
            async with uow:
                user = await uow.users.get_by_username(username)
                user_id = user.id if user else None

            if user_id is None:
                print(f"[promote_admin] User '{username}' not found.")
                return 1

            use_case = ManageAdminsUseCase(uow)
            result = await (use_case.demote(user_id) if demote else use_case.promote(user_id))
    finally:
        await engine.dispose()

    if result.is_err():
        print(f"[promote_admin] {result.error.code}: {result.error.message}")
        return 1

    action = "demoted" if demote else "promoted"
    print(f"[promote_admin] User '{username}' {action}.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Grant or revoke pastebin admin")
    parser.add_argument("username")
    parser.add_argument("--demote", action="store_true", help="revoke instead of grant")
    args = parser.parse_args()
    return asyncio.run(run(args.username, args.demote))


if __name__ == "__main__":
    sys.exit(main())
