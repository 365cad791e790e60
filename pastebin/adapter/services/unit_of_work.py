from sqlmodel.ext.asyncio.session import AsyncSession

from pastebin.adapter.repositories.admin_repository import AdminRepository
from pastebin.adapter.repositories.api_key_repository import ApiKeyRepository
from pastebin.adapter.repositories.paste_repository import PasteRepository
from pastebin.adapter.repositories.session_repository import SessionRepository
from pastebin.adapter.repositories.user_repository import UserRepository
from pastebin.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.pastes = PasteRepository(self.session)
        self.api_keys = ApiKeyRepository(self.session)
        self.admins = AdminRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
