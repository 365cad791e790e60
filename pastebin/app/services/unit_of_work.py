from abc import ABC, abstractmethod

from pastebin.app.repositories.admin_repository import IAdminRepository
from pastebin.app.repositories.api_key_repository import IApiKeyRepository
from pastebin.app.repositories.paste_repository import IPasteRepository
from pastebin.app.repositories.session_repository import ISessionRepository
from pastebin.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    pastes: IPasteRepository
    api_keys: IApiKeyRepository
    admins: IAdminRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
