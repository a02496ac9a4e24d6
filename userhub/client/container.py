from dataclasses import dataclass
from typing import Optional

import httpx

from .config import ClientSettings
from .datasource import ApiDataSource
from .repositories import HttpAuthRepository, HttpUserRepository
from .storage import FileTokenStorage, TokenStorage
from .store import AuthStore
from .usecases import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)


@dataclass(slots=True)
class ClientContainer:
    """Everything a client process needs, wired once at startup."""

    settings: ClientSettings
    storage: TokenStorage
    data_source: ApiDataSource
    auth_repository: HttpAuthRepository
    user_repository: HttpUserRepository
    auth_store: AuthStore

    async def aclose(self) -> None:
        await self.data_source.aclose()


def build_client(
    settings: Optional[ClientSettings] = None,
    *,
    storage: Optional[TokenStorage] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ClientContainer:
    settings = settings or ClientSettings()
    storage = storage or FileTokenStorage(settings.token_storage_path)
    data_source = ApiDataSource(
        settings.api_base_url,
        timeout=settings.timeout_seconds,
        client=http_client,
    )
    auth_repository = HttpAuthRepository(data_source, storage)
    auth_store = AuthStore(
        register_use_case=RegisterUserUseCase(auth_repository),
        login_use_case=LoginUserUseCase(auth_repository),
        get_current_user_use_case=GetCurrentUserUseCase(auth_repository),
        logout_use_case=LogoutUserUseCase(auth_repository),
    )
    return ClientContainer(
        settings=settings,
        storage=storage,
        data_source=data_source,
        auth_repository=auth_repository,
        user_repository=HttpUserRepository(data_source),
        auth_store=auth_store,
    )
