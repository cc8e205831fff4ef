"""
Simulated sign-in. No credentials are checked; the short sleeps stand in for
the round-trip a real auth provider would take.
"""

import asyncio
from dataclasses import dataclass

from config import AUTH_DELAY, SESSION_DELAY
from models.entities import User
from services.gateway import Gateway
from stores.base import Store


@dataclass(frozen=True)
class AuthState:
    user: User | None = None
    is_loading: bool = False
    error: str | None = None
    is_authenticated: bool = False


class AuthStore(Store[AuthState]):
    def __init__(
        self,
        gateway: Gateway,
        auth_delay: float = AUTH_DELAY,
        session_delay: float = SESSION_DELAY,
    ) -> None:
        super().__init__(AuthState())
        self.gateway = gateway
        self.auth_delay = auth_delay
        self.session_delay = session_delay

    async def login(self, email: str, password: str) -> AuthState:
        try:
            self._set(is_loading=True, error=None)
            await asyncio.sleep(self.auth_delay)
            user = await self.gateway.sign_in(email, password)
            return self._set(user=user, is_authenticated=True, is_loading=False)
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def register(self, email: str, password: str) -> AuthState:
        try:
            self._set(is_loading=True, error=None)
            await asyncio.sleep(self.auth_delay)
            user = await self.gateway.sign_up(email, password)
            return self._set(user=user, is_authenticated=True, is_loading=False)
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def logout(self) -> AuthState:
        try:
            self._set(is_loading=True, error=None)
            await asyncio.sleep(self.session_delay)
            await self.gateway.sign_out()
            return self._set(user=None, is_authenticated=False, is_loading=False)
        except Exception as e:
            return self._set(error=str(e), is_loading=False)

    async def check_auth(self) -> AuthState:
        # Sessions are not persisted, so every launch starts signed out
        try:
            self._set(is_loading=True, error=None)
            await asyncio.sleep(self.session_delay)
            return self._set(user=None, is_authenticated=False, is_loading=False)
        except Exception as e:
            return self._set(user=None, is_authenticated=False, error=str(e), is_loading=False)
