import logging
from dataclasses import dataclass
from typing import Any

from config import REQUEST_TIMEOUT
from database.database import init_db
from services.backend import SqliteBackend
from services.gateway import Gateway
from stores.auth import AuthStore
from stores.cards import CardsStore
from stores.sets import SetsStore
from stores.share import ShareStore


@dataclass
class App:
    """Everything a screen needs, built once and passed down explicitly."""
    gateway: Gateway
    auth: AuthStore
    sets: SetsStore
    cards: CardsStore
    share: ShareStore


def build_app(backend: Any = None, timeout: float = REQUEST_TIMEOUT) -> App:
    if backend is None:
        backend = SqliteBackend()

    gateway = Gateway(backend, timeout=timeout)
    return App(
        gateway=gateway,
        auth=AuthStore(gateway),
        sets=SetsStore(gateway),
        cards=CardsStore(gateway),
        share=ShareStore(gateway),
    )


if __name__ == '__main__':
    logging.info("Init db...")
    init_db()
    logging.info("Database ready")
