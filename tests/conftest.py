"""
Hand-written backends for driving the gateway and stores without a database.
"""
import asyncio
import itertools

import pytest

from services.gateway import Gateway


class MemoryBackend:
    """Dict-backed stand-in for the hosted store. Records every call made."""

    def __init__(self):
        self.sets = {}
        self.cards = {}
        self.calls = []
        self._ids = itertools.count(1)
        self._clock = itertools.count(1)

    def _stamp(self):
        return f"2024-01-01T00:00:{next(self._clock):02d}.000000+00:00"

    def _new_row(self, fields):
        timestamp = self._stamp()
        return {'id': f"row{next(self._ids)}", **fields, 'created_at': timestamp, 'updated_at': timestamp}

    async def list_sets(self, user_id):
        self.calls.append(('list_sets', user_id))
        rows = [r for r in self.sets.values() if r['user_id'] == user_id]
        return sorted(rows, key=lambda r: r['created_at'], reverse=True)

    async def get_set(self, set_id):
        self.calls.append(('get_set', set_id))
        return dict(self.sets[set_id])

    async def create_set(self, fields):
        self.calls.append(('create_set', fields))
        row = self._new_row(fields)
        self.sets[row['id']] = row
        return dict(row)

    async def update_set(self, set_id, fields):
        self.calls.append(('update_set', set_id, fields))
        self.sets[set_id].update(fields, updated_at=self._stamp())
        return dict(self.sets[set_id])

    async def delete_set(self, set_id):
        self.calls.append(('delete_set', set_id))
        self.sets.pop(set_id, None)
        return True

    async def list_cards(self, set_id):
        self.calls.append(('list_cards', set_id))
        rows = [r for r in self.cards.values() if r['set_id'] == set_id]
        return sorted(rows, key=lambda r: r['created_at'])

    async def get_card(self, card_id):
        self.calls.append(('get_card', card_id))
        return dict(self.cards[card_id])

    async def create_card(self, fields):
        self.calls.append(('create_card', fields))
        row = self._new_row(fields)
        self.cards[row['id']] = row
        return dict(row)

    async def update_card(self, card_id, fields):
        self.calls.append(('update_card', card_id, fields))
        self.cards[card_id].update(fields, updated_at=self._stamp())
        return dict(self.cards[card_id])

    async def delete_card(self, card_id):
        self.calls.append(('delete_card', card_id))
        self.cards.pop(card_id, None)
        return True

    # Seeding helpers (sync, bypass call log)

    def add_set(self, title, user_id='user-1', description=''):
        row = self._new_row({'title': title, 'description': description, 'user_id': user_id})
        self.sets[row['id']] = row
        return row

    def add_card(self, set_id, question='q', answer='a', is_remembered=False):
        row = self._new_row({
            'question': question, 'answer': answer,
            'set_id': set_id, 'is_remembered': is_remembered,
        })
        self.cards[row['id']] = row
        return row


class FailingBackend:
    """Every call raises, like an unreachable server."""

    def __getattr__(self, name):
        async def fail(*args, **kwargs):
            raise ConnectionError(f"{name}: connection refused")
        return fail


class SlowBackend:
    """Every call hangs longer than any test timeout. Remembers cancellations."""

    def __init__(self, delay=10.0):
        self.delay = delay
        self.cancelled = []

    def __getattr__(self, name):
        async def hang(*args, **kwargs):
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled.append(name)
                raise
        return hang


@pytest.fixture()
def backend():
    return MemoryBackend()


@pytest.fixture()
def gateway(backend):
    return Gateway(backend, timeout=1.0)


@pytest.fixture()
def offline_gateway():
    return Gateway(FailingBackend(), timeout=1.0)
