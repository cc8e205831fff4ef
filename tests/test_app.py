"""
End-to-end: stores -> gateway -> SqliteBackend -> a real SQLite file.
"""
import asyncio

import pytest

import database.database as db
from app import build_app
from models.entities import NewCard, NewSet, SetStats
from services.backend import BackendError, SqliteBackend


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(db, 'DB_PATH', str(tmp_path / "app.db"))
    db.init_db()
    return build_app(timeout=5.0)


def test_build_app_shares_one_gateway(app):
    assert isinstance(app.gateway.backend, SqliteBackend)
    assert app.sets.gateway is app.cards.gateway is app.share.gateway is app.gateway


def test_study_flow(app):
    async def flow():
        new_set = await app.sets.create(NewSet(title='Capitals', user_id='user-1'))
        for question, answer in [('France', 'Paris'), ('Japan', 'Tokyo'), ('Peru', 'Lima')]:
            await app.cards.create(NewCard(question, answer, new_set.id))

        await app.cards.fetch_all(new_set.id)
        app.cards.next()
        await app.cards.update_status(app.cards.state.current_card.id, True)
        return new_set

    new_set = asyncio.run(flow())

    state = app.cards.state
    assert app.sets.state.error is None
    assert [c.question for c in state.cards] == ['France', 'Japan', 'Peru']
    assert state.current_card.question == 'Japan'
    assert state.stats == SetStats(total=3, remembered=1, not_remembered=2)
    assert db.get_cards(new_set.id)[1]['is_remembered'] == 1


def test_share_and_import_flow(app):
    async def flow():
        original = await app.sets.create(NewSet(title='Verbs', description='es', user_id='alice'))
        await app.cards.create(NewCard('ser', 'to be', original.id))
        code = app.share.generate_share_code(original.id)
        await app.share.resolve_shared(code)
        return await app.share.import_shared('bob')

    new_id = asyncio.run(flow())

    imported = db.get_set(new_id)
    assert imported['title'] == 'Verbs (Imported)'
    assert imported['user_id'] == 'bob'
    assert [c['question'] for c in db.get_cards(new_id)] == ['ser']


def test_deleting_set_removes_cards(app):
    async def flow():
        new_set = await app.sets.create(NewSet(title='Temp', user_id='user-1'))
        await app.cards.create(NewCard('q', 'a', new_set.id))
        await app.sets.delete(new_set.id)
        return new_set

    new_set = asyncio.run(flow())
    assert db.get_cards(new_set.id) == []
    assert app.sets.state.current_set is None


def test_missing_row_raises_backend_error(app):
    with pytest.raises(BackendError):
        asyncio.run(SqliteBackend().get_card('missing'))


def test_missing_row_through_gateway_falls_back(app):
    flashcard_set = asyncio.run(app.gateway.get_set('missing'))
    assert flashcard_set.id == 'set-1'
