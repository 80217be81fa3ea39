from collapsi.engine.core import CollapsiEngine
from collapsi.engine.store import MemoryGameStore
from collapsi.factory import quickstart


def _eng(gid):
    return CollapsiEngine(quickstart(), game_id=gid)


def test_lru_eviction():
    s = MemoryGameStore(max_games=2)
    s.save(_eng("a"))
    s.save(_eng("b"))
    assert s.get("a") is not None  # touch a, b becomes oldest
    s.save(_eng("c"))
    assert s.get("b") is None
    assert {e.game_id for e in s.list_all()} == {"a", "c"}


def test_locked_yields_engine_or_none():
    s = MemoryGameStore()
    s.save(_eng("x"))
    with s.locked("x") as eng:
        assert eng.game_id == "x"
    with s.locked("missing") as eng:
        assert eng is None


def test_delete():
    s = MemoryGameStore()
    s.save(_eng("x"))
    assert s.delete("x")
    assert not s.delete("x")
