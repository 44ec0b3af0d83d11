from concurrent.futures import ThreadPoolExecutor

import pytest

from app.services.store import ReceiptNotFound, ResultStore

def test_put_then_get(store):
    rid = store.put(42)
    assert store.get(rid) == 42
    assert rid in store
    assert len(store) == 1

def test_unknown_id_raises(store):
    store.put(1)
    with pytest.raises(ReceiptNotFound):
        store.get("does-not-exist")

def test_ids_are_unique(store):
    ids = {store.put(0) for _ in range(500)}
    assert len(ids) == 500

def test_record_keeps_receipt(store):
    rid = store.put(7, receipt=None)
    rec = store.get_record(rid)
    assert rec.id == rid
    assert rec.points == 7

def test_regenerates_on_collision(monkeypatch):
    s = ResultStore()
    ids = iter(["dup", "dup", "fresh"])
    monkeypatch.setattr(ResultStore, "new_id", staticmethod(lambda: next(ids)))
    assert s.put(1) == "dup"
    assert s.put(2) == "fresh"
    assert s.get("dup") == 1
    assert s.get("fresh") == 2

def test_concurrent_puts_do_not_cross(store):
    with ThreadPoolExecutor(max_workers=16) as pool:
        pairs = list(pool.map(lambda n: (n, store.put(n)), range(1000)))
    assert len({rid for _, rid in pairs}) == 1000
    with ThreadPoolExecutor(max_workers=16) as pool:
        seen = list(pool.map(lambda p: (p[0], store.get(p[1])), pairs))
    assert all(n == points for n, points in seen)
