"""Tests for the client session cache."""
import json

from app.services.session_cache import SESSION_KEY, SessionCache


def test_load_without_file(tmp_path):
    assert SessionCache(tmp_path / "session.json").load() is None


def test_store_and_load(tmp_path):
    cache = SessionCache(tmp_path / "session.json")
    cache.store("tok", {"id": "1", "name": "Ana", "role": "user"})

    session = SessionCache(tmp_path / "session.json").load()
    assert session == {"access_token": "tok", "user": {"id": "1", "name": "Ana", "role": "user"}}

    raw = json.loads((tmp_path / "session.json").read_text(encoding="utf-8"))
    assert list(raw) == [SESSION_KEY]


def test_merge_user(tmp_path):
    cache = SessionCache(tmp_path / "session.json")
    cache.store("tok", {"id": "1", "name": "Ana", "phone": None})
    cache.merge_user({"phone": "11987654321"})
    assert cache.load()["user"] == {"id": "1", "name": "Ana", "phone": "11987654321"}
    assert cache.load()["access_token"] == "tok"


def test_merge_user_signed_out_is_noop(tmp_path):
    cache = SessionCache(tmp_path / "session.json")
    assert cache.merge_user({"name": "x"}) is None
    assert cache.load() is None


def test_clear(tmp_path):
    cache = SessionCache(tmp_path / "session.json")
    cache.store("tok", {"id": "1"})
    cache.clear()
    assert cache.load() is None


def test_corrupt_file_means_signed_out(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    assert SessionCache(path).load() is None


def test_store_leaves_no_temp_file(tmp_path):
    cache = SessionCache(tmp_path / "session.json")
    cache.store("tok", {"id": "1"})
    cache.store("tok2", {"id": "1"})
    assert sorted(p.name for p in tmp_path.iterdir()) == ["session.json"]
    assert cache.load()["access_token"] == "tok2"
