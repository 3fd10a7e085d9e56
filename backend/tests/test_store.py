"""
Tests for the in-memory repository
"""

import threading

import pytest

from scholarbase.core.store import InMemoryRepository, Store


@pytest.fixture
def repo():
    return InMemoryRepository("things", [{"id": "a", "n": 1}, {"id": "b", "n": 2}])


class TestInMemoryRepository:

    def test_get_and_list(self, repo):
        assert repo.get("b") == {"id": "b", "n": 2}
        assert repo.get("z") is None
        assert [r["id"] for r in repo.list()] == ["a", "b"]

    def test_returned_records_are_copies(self, repo):
        record = repo.get("a")
        record["n"] = 99

        assert repo.get("a")["n"] == 1

    def test_insert_requires_id(self, repo):
        with pytest.raises(ValueError):
            repo.insert({"n": 3})

    def test_update_merges(self, repo):
        assert repo.update("a", {"label": "x"}) == {"id": "a", "n": 1, "label": "x"}
        assert repo.update("z", {"label": "x"}) is None

    def test_delete_removes_exactly_one(self, repo):
        repo.insert({"id": "c", "n": 1})

        removed = repo.delete_one(lambda r: r["n"] == 1)

        assert removed["id"] == "a"
        assert [r["id"] for r in repo.list()] == ["b", "c"]
        assert repo.delete("a") is None

    def test_count(self, repo):
        assert repo.count() == 2
        assert repo.count(lambda r: r["n"] > 1) == 1

    def test_concurrent_inserts(self):
        repo = InMemoryRepository("things")

        def worker(offset):
            for i in range(200):
                repo.insert({"id": f"{offset}-{i}"})

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert repo.count() == 800


class TestStore:

    def test_reset_restores_seed(self):
        store = Store()
        store.reset()
        store.enrollments.delete("enrollment_1")
        store.courses.replace_all([])

        store.reset()

        assert store.enrollments.count() == 2
        assert [c["id"] for c in store.courses.list()] == ["course_1", "course_2"]

    def test_clear(self):
        store = Store()
        store.reset()
        store.clear()

        assert store.users.count() == 0
        assert store.students.count() == 0
