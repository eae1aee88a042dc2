"""Tests for the in-memory submission store.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import pytest

from juris_intake.core.exceptions import NotFoundError, SubmissionNotFoundError
from juris_intake.core.models import SubmissionRecord
from juris_intake.store import InMemorySubmissionStore

__all__ = ()


def _record(name: str) -> SubmissionRecord:
    return SubmissionRecord(client_info={"nome": name, "email": f"{name}@x.com", "telefone": "1"})


class TestInMemorySubmissionStore:
    """Tests for InMemorySubmissionStore behavior."""

    def test_starts_empty(self) -> None:
        """A new store holds no records."""
        store = InMemorySubmissionStore()

        assert len(store) == 0
        assert store.list() == ()

    def test_append_returns_positional_ids(self) -> None:
        """Append should return zero-based indexes in arrival order."""
        store = InMemorySubmissionStore()

        ids = [store.append(_record(name)) for name in ("ana", "bia", "caio")]

        assert ids == [0, 1, 2]
        assert len(store) == 3

    def test_list_preserves_insertion_order(self) -> None:
        """List should return records exactly as appended."""
        store = InMemorySubmissionStore()
        records = [_record(name) for name in ("ana", "bia", "caio")]
        for record in records:
            store.append(record)

        assert list(store.list()) == records
        for index, record in enumerate(records):
            assert store.get_by_index(index) == record

    def test_list_is_a_snapshot(self) -> None:
        """Later appends should not change a previously returned list."""
        store = InMemorySubmissionStore()
        store.append(_record("ana"))

        snapshot = store.list()
        store.append(_record("bia"))

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_listed_records_cannot_change_the_store(self) -> None:
        """Editing a listed record's client fields leaves the stored record intact."""
        store = InMemorySubmissionStore()
        store.append(_record("ana"))

        store.list()[0].client_info["nome"] = "X"

        assert store.get_by_index(0).client_info["nome"] == "ana"

    def test_fetched_records_cannot_change_the_store(self) -> None:
        """Editing a fetched record's mappings leaves the stored record intact."""
        store = InMemorySubmissionStore()
        store.append(_record("ana"))

        fetched = store.get_by_index(0)
        fetched.client_info["nome"] = "X"
        fetched.attachments["cpf"] = ()

        stored = store.get_by_index(0)
        assert stored.client_info["nome"] == "ana"
        assert stored.attachments == {}

    def test_appended_record_is_detached(self) -> None:
        """Changing the caller's record after append does not reach the store."""
        store = InMemorySubmissionStore()
        record = _record("ana")
        store.append(record)

        record.client_info["nome"] = "X"

        assert store.get_by_index(0).client_info["nome"] == "ana"

    def test_identical_records_are_kept(self) -> None:
        """No uniqueness is enforced."""
        store = InMemorySubmissionStore()
        record = _record("ana")

        assert store.append(record) == 0
        assert store.append(record) == 1

    @pytest.mark.parametrize("index", [-1, -2, 1, 5])
    def test_get_by_index_out_of_range(self, index: int) -> None:
        """Indexes outside [0, len) should raise, including negatives."""
        store = InMemorySubmissionStore()
        store.append(_record("ana"))

        with pytest.raises(SubmissionNotFoundError) as exc_info:
            store.get_by_index(index)

        assert exc_info.value.index == index
        assert exc_info.value.size == 1

    def test_get_by_index_on_empty_store(self) -> None:
        """An empty store has no valid index."""
        store = InMemorySubmissionStore()

        with pytest.raises(NotFoundError):
            store.get_by_index(0)
