"""
Unit tests for the MongoDB data access layer.
"""

from typing import ClassVar, List, Optional

import pytest
from pydantic import PrivateAttr

from core.exceptions import DataAccessError, ValidationFailure
from domain.listeners import EntityChangeListener
from domain.models import Book
from domain.persistable import Persistable, ValidationOperation


class Gadget(Persistable):
    """Test entity that records and optionally refuses validations."""

    collection_name: ClassVar[Optional[str]] = "gadgets"

    name: str = ""
    refuse: List[ValidationOperation] = []

    _seen: list = PrivateAttr(default_factory=list)

    def validate_for(self, operation, data_access):
        self._seen.append(operation)
        if operation in self.refuse:
            raise ValidationFailure(f"{self.name} refuses {operation.value}", operation=operation)


class RecordingListener(EntityChangeListener):
    def __init__(self):
        self.saved = []
        self.deleted = []

    def item_saved(self, entity, is_new):
        self.saved.append((entity.id, is_new))

    def item_deleted(self, entity):
        self.deleted.append(entity.id)


class ExplodingListener(EntityChangeListener):
    def item_saved(self, entity, is_new):
        raise RuntimeError("listener broke")

    def item_deleted(self, entity):
        raise RuntimeError("listener broke")


class TestSave:
    def test_save_assigns_id(self, data_access):
        gadget = data_access.save(Gadget(name="g"))
        assert gadget.id
        assert data_access.exists(Gadget, gadget.id)

    def test_generated_ids_do_not_collide(self, data_access):
        ids = {data_access.save(Gadget(name=f"g{i}")).id for i in range(200)}
        assert len(ids) == 200

    def test_save_then_find_returns_equal_entity(self, data_access, sample_book):
        data_access.save(sample_book)
        found = data_access.find_by_id(Book, sample_book.id)
        assert found == sample_book
        assert found.model_dump() == sample_book.model_dump()

    def test_new_entity_validated_for_add(self, data_access):
        gadget = Gadget(name="g")
        data_access.save(gadget)
        assert gadget._seen == [ValidationOperation.ADD]

    def test_caller_supplied_id_unknown_to_store_is_add(self, data_access):
        gadget = Gadget(id="fixed-id", name="g")
        data_access.save(gadget)
        assert gadget.id == "fixed-id"
        assert gadget._seen == [ValidationOperation.ADD]

    def test_second_save_is_update(self, data_access):
        gadget = data_access.save(Gadget(name="g"))
        gadget.name = "renamed"
        data_access.save(gadget)
        assert gadget._seen == [ValidationOperation.ADD, ValidationOperation.UPDATE]
        assert data_access.find_by_id(Gadget, gadget.id).name == "renamed"
        assert data_access.count(Gadget) == 1

    def test_rejected_add_is_not_persisted(self, data_access):
        listener = RecordingListener()
        data_access.add_listener(listener)
        gadget = Gadget(name="g", refuse=[ValidationOperation.ADD])

        with pytest.raises(ValidationFailure) as exc_info:
            data_access.save(gadget)

        assert exc_info.value.operation == ValidationOperation.ADD
        assert not isinstance(exc_info.value, DataAccessError)
        assert data_access.count(Gadget) == 0
        assert listener.saved == []

    def test_rejected_update_keeps_stored_version(self, data_access):
        gadget = data_access.save(Gadget(name="before"))
        gadget.name = "after"
        gadget.refuse = [ValidationOperation.UPDATE]

        with pytest.raises(ValidationFailure):
            data_access.save(gadget)

        assert data_access.find_by_id(Gadget, gadget.id).name == "before"

    def test_id_never_changes_once_assigned(self):
        gadget = Gadget(id="a")
        gadget.assign_id("a")
        with pytest.raises(ValueError):
            gadget.assign_id("b")

    def test_id_attribute_cannot_be_reassigned(self, data_access):
        gadget = data_access.save(Gadget(name="g"))
        original_id = gadget.id

        with pytest.raises(ValueError):
            gadget.id = "other"

        gadget.name = "renamed"
        data_access.save(gadget)
        assert gadget.id == original_id
        assert data_access.count(Gadget) == 1


class TestRead:
    def test_find_missing_returns_none(self, data_access):
        assert data_access.find_by_id(Gadget, "nope") is None

    def test_exists_false_for_unknown_id(self, data_access):
        assert data_access.exists(Gadget, "nope") is False

    def test_list_all_is_lazy_iterator(self, data_access):
        for i in range(3):
            data_access.save(Gadget(name=f"g{i}"))
        result = data_access.list_all(Gadget)
        assert iter(result) is result
        assert sorted(g.name for g in result) == ["g0", "g1", "g2"]

    def test_list_all_only_returns_requested_type(self, data_access, sample_book):
        data_access.save(sample_book)
        data_access.save(Gadget(name="g"))
        assert [b.id for b in data_access.list_all(Book)] == [sample_book.id]

    def test_find_one_by(self, data_access, sample_book):
        data_access.save(sample_book)
        assert data_access.find_one_by(Book, isbn=sample_book.isbn) == sample_book
        assert data_access.find_one_by(Book, isbn="unknown") is None

    def test_list_page_sorted(self, data_access, make_books):
        make_books(5)
        page = data_access.list_page(Book, skip=2, limit=2, sort_by="title")
        assert [b.title for b in page] == ["Book 02", "Book 03"]

    def test_count_with_filter(self, data_access):
        data_access.save(Gadget(name="a"))
        data_access.save(Gadget(name="a"))
        data_access.save(Gadget(name="b"))
        assert data_access.count(Gadget) == 3
        assert data_access.count(Gadget, name="a") == 2

    def test_ensure_indexes(self, data_access, mongo_db):
        data_access.ensure_indexes(Book)
        index_keys = [list(info["key"])[0][0] for info in mongo_db["books"].index_information().values()]
        assert "title" in index_keys
        assert "isbn" in index_keys


class TestDelete:
    def test_delete_missing_is_noop(self, data_access):
        listener = RecordingListener()
        data_access.add_listener(listener)
        assert data_access.delete(Gadget, "nope") is False
        assert listener.deleted == []

    def test_delete_validates_stored_entity(self, data_access):
        gadget = data_access.save(Gadget(name="g", refuse=[ValidationOperation.DELETE]))

        with pytest.raises(ValidationFailure):
            data_access.delete(Gadget, gadget.id)

        assert data_access.exists(Gadget, gadget.id)

    def test_save_find_delete_scenario(self, data_access, sample_book):
        data_access.save(sample_book)
        book_id = sample_book.id
        assert data_access.find_by_id(Book, book_id) == sample_book

        assert data_access.delete(Book, book_id) is True

        assert data_access.exists(Book, book_id) is False
        assert data_access.find_by_id(Book, book_id) is None


class TestListeners:
    def test_listener_receives_save_and_delete(self, data_access):
        listener = RecordingListener()
        data_access.add_listener(listener)

        gadget = data_access.save(Gadget(name="g"))
        data_access.save(gadget)
        data_access.delete(Gadget, gadget.id)

        assert listener.saved == [(gadget.id, True), (gadget.id, False)]
        assert listener.deleted == [gadget.id]

    def test_listener_registered_once(self, data_access):
        listener = RecordingListener()
        data_access.add_listener(listener)
        data_access.add_listener(listener)
        data_access.save(Gadget(name="g"))
        assert len(listener.saved) == 1

    def test_removed_listener_not_notified(self, data_access):
        listener = RecordingListener()
        data_access.add_listener(listener)
        data_access.remove_listener(listener)
        data_access.save(Gadget(name="g"))
        assert listener.saved == []

    def test_failing_listener_does_not_block_others(self, data_access):
        listener = RecordingListener()
        data_access.add_listener(ExplodingListener())
        data_access.add_listener(listener)

        gadget = data_access.save(Gadget(name="g"))
        data_access.delete(Gadget, gadget.id)

        assert listener.saved == [(gadget.id, True)]
        assert listener.deleted == [gadget.id]
        assert data_access.exists(Gadget, gadget.id) is False


class TestStoreFailures:
    def test_find_by_id_wraps_error(self, failing_data_access):
        with pytest.raises(DataAccessError) as exc_info:
            failing_data_access.find_by_id(Book, "abc")
        assert "Book" in exc_info.value.message
        assert "abc" in exc_info.value.message
        assert exc_info.value.__cause__ is not None

    def test_exists_wraps_error(self, failing_data_access):
        with pytest.raises(DataAccessError):
            failing_data_access.exists(Book, "abc")

    def test_list_all_wraps_error(self, failing_data_access):
        with pytest.raises(DataAccessError):
            list(failing_data_access.list_all(Book))

    def test_list_all_wraps_error_while_iterating(self):
        from unittest.mock import MagicMock

        from pymongo.errors import AutoReconnect

        from repositories.mongo_data_access import MongoDataAccess

        def cursor():
            yield {"_id": "g1", "name": "first"}
            raise AutoReconnect("connection reset")

        database = MagicMock()
        database.__getitem__.return_value.find.return_value = cursor()
        result = MongoDataAccess(database).list_all(Gadget)

        assert next(result).name == "first"
        with pytest.raises(DataAccessError) as exc_info:
            next(result)
        assert isinstance(exc_info.value.__cause__, AutoReconnect)

    def test_list_page_and_count_wrap_error(self, failing_data_access):
        with pytest.raises(DataAccessError):
            failing_data_access.list_page(Book, skip=0, limit=10)
        with pytest.raises(DataAccessError):
            failing_data_access.count(Book)

    def test_save_with_id_wraps_exists_error(self, failing_data_access):
        with pytest.raises(DataAccessError):
            failing_data_access.save(Gadget(id="x", name="g"))

    def test_save_new_entity_wraps_write_error(self, failing_data_access):
        listener = RecordingListener()
        failing_data_access.add_listener(listener)
        with pytest.raises(DataAccessError) as exc_info:
            failing_data_access.save(Gadget(name="g"))
        assert "Failed to save" in exc_info.value.message
        assert listener.saved == []

    def test_validation_failure_not_wrapped_even_when_store_down(self, failing_data_access):
        with pytest.raises(ValidationFailure):
            failing_data_access.save(Gadget(name="g", refuse=[ValidationOperation.ADD]))

    def test_delete_wraps_error(self, failing_data_access):
        with pytest.raises(DataAccessError):
            failing_data_access.delete(Book, "abc")

    def test_corrupt_document_wraps_error(self, data_access, mongo_db):
        mongo_db["books"].insert_one({"_id": "bad", "title": "T", "author": "A", "total_copies": "many"})
        with pytest.raises(DataAccessError):
            data_access.find_by_id(Book, "bad")

    def test_close_owned_client(self, mongo_db):
        from unittest.mock import MagicMock

        from repositories.mongo_data_access import MongoDataAccess

        client = MagicMock()
        data_access = MongoDataAccess(mongo_db, client=client)
        data_access.close()
        data_access.close()
        client.close.assert_called_once()
