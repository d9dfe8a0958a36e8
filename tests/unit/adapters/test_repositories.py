"""Contract tests every UserRepository / UnitOfWork adapter must pass, plus adapter-specific behavior."""

import pytest
from loguru import logger

from user_service.adapters.db.in_memory import InMemoryUnitOfWork
from user_service.application.ports import UnitOfWork
from user_service.domain.errors import ConflictError
from user_service.domain.user import Email, User, UserId, UserName


@pytest.fixture(params=["memory_uow", "sql_uow"])
def uow(request: pytest.FixtureRequest) -> UnitOfWork:
    return request.getfixturevalue(request.param)


def save_committed(uow: UnitOfWork, user: User) -> User:
    with uow:
        saved = uow.users.save(user)
        uow.commit()
    return saved


def test_save_then_find_by_id(uow, john):
    saved = save_committed(uow, john)

    with uow:
        found = uow.users.find_by_id(john.id)

    assert saved == john
    assert found == john


def test_find_by_email(uow, john):
    save_committed(uow, john)

    with uow:
        assert uow.users.find_by_email(Email.create("john@example.com")) == john
        assert uow.users.find_by_email(Email.create("nobody@example.com")) is None


def test_find_by_id_returns_none_when_absent(uow):
    with uow:
        assert uow.users.find_by_id(UserId.generate()) is None


def test_save_is_an_upsert_by_id(uow, john):
    save_committed(uow, john)
    renamed = john.update_name(UserName.create("Johnny", "Doe"))

    save_committed(uow, renamed)
    save_committed(uow, renamed)

    with uow:
        users = uow.users.list_all()
    assert users == [renamed]


def test_exists_by_email(uow, john):
    save_committed(uow, john)

    with uow:
        assert uow.users.exists_by_email(Email.create("john@example.com")) is True
        assert uow.users.exists_by_email(Email.create("JOHN@example.com")) is False


def test_delete_by_id_and_missing_delete_is_a_no_op(uow, john):
    save_committed(uow, john)

    with uow:
        uow.users.delete_by_id(john.id)
        uow.users.delete_by_id(UserId.generate())
        uow.commit()

    with uow:
        assert uow.users.list_all() == []


def test_save_rejects_email_owned_by_another_user(uow, john):
    save_committed(uow, john)
    twin = User.create(Email.create("john@example.com"), UserName.create("Other", "John"))

    with pytest.raises(ConflictError):
        save_committed(uow, twin)

    with uow:
        assert uow.users.list_all() == [john]


def test_changes_without_commit_are_discarded(uow, john):
    with uow:
        uow.users.save(john)

    with uow:
        assert uow.users.find_by_id(john.id) is None


def test_exception_rolls_back(uow, john):
    with pytest.raises(RuntimeError):
        with uow:
            uow.users.save(john)
            raise RuntimeError("boom")

    with uow:
        assert uow.users.list_all() == []


def test_users_requires_an_entered_unit_of_work(uow):
    with pytest.raises(AssertionError):
        uow.users


class TestInterleavedInMemoryUnitsOfWork:
    """Two units of work opened on the same store before either commits."""

    def test_both_creates_survive(self, store, john):
        jane = User.create(Email.create("jane@example.com"), UserName.create("Jane", "Doe"))
        first, second = InMemoryUnitOfWork(store), InMemoryUnitOfWork(store)

        with first, second:
            first.users.save(john)
            second.users.save(jane)
            first.commit()
            second.commit()

        assert set(store.users) == {john.id, jane.id}

    def test_update_does_not_resurrect_a_concurrently_deleted_user(self, store, john):
        save_committed(InMemoryUnitOfWork(store), john)
        deleter, updater = InMemoryUnitOfWork(store), InMemoryUnitOfWork(store)

        with deleter, updater:
            loaded = updater.users.find_by_id(john.id)
            deleter.users.delete_by_id(john.id)
            deleter.commit()
            updater.users.save(loaded.update_name(UserName.create("Johnny", "Doe")))
            updater.commit()

        assert store.users == {}

    def test_later_commit_with_the_same_email_conflicts(self, store, john):
        twin = User.create(Email.create("john@example.com"), UserName.create("Other", "John"))
        first, second = InMemoryUnitOfWork(store), InMemoryUnitOfWork(store)

        with first:
            first.users.save(john)
            with pytest.raises(ConflictError):
                with second:
                    second.users.save(twin)
                    first.commit()
                    second.commit()

        assert list(store.users.values()) == [john]

    def test_commit_keeps_the_unit_of_work_usable(self, store, john):
        uow = InMemoryUnitOfWork(store)

        with uow:
            uow.users.save(john)
            uow.commit()
            assert uow.committed is True
            assert uow.users.find_by_id(john.id) == john
            uow.users.delete_by_id(john.id)

        assert list(store.users.values()) == [john]


class TestSQLAlchemyUnitOfWork:
    def test_commit_marks_the_unit_of_work_committed(self, sql_uow, john):
        with sql_uow:
            assert sql_uow.committed is False
            sql_uow.users.save(john)
            sql_uow.commit()
            assert sql_uow.committed is True

        assert sql_uow.session is None

    def test_leaving_without_commit_rolls_back_explicitly(self, sql_uow, john):
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            with sql_uow:
                sql_uow.users.save(john)
        finally:
            logger.remove(sink_id)

        assert any(m.startswith("Discarding uncommitted changes") for m in messages)
        with sql_uow:
            assert sql_uow.users.list_all() == []

    def test_entering_twice_is_rejected(self, sql_uow):
        with sql_uow:
            with pytest.raises(AssertionError):
                sql_uow.__enter__()
