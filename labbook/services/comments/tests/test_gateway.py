from datetime import datetime, timedelta

from pytest import raises
from sqlalchemy.orm import Session

from labbook.core.exceptions import StorageError
from labbook.core.models import DATABASE_ITEM, EXPERIMENT, Experiment, Item, \
    User
from labbook.core.util import utcnow
from labbook.services.comments import CommentGateway


def test_insert_and_select_all(
    session: Session, experiment: Experiment, user: User, other_user: User
) -> None:
    gateway = CommentGateway(EXPERIMENT)
    now = utcnow()

    # inserted out of order: rows come back oldest first
    second = gateway.insert(experiment.id, other_user.id, "second", now)
    first = gateway.insert(experiment.id, user.id, "first", now - timedelta(1))
    # same date: ordered by id
    third = gateway.insert(experiment.id, user.id, "third", now)

    rows = gateway.select_all(experiment.id)
    assert [row.id for row in rows] == [first, second, third]
    assert [row.body for row in rows] == ["first", "second", "third"]
    assert rows[0].author_id == user.id
    assert rows[0].author_fullname == "Joe Test"
    assert rows[1].author_fullname == "Jim Other"
    assert rows[0].item_id == experiment.id
    assert isinstance(rows[0].created_at, datetime)


def test_partitions_are_separate(
    session: Session, experiment: Experiment, item: Item, user: User
) -> None:
    experiments = CommentGateway(EXPERIMENT)
    items = CommentGateway("items")
    assert items.table.name == "items_comments"

    experiments.insert(experiment.id, user.id, "on experiment", utcnow())
    items.insert(item.id, user.id, "on item", utcnow())

    assert [r.body for r in experiments.select_all(experiment.id)] == [
        "on experiment"
    ]
    assert [r.body for r in items.select_all(item.id)] == ["on item"]


def test_select_all_empty(session: Session, item: Item) -> None:
    assert CommentGateway(DATABASE_ITEM).select_all(item.id) == []


def test_update_and_delete_check_author(
    session: Session, experiment: Experiment, user: User, other_user: User
) -> None:
    gateway = CommentGateway(EXPERIMENT)
    comment_id = gateway.insert(experiment.id, user.id, "original", utcnow())

    assert gateway.update(comment_id, other_user.id, "hacked") == 0
    assert gateway.delete(comment_id, other_user.id) == 0
    assert gateway.select_all(experiment.id)[0].body == "original"

    assert gateway.update(comment_id, user.id, "edited") == 1
    assert gateway.select_all(experiment.id)[0].body == "edited"

    assert gateway.select_author(comment_id) == user.id
    assert gateway.delete(comment_id, user.id) == 1
    assert gateway.select_all(experiment.id) == []
    assert gateway.select_author(comment_id) is None


def test_user_and_owner_info(
    session: Session, experiment: Experiment, user: User, other_user: User
) -> None:
    gateway = CommentGateway(EXPERIMENT)

    info = gateway.user_info(other_user.id)
    assert info == (other_user.id, "other@example.com", "Jim Other")
    assert gateway.user_info(other_user.id + 1000) is None

    owner = gateway.owner_info(experiment.id)
    assert owner.id == user.id
    assert owner.email == "test@example.com"
    assert owner.fullname == "Joe Test"
    assert gateway.owner_info(experiment.id + 1000) is None


def test_storage_error(session: Session, user: User) -> None:
    gateway = CommentGateway(DATABASE_ITEM)

    # no such item: foreign key violation
    with raises(StorageError) as exc_info:
        gateway.insert(12345, user.id, "orphan", utcnow())

    assert str(exc_info.value) == "Error while executing SQL query."
    assert "items_comments" in exc_info.value.statement
