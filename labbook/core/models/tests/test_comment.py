""""""
from datetime import datetime, timedelta

import sqlalchemy as sa
from pytest import raises
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from labbook.core.models import DATABASE_ITEM, EXPERIMENT, EntityType, \
    Experiment, ExperimentComment, Item, ItemComment, User, comment_model_for


def test_entity_types() -> None:
    assert EntityType("experiments") is EXPERIMENT
    assert EXPERIMENT.notifiable
    assert EXPERIMENT.view_page_path == "experiments"

    assert EntityType.get("items") is DATABASE_ITEM
    assert not DATABASE_ITEM.notifiable
    assert DATABASE_ITEM.view_page_path == "database"

    assert Experiment.entity_type is EXPERIMENT
    assert Item.entity_type is DATABASE_ITEM


def test_comment_model_for() -> None:
    assert comment_model_for(EXPERIMENT) is ExperimentComment
    assert comment_model_for(DATABASE_ITEM) is ItemComment
    assert comment_model_for("experiments") is ExperimentComment

    assert ExperimentComment.__table__.name == "experiments_comments"
    assert ItemComment.__table__.name == "items_comments"

    with raises(KeyError):
        comment_model_for("teams")


def test_column_names() -> None:
    columns = set(ExperimentComment.__table__.columns.keys())
    assert columns == {"id", "item_id", "userid", "comment", "datetime"}


def test_default_ordering(session: Session) -> None:
    user = User(email="joe@example.com", password="x")
    experiment = Experiment(title="experiment", owner=user)
    session.add(experiment)
    session.flush()

    now = datetime.now()
    c1 = ExperimentComment(item_id=experiment.id, author_id=user.id, body="c1")
    c1.created_at = now - timedelta(10)
    c2 = ExperimentComment(item_id=experiment.id, author_id=user.id, body="c2")
    c2.created_at = now - timedelta(5)
    session.add_all([c1, c2])
    session.flush()

    query = sa.select(ExperimentComment).order_by(ExperimentComment.created_at)
    assert session.scalars(query).all() == [c1, c2]


def test_body_minimum_length(session: Session) -> None:
    user = User(email="joe@example.com", password="x")
    experiment = Experiment(title="experiment", owner=user)
    session.add(experiment)
    session.flush()

    comment = ExperimentComment(item_id=experiment.id, author_id=user.id, body="x")
    session.add(comment)
    with raises(IntegrityError):
        session.flush()
    session.rollback()
