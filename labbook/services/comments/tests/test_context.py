from pytest import raises

from labbook.core.models import DATABASE_ITEM, EXPERIMENT
from labbook.services.comments import FORBIDDEN, NOT_FOUND, OWNER, \
    EntityContext, NotificationConfig, Ownership


def test_entity_context_defaults() -> None:
    entity = EntityContext(EXPERIMENT, "12", 3)
    assert entity.type is EXPERIMENT
    assert entity.id == 12
    assert entity.current_user_id == 3
    assert entity.view_page_path == "experiments"
    assert entity.notifiable

    entity = EntityContext("items", 12, 3)
    assert entity.type is DATABASE_ITEM
    assert entity.view_page_path == "database"
    assert not entity.notifiable


def test_entity_context_overrides() -> None:
    entity = EntityContext(EXPERIMENT, 1, 2, view_page_path="xp", notifiable=False)
    assert entity.view_page_path == "xp"
    assert not entity.notifiable


def test_entity_context_unknown_type() -> None:
    with raises(ValueError):
        EntityContext("teams", 1, 2)


def test_notification_config() -> None:
    config = NotificationConfig.from_config(
        {
            "MAIL_SENDER": "lab@example.com",
            "MAIL_NOTIFICATIONS_ENABLED": True,
            "SITE_NAME": "",
            "SITE_URL": None,
        }
    )
    assert config == NotificationConfig("lab@example.com", True, "labbook", "")

    config = NotificationConfig.from_config({"MAIL_SENDER": "lab@example.com"})
    assert not config.enabled


def test_ownership_values() -> None:
    assert Ownership("owner") is OWNER
    assert OWNER != FORBIDDEN
    assert str(NOT_FOUND) == "not_found"
