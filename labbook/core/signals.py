"""
All signals used by labbook.

Signals are the main tools used for decoupling applications components by
sending notifications. In short, signals allow certain senders to notify
subscribers that something happened.

Cf. https://flask.palletsprojects.com/en/latest/signals/ for detailed
documentation.
"""
from blinker import Namespace

signals = Namespace()

#: Triggered at application initialization when all extensions and plugins have
#: been loaded
components_registered = signals.signal("app:components:registered")

#: Sent by the comment service after a comment has been inserted. Receivers
#: get `entity` (an :class:`EntityContext`) and `comment_id`.
comment_created = signals.signal("comment:created")

#: Sent after an update statement, with `entity`, `comment_id` and `rowcount`.
comment_updated = signals.signal("comment:updated")

#: Sent after a delete statement, with `entity`, `comment_id` and `rowcount`.
comment_deleted = signals.signal("comment:deleted")

#: Sent when a login attempt failed, with `email`.
auth_failed = signals.signal("auth:failed")
