"""JSON endpoints for comments on experiments and database items.

Entity kinds are addressed by their name: ``/experiments/<id>/comments``,
``/items/<id>/comments``.
"""
from typing import Any, Dict

from flask import Blueprint, abort, jsonify
from flask_login import current_user, login_required

from labbook.core.extensions import db
from labbook.core.models import EntityType, comment_model_for
from labbook.core.util import utc_dt
from labbook.i18n import _
from labbook.services import get_service
from labbook.services.comments import CommentRow, CommentService, EntityContext

from .forms import CommentForm

bp = Blueprint("comments", __name__)
route = bp.route


@bp.before_request
@login_required
def check_login() -> None:
    """All comment views require an authenticated user."""


def get_comment_service(entity_type: str, entity_id: int) -> CommentService:
    """Comment service for entity `entity_id` of kind `entity_type`, on behalf
    of the current user.

    Aborts with 404 if the entity doesn't exist.
    """
    type_ = EntityType.get(entity_type)
    if type_ is None:
        abort(404)

    try:
        model = comment_model_for(type_).__entity__
    except KeyError:
        abort(404)

    entity = db.session.get(model, entity_id)
    if entity is None:
        abort(404)

    context = EntityContext.of(entity, current_user)
    return get_service("comments").for_entity(context)


def row_to_json(row: CommentRow) -> Dict[str, Any]:
    data = row._asdict()
    if row.created_at is not None:
        data["created_at"] = utc_dt(row.created_at).isoformat()
    return data


@route("/<string:entity_type>/<int:entity_id>/comments")
def read_all(entity_type: str, entity_id: int):
    service = get_comment_service(entity_type, entity_id)
    comments = [row_to_json(row) for row in service.read_all()]
    return jsonify(res=True, comments=comments)


@route("/<string:entity_type>/<int:entity_id>/comments", methods=["POST"])
def create(entity_type: str, entity_id: int):
    service = get_comment_service(entity_type, entity_id)
    form = CommentForm()
    comment_id = service.create(form.comment.data)
    db.session.commit()
    return jsonify(res=True, msg=_("Saved"), id=comment_id)


@route(
    "/<string:entity_type>/<int:entity_id>/comments/<int:comment_id>",
    methods=["POST"],
)
def update(entity_type: str, entity_id: int, comment_id: int):
    service = get_comment_service(entity_type, entity_id)
    form = CommentForm()
    body = service.update(form.comment.data, comment_id)
    db.session.commit()
    return jsonify(res=True, msg=_("Saved"), comment=body)


@route(
    "/<string:entity_type>/<int:entity_id>/comments/<int:comment_id>/destroy",
    methods=["POST"],
)
def destroy(entity_type: str, entity_id: int, comment_id: int):
    service = get_comment_service(entity_type, entity_id)
    service.destroy(comment_id)
    db.session.commit()
    return jsonify(res=True, msg=_("Comment successfully deleted"))
