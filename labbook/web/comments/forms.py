""""""
from flask_wtf import FlaskForm
from wtforms.fields import TextAreaField

from labbook.i18n import _l


class CommentForm(FlaskForm):
    """Raw comment text; sanitization and validation are done by the comment
    service."""

    comment = TextAreaField(label=_l("Comment"), default="")
