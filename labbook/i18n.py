"""I18n.

To mark strings for translation::

    from labbook.i18n import _
    _(u'message to translate')

Use :data:`_` for gettext, :data:`_l` for lazy_gettext, :data:`_n` for
ngettext.

To extract messages to build the message catalog template (.pot):

.. code-block:: bash

    $ pybabel extract -k "_n:1,2" -k "_l" -o "messages.pot" labbook
"""
from typing import Optional

from babel.localedata import locale_identifiers
from flask import current_app, has_request_context, request
from flask_babel import Babel, gettext, lazy_gettext, ngettext

__all__ = [
    "_",
    "_l",
    "_n",
    "babel",
    "gettext",
    "lazy_gettext",
    "localeselector",
    "ngettext",
    "VALID_LANGUAGES_CODE",
]

#: gettext alias
_ = gettext

#: lazy_gettext alias
_l = lazy_gettext

#: ngettext alias
_n = ngettext

#: accepted languages codes
VALID_LANGUAGES_CODE = frozenset(
    lang for lang in locale_identifiers() if len(lang) == 2
)

babel = Babel()


def localeselector() -> Optional[str]:
    """Best match between the browser's languages and
    `BABEL_ACCEPT_LANGUAGES`.

    Returns `None` outside of a request: Flask-Babel then uses its default
    locale.
    """
    if not has_request_context():
        return None
    return request.accept_languages.best_match(
        current_app.config["BABEL_ACCEPT_LANGUAGES"]
    )
