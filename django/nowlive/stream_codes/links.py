from urllib.parse import urlencode

from django.conf import settings

from .descriptors import is_multi

SINGLE_VIEWER_PATH = "/stream"
MULTI_VIEWER_PATH = "/mvm"


def viewer_url(code: str, descriptor: dict) -> str:
    path = MULTI_VIEWER_PATH if is_multi(descriptor) else SINGLE_VIEWER_PATH
    return f"{settings.PUBLIC_SITE_URL.rstrip('/')}{path}?{urlencode({'code': code})}"


def code_from_query(params) -> str:
    """
    Read a stream code from query parameters.

    Old share links carry the code under an empty parameter name (``?=AB12``),
    newer ones use ``?code=AB12``.
    """
    return (params.get("code") or params.get("") or "").strip().upper()
