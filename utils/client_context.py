"""Client context utilities (user agent and referrer reported by the browser)"""
from typing import Optional, Protocol

from utils.validation import sanitize_string

DIRECT_REFERRER = 'direct'
MAX_USER_AGENT_LENGTH = 512
MAX_REFERRER_LENGTH = 2048


class ClientContext(Protocol):
    def user_agent(self) -> str: ...

    def referrer(self) -> str: ...


def resolve_referrer(value: Optional[str]) -> str:
    """Return the referrer, or 'direct' when the client did not report one"""
    return value or DIRECT_REFERRER


class StaticClientContext:
    """Fixed client context, for tests and scripts"""

    def __init__(self, user_agent: str = '', referrer: str = ''):
        self._user_agent = user_agent
        self._referrer = referrer

    def user_agent(self) -> str:
        return self._user_agent

    def referrer(self) -> str:
        return self._referrer


class RequestClientContext:
    """
    Client context read from a Flask request.

    The landing page reports its own `document.referrer` in the JSON body; the
    Referer header is only a fallback since a same-site POST carries the
    landing page's URL there.
    """

    def __init__(self, request):
        self._request = request

    def user_agent(self) -> str:
        value = self._request.headers.get('User-Agent', '')
        return sanitize_string(value, max_length=MAX_USER_AGENT_LENGTH) or ''

    def referrer(self) -> str:
        data = self._request.get_json(silent=True) or {}
        value = data.get('referrer') if isinstance(data, dict) else None
        if not value:
            value = self._request.headers.get('Referer', '')
        return sanitize_string(value, max_length=MAX_REFERRER_LENGTH) or ''
