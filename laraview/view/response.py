"""
Response
Renderable response carrying view content, status and headers
"""
from typing import Any, Dict, Optional

from markupsafe import Markup
from sanic.response import HTTPResponse, html


class Response:
    """
    A response whose content is rendered lazily

    Responses can be bound into view data like sub-views: the parent view
    renders them to a string before its own template runs.

    Example:
        return Response(factory.make('home.index')) \\
            .header('X-Frame-Options', 'DENY') \\
            .status(200) \\
            .to_http()
    """

    def __init__(self, content: Any = '', status: int = 200, headers: Optional[Dict[str, str]] = None):
        self.content = content
        self._status = status
        self._headers = dict(headers or {})

    def status(self, code: int) -> 'Response':
        """Set status code (chainable)"""
        self._status = code
        return self

    def header(self, key: str, value: str) -> 'Response':
        """Add a header (chainable)"""
        self._headers[key] = value
        return self

    @property
    def status_code(self) -> int:
        return self._status

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def render(self) -> Markup:
        """Get the string content of the response"""
        if callable(getattr(self.content, 'render', None)):
            return Markup(self.content.render())
        if self.content is None:
            return Markup('')
        return Markup(str(self.content))

    def to_http(self) -> HTTPResponse:
        """Build the Sanic HTML response"""
        return html(str(self.render()), status=self._status, headers=self._headers)

    def __str__(self):
        return str(self.render())
