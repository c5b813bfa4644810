from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Status, body and Content-Type of a fetched page."""
    status_code: int
    text: str
    content_type: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_html(self) -> bool:
        """True when the server sent no Content-Type or an HTML one."""
        return self.content_type is None or "html" in self.content_type.lower()
