# re-export common schemas for simpler imports
from .url.request import URLCreateRequest, AliasUpdateRequest
from .url.response import URLResponse

__all__ = [
    "URLCreateRequest",
    "AliasUpdateRequest",
    "URLResponse",
]
