from pydantic import BaseModel
from typing import Literal, Optional

STATUS_OK = "ok"
STATUS_ERROR = "error"


class URLResponse(BaseModel):
    status: Literal["ok", "error"]
    error: Optional[str] = None
    alias: Optional[str] = None

    @classmethod
    def ok(cls, alias: Optional[str] = None) -> "URLResponse":
        return cls(status=STATUS_OK, alias=alias)

    @classmethod
    def fail(cls, msg: str) -> "URLResponse":
        return cls(status=STATUS_ERROR, error=msg)
