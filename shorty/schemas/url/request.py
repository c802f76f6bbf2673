from pydantic import BaseModel, HttpUrl, TypeAdapter, ValidationError, field_validator
from typing import Optional

MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(HttpUrl)


class URLCreateRequest(BaseModel):
    # Kept exactly as sent; HttpUrl is only used to check it
    url: str
    alias: Optional[str] = None

    @field_validator('url')
    def validate_url(cls, v):
        # Length check
        if len(v) > MAX_URL_LENGTH:
            raise ValueError(f'URL must be at most {MAX_URL_LENGTH} characters')

        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise ValueError('URL is not well-formed') from None

        # Only allow http/https
        if not (v.lower().startswith('http://') or v.lower().startswith('https://')):
            raise ValueError('Only HTTP and HTTPS URLs are allowed')

        return v

    @field_validator('alias')
    def validate_alias(cls, v):
        if not v:
            return None
        if '/' in v:
            raise ValueError('alias must not contain "/"')
        return v


class AliasUpdateRequest(BaseModel):
    new_alias: str

    @field_validator('new_alias')
    def validate_new_alias(cls, v):
        if '/' in v:
            raise ValueError('alias must not contain "/"')
        return v
