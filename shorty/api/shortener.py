from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
import logging

from shorty.api.deps import get_service, verify_credentials
from shorty.db.storage import URLAlreadyExistsError, URLNotFoundError, StoreFailureError
from shorty.schemas import URLCreateRequest, AliasUpdateRequest, URLResponse
from shorty.services.shortener import URLService, InvalidAliasError, AliasGenerationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", dependencies=[Depends(verify_credentials)])


@router.post("/url", response_model=URLResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def save_url_endpoint(url_request: URLCreateRequest, service: URLService = Depends(get_service)):
    original_url = url_request.url
    try:
        new_id, alias = service.create_short_url(original_url, url_request.alias)
    except URLAlreadyExistsError as e:
        logger.info("Save 409: alias already taken: %s", e.alias)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="url already exists")
    except AliasGenerationError as e:
        logger.error("Save 503: %s (url=%s)", e, original_url[:50])
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                            detail="failed to generate a unique alias")
    except StoreFailureError:
        logger.exception("Failed to save url %s", original_url[:50])
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="failed to save url")

    logger.info("Saved %s... as %s (id=%d)", original_url[:50], alias, new_id)
    return URLResponse.ok(alias=alias)


@router.get("/{alias}", tags=["redirect"])
def redirect_to_url_endpoint(alias: str, service: URLService = Depends(get_service)):
    try:
        target = service.resolve(alias)
    except URLNotFoundError:
        logger.info("Redirect 404: alias not found: %s", alias)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="url not found for given alias")
    except StoreFailureError:
        logger.exception("Failed to get url for alias %s", alias)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error")

    logger.debug("Redirect %s -> %s", alias, target[:50])
    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)


@router.patch("/url/{alias}", response_model=URLResponse, response_model_exclude_none=True)
def rename_alias_endpoint(alias: str, update_request: AliasUpdateRequest,
                          service: URLService = Depends(get_service)):
    new_alias = update_request.new_alias
    try:
        service.rename_alias(alias, new_alias)
    except InvalidAliasError as e:
        logger.info("Rename 400: %s (old=%s, new=%s)", e, alias, new_alias)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"invalid request: {e}")
    except URLNotFoundError:
        logger.info("Rename 404: alias not found: %s", alias)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="url not found for given alias")
    except URLAlreadyExistsError:
        logger.info("Rename 409: alias already taken: %s", new_alias)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="alias already exists")
    except StoreFailureError:
        logger.exception("Failed to rename %s to %s", alias, new_alias)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error")

    logger.info("Renamed alias %s -> %s", alias, new_alias)
    return URLResponse.ok(alias=new_alias)


@router.delete("/url/{alias}", response_model=URLResponse, response_model_exclude_none=True)
def delete_alias_endpoint(alias: str, service: URLService = Depends(get_service)):
    try:
        service.delete_alias(alias)
    except StoreFailureError:
        logger.exception("Failed to delete alias %s", alias)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error")

    logger.info("Deleted alias %s", alias)
    return URLResponse.ok()
