from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from link_shortener.schemas.url import (
    ErrorResponse,
    MessageResponse,
    ShortenResponse,
    URLRequest,
    UrlMapping,
)
from link_shortener.services.exceptions import ShortCodeNotFoundError
from link_shortener.services.url_service import URLService
from link_shortener.dependencies import get_url_service

router = APIRouter(prefix="/shorten", tags=["shorten"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Short code not found"}}
MISSING_URL = {400: {"model": ErrorResponse, "description": "Missing url field"}}


@router.post("", response_model=ShortenResponse, responses=MISSING_URL)
async def create_short_url(
    url_data: URLRequest,
    url_service: URLService = Depends(get_url_service)
):
    """Shorten a URL and return its new short code"""
    return await url_service.create_short_url(url_data.url)


@router.get(
    "/{short_code}",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={404: {"description": "Short code not found (plain text)"}},
)
async def redirect_to_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL and count the click.

    Not-found is answered in plain text rather than JSON.
    """
    try:
        url = await url_service.resolve_for_redirect(short_code)
    except ShortCodeNotFoundError as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_404_NOT_FOUND)

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


@router.put(
    "/{short_code}",
    response_model=MessageResponse,
    responses={**MISSING_URL, **NOT_FOUND},
)
async def update_url(
    short_code: str,
    url_data: URLRequest,
    url_service: URLService = Depends(get_url_service)
):
    """Point an existing short code at a new URL"""
    await url_service.update_url(short_code, url_data.url)
    return MessageResponse(message="URL updated successfully.")


@router.delete("/{short_code}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """Delete a short URL"""
    await url_service.delete_url(short_code)
    return MessageResponse(message="URL deleted successfully.")


@router.get("/{short_code}/stats", response_model=UrlMapping, responses=NOT_FOUND)
async def get_url_stats(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """Get code, URL, click count and creation time for a short URL"""
    return await url_service.get_mapping(short_code)
