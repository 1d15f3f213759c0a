# Auth router: Shopify app install redirect and OAuth callback.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse

from scango.api.v1.schemas.auth import CallbackResponse
from scango.oauth.install import STATE_COOKIE, authorization_request, state_cookie_options
from scango.oauth.models import CallbackQuery

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

INSTALLED_MESSAGE = "Scan & Go successfully authorised. You can close this tab."
TOKEN_MESSAGE = (
    "Scan & Go successfully authorised. Copy the access token into SHOPIFY_ADMIN_TOKEN now; "
    "it will not be shown again."
)


@router.get("/auth")
@router.get("/auth/install")
async def install():
    """Redirect the installer to the shop's OAuth consent screen."""
    from scango.config import get_settings

    settings = get_settings()
    auth_request, error = authorization_request(settings)
    if error:
        raise HTTPException(status_code=error.status_code, detail=error.detail)

    response = RedirectResponse(auth_request.url, status_code=302)
    response.set_cookie(value=auth_request.state, **state_cookie_options(settings))
    logger.info("Install redirect issued for %s", auth_request.shop)
    return response


@router.get("/auth/callback", response_model=CallbackResponse)
async def callback(request: Request):
    """Verify Shopify's signed redirect and exchange the code for a token."""
    from scango.oauth.callback import get_authorizer

    authorizer = get_authorizer()
    query = CallbackQuery.from_items(request.query_params.multi_items())
    result, error = await authorizer.handle(query, request.cookies.get(STATE_COOKIE))

    if error:
        response = JSONResponse(status_code=error.status_code, content={"detail": error.detail})
    else:
        body = CallbackResponse(
            shop=result.shop,
            scope=result.scope,
            message=TOKEN_MESSAGE if result.access_token else INSTALLED_MESSAGE,
            access_token=result.access_token,
        )
        response = JSONResponse(content=body.model_dump(exclude_none=True))

    # The nonce is single-use whatever the outcome.
    options = state_cookie_options(authorizer.settings)
    response.delete_cookie(
        key=STATE_COOKIE,
        path=options["path"],
        secure=options["secure"],
        httponly=True,
        samesite="lax",
    )
    return response
