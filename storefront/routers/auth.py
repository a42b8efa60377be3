from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from storefront.routers.deps import get_admin_auth, json_body
from storefront.services.auth_service import AdminAuthService
from storefront.services.session_service import admin_token, clear_admin_cookie, set_admin_cookie

router = APIRouter(prefix="/api", tags=["admin-auth"])


@router.post("/login")
def login(
    payload: dict = Depends(json_body),
    auth: AdminAuthService = Depends(get_admin_auth),
):
    token = auth.login(payload.get("username"), payload.get("password"))
    if not token:
        raise HTTPException(401, "Invalid credentials")
    resp = JSONResponse({"ok": True, "role": "admin"})
    set_admin_cookie(resp, token, secure=auth.settings.secure_cookies)
    return resp


@router.post("/logout")
def logout(request: Request, auth: AdminAuthService = Depends(get_admin_auth)):
    auth.logout(admin_token(request))
    resp = JSONResponse({"ok": True})
    clear_admin_cookie(resp)
    return resp


@router.get("/me")
def me(request: Request, auth: AdminAuthService = Depends(get_admin_auth)):
    return auth.whoami(admin_token(request)).as_dict()
