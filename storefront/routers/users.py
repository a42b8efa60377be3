from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from storefront.routers.deps import get_user_service, json_body
from storefront.services import user_service as users
from storefront.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])

_REGISTER_ERRORS = {
    users.REGISTER_INVALID: (400, "Username and password are required"),
    users.REGISTER_EMPTY_USERNAME: (400, "Username cannot be empty"),
    users.REGISTER_RESERVED: (400, "This username is reserved for the admin"),
    users.REGISTER_TAKEN: (409, "This username is already taken"),
}

_LOGIN_ERRORS = {
    users.LOGIN_INVALID: (400, "Username and password are required"),
    users.LOGIN_ADMIN: (403, "Use the admin dashboard to sign in as admin"),
    users.LOGIN_BAD_CREDENTIALS: (401, "Invalid username or password"),
}


@router.post("/register")
def register(payload: dict = Depends(json_body), service: UserService = Depends(get_user_service)):
    result = service.register(payload.get("username"), payload.get("password"), payload.get("fullName"))
    if not result.ok:
        status, message = _REGISTER_ERRORS[result.status]
        raise HTTPException(status, message)
    return JSONResponse({"ok": True, "username": result.user["username"]}, status_code=201)


@router.post("/login")
def login(payload: dict = Depends(json_body), service: UserService = Depends(get_user_service)):
    result = service.login(payload.get("username"), payload.get("password"))
    if not result.ok:
        status, message = _LOGIN_ERRORS[result.status]
        raise HTTPException(status, message)
    return {"ok": True, "role": "user", "username": result.username, "fullName": result.full_name}
