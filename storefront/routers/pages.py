from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["pages"])


@router.get("/admin")
def admin_page(request: Request):
    page = request.app.state.settings.static_dir / "admin.html"
    if not page.is_file():
        raise HTTPException(404, "Not found")
    return FileResponse(page, media_type="text/html")
