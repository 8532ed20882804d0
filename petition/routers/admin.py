"""Panel administracyjny - lista podpisów i usuwanie."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse

from ..auth import AuthContext
from ..dependencies import Services, get_auth_context, get_services
from ..templating import templates

router = APIRouter(tags=["admin"])


def _wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")


@router.get("/admin")
async def admin_panel(
    request: Request,
    offset: int = Query(0, description="Pozycja pierwszego podpisu"),
    limit: Optional[int] = Query(None, description="Liczba podpisów na stronie"),
    context: AuthContext = Depends(get_auth_context),
    services: Services = Depends(get_services),
):
    """Strona logowania dla gości, lista podpisów dla zalogowanych."""
    settings = services.settings

    if not context.is_authenticated:
        messages = services.gate.drain_messages(context)
        response = templates.TemplateResponse(
            request,
            "login.html",
            {
                "title": f"{settings.app_name} - Logowanie",
                "message": ", ".join(messages),
            },
        )
        if context.session_id is None and services.cookies.cookie_name in request.cookies:
            # Wygasła lub nieznana sesja - sprzątamy cookie
            services.cookies.clear_session(response)
        return response

    if limit is None:
        limit = settings.page_limit_default
    page = await services.lister.list(offset, limit)

    if _wants_json(request):
        response = JSONResponse(page.to_json())
    else:
        response = templates.TemplateResponse(
            request,
            "admin.html",
            {
                "title": f"{settings.app_name} - Panel",
                "user": context.principal,
                "page": page,
            },
        )

    if settings.session_rolling:
        services.cookies.set_session(response, context.session_id)

    return response


@router.get("/{record_id:int}")
async def delete_signature(
    request: Request,
    record_id: int,
    services: Services = Depends(get_services),
):
    """Usun podpis. Bez sesji tylko przekierowanie na /admin."""
    session_id = services.cookies.get_session_id(request)
    await services.deletion.delete_by_id(session_id, record_id)

    return RedirectResponse("/admin", status_code=302)
