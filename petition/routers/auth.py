"""Router autentykacji - logowanie i wylogowanie."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from ..dependencies import Services, get_services

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    services: Services = Depends(get_services),
):
    """Przetworz formularz logowania.

    Sukces i porazka koncza sie przekierowaniem na /admin; przy porazce
    sesja anonimowa niesie komunikat do pokazania na stronie logowania.
    """
    session_id = services.cookies.get_session_id(request)
    result = await services.gate.submit(session_id, username, password)

    response = RedirectResponse("/admin", status_code=302)
    services.cookies.set_session(response, result.session_id)

    return response


@router.get("/logout")
async def logout(
    request: Request,
    services: Services = Depends(get_services),
):
    """Wyloguj uzytkownika."""
    services.gate.logout(services.cookies.get_session_id(request))

    response = RedirectResponse("/", status_code=302)
    services.cookies.clear_session(response)

    return response
