"""Publiczna strona petycji - formularz podpisu i lista podpisów."""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from ..dependencies import Services, get_services
from ..exceptions import DuplicateSignatureError
from ..schemas import SignatureCreate
from ..templating import templates

router = APIRouter(tags=["registration"])


async def _render_index(
    request: Request,
    services: Services,
    form: Optional[dict] = None,
    errors: Optional[dict] = None,
    status_code: int = 200,
):
    total = await services.signatures.count()
    signatures = await services.signatures.fetch_page(0, services.settings.page_limit_default)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": services.settings.app_name,
            "signatures": signatures,
            "total": total,
            "form": form or {},
            "errors": errors or {},
        },
        status_code=status_code,
    )


@router.get("/")
async def index(request: Request, services: Services = Depends(get_services)):
    """Strona glowna - formularz i lista podpisow."""
    return await _render_index(request, services)


@router.post("/")
async def sign(
    request: Request,
    name: str = Form(""),
    national_id: str = Form(""),
    comment: str = Form(""),
    anonymous: bool = Form(False),
    services: Services = Depends(get_services),
):
    """Zapisz podpis albo pokaz formularz z bledami."""
    form = {
        "name": name,
        "national_id": national_id,
        "comment": comment,
        "anonymous": anonymous,
    }

    try:
        data = SignatureCreate.model_validate(form)
    except ValidationError as exc:
        errors = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            errors.setdefault(field, error["msg"])
        return await _render_index(request, services, form, errors, status_code=400)

    try:
        await services.signatures.create(data)
    except DuplicateSignatureError:
        errors = {"national_id": "Ten numer już podpisał petycję"}
        return await _render_index(request, services, form, errors, status_code=400)

    return RedirectResponse("/", status_code=302)
