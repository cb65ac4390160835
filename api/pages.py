from pathlib import Path

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from config import settings
from services.casing import convert_all

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def landing(request: Request):
    return templates.TemplateResponse(request, "index.html", {"app_name": settings.app_name})


@router.get("/app/case", response_class=HTMLResponse)
async def case_converter(request: Request, text: str = Query("")):
    """
    Converter page. Rendered server-side for the given text so the first paint
    already shows all outputs; the page script then keeps them in sync with the input.
    """
    return templates.TemplateResponse(
        request,
        "case.html",
        {"app_name": settings.app_name, "text": text, "results": convert_all(text)},
    )
