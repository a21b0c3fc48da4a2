"""
Console router — the HTML form/list UI under /console.

The pages are rendered server-side from a `ConsoleState` built by
`ConsoleController`, which reaches the data only through the REST API.

Pages
─────
  GET  /console                      List + create form
  POST /console/vpcs                 Submit the create form
  GET  /console/vpcs/{vpc_id}/delete Ask for confirmation
  POST /console/vpcs/{vpc_id}/delete Delete once ``confirm=yes`` is posted
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.console.client import VPCApiClient
from app.console.controller import ConsoleController
from app.console.state import ConsoleState
from app.dependencies.console import get_console_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/console", tags=["Console"], include_in_schema=False)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "console" / "templates"))


def format_timestamp(value: Optional[str]) -> str:
    """Render an ISO-8601 timestamp as ``YYYY-MM-DD HH:MM:SS UTC``."""
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M:%S UTC")
    except ValueError:
        return value


templates.env.filters["timestamp"] = format_timestamp


def _render(request: Request, state: ConsoleState) -> HTMLResponse:
    return templates.TemplateResponse(request, "console.html", {"state": state})


@router.get("", response_class=HTMLResponse)
def console_home(request: Request, client: VPCApiClient = Depends(get_console_client)):
    logger.info("GET /console called")
    return _render(request, ConsoleController(client).load())


@router.post("/vpcs", response_class=HTMLResponse)
def console_create(
    request: Request,
    name: str = Form(""),
    cidr_block: str = Form("", alias="cidrBlock"),
    region: str = Form(""),
    description: str = Form(""),
    client: VPCApiClient = Depends(get_console_client),
):
    logger.info("POST /console/vpcs called")
    form = {"name": name, "cidrBlock": cidr_block, "region": region, "description": description}
    return _render(request, ConsoleController(client).create(form))


@router.get("/vpcs/{vpc_id}/delete", response_class=HTMLResponse)
def console_confirm_delete(
    request: Request,
    vpc_id: str,
    client: VPCApiClient = Depends(get_console_client),
):
    logger.info("GET /console/vpcs/%s/delete called", vpc_id)
    controller = ConsoleController(client)
    vpc = controller.confirm(vpc_id)
    if vpc is None:
        return _render(request, controller.reload_keeping_error())
    return templates.TemplateResponse(
        request, "confirm_delete.html", {"state": controller.state, "vpc": vpc}
    )


@router.post("/vpcs/{vpc_id}/delete", response_class=HTMLResponse)
def console_delete(
    request: Request,
    vpc_id: str,
    confirm: str = Form(""),
    client: VPCApiClient = Depends(get_console_client),
):
    logger.info("POST /console/vpcs/%s/delete called", vpc_id)
    if confirm != "yes":
        logger.info("Delete of '%s' not confirmed; nothing removed.", vpc_id)
        return RedirectResponse("/console", status_code=status.HTTP_303_SEE_OTHER)
    return _render(request, ConsoleController(client).delete(vpc_id))
