"""API routes for building and saving deep-link templates.

The builder is stateless over HTTP: each edit posts the current template and
gets the updated template back.
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lib.deeplink.errors import InvalidUrlError, MissingUrlError, TemplateSaveError
from lib.deeplink.models import Template
from lib.deeplink.variables import VARIABLE_CATALOG, InternalVariable
from services.deeplink import service
from services.deeplink.service import BuilderState

router = APIRouter(prefix="/api")


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VariableOut(_Body):
    key: InternalVariable
    label: str
    format_hint: Optional[str] = None


class ParseBody(_Body):
    """Example: {"url": "https://example.com/booking?arrive=2025-12-05&depart=2025-12-08"}"""

    url: str


class AssignBody(_Body):
    template: Template
    slot_id: str
    source_variable: Optional[InternalVariable] = None  # null clears the assignment


class FormatBody(_Body):
    template: Template
    slot_id: str
    format_pattern: str


class UppercaseBody(_Body):
    template: Template
    slot_id: str
    uppercase: bool


class SaveBody(_Body):
    template: Template


class SaveResponse(_Body):
    saved: bool
    result: Any


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def _template_response(state: BuilderState) -> dict:
    template = service.build_template(state)
    if template is None:
        raise HTTPException(status_code=400, detail="Please parse a URL first")
    return template.to_payload()


@router.get("/variables", response_model=list[VariableOut], response_model_by_alias=True)
async def list_variables():
    return [
        VariableOut(key=spec.key, label=spec.label, format_hint=spec.format_hint)
        for spec in VARIABLE_CATALOG
    ]


@router.post("/templates/parse")
async def parse_template(body: ParseBody):
    try:
        state = service.parse_example(BuilderState(), body.url)
    except (MissingUrlError, InvalidUrlError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _template_response(state)


@router.post("/templates/assign")
async def assign_variable(body: AssignBody):
    state = BuilderState.from_template(body.template)
    return _template_response(service.assign(state, body.slot_id, body.source_variable))


@router.post("/templates/format")
async def edit_format(body: FormatBody):
    state = BuilderState.from_template(body.template)
    return _template_response(service.edit_format(state, body.slot_id, body.format_pattern))


@router.post("/templates/uppercase")
async def edit_uppercase(body: UppercaseBody):
    state = BuilderState.from_template(body.template)
    return _template_response(service.edit_uppercase(state, body.slot_id, body.uppercase))


@router.post("/templates/save", response_model=SaveResponse)
async def save_template(body: SaveBody):
    try:
        result = await service.save_template(body.template)
    except TemplateSaveError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return SaveResponse(saved=True, result=result)
