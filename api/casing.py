import logging

from fastapi import APIRouter, HTTPException, Query

from schemas.casing import (
    CaseChainRequest,
    CaseChainResponse,
    CaseConversionRequest,
    CaseConversionResponse,
    CasingRuleSchema,
)
from services.casing import CASING_RULES, UnknownCasingRule, convert_all, convert_chain

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/case", tags=["case"])


@router.get("/rules", response_model=list[CasingRuleSchema])
async def list_rules():
    return [CasingRuleSchema(key=r.key, name=r.name) for r in CASING_RULES]


@router.get("", response_model=CaseConversionResponse)
async def convert(text: str = Query("", description="Raw input; every rule is applied to it")):
    """Convert the input with every casing rule."""
    logger.debug("Converting %d characters", len(text))
    return CaseConversionResponse(input=text, results=convert_all(text))


@router.post("", response_model=CaseConversionResponse)
async def convert_body(body: CaseConversionRequest):
    """Same as GET, with the text in the body. Called by the converter page on each keystroke."""
    logger.debug("Converting %d characters", len(body.text))
    return CaseConversionResponse(input=body.text, results=convert_all(body.text))


@router.post("/chain", response_model=CaseChainResponse)
async def convert_in_sequence(body: CaseChainRequest):
    try:
        output = convert_chain(body.text, body.modes)
    except UnknownCasingRule as e:
        logger.warning("Rejected chain %s: %s", body.modes, e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return CaseChainResponse(input=body.text, modes=body.modes, output=output)
