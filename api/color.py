import logging

from fastapi import APIRouter, HTTPException, Query

from schemas.color import ColorConversionResponse, ColorFormatResponse
from services.color import ColorParseError, named_color_names, parse_color

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/color", tags=["color"])


@router.get("", response_model=ColorConversionResponse)
async def convert_color(value: str = Query(..., description='Colour in any supported notation, e.g. "#ff5500" or "hsl(20, 100%, 50%)"')):
    try:
        color = parse_color(value)
    except ColorParseError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ColorConversionResponse(input=value, formats=color.format_all())


@router.get("/names", response_model=list[str])
async def list_named_colors():
    return named_color_names()


@router.get("/{target}", response_model=ColorFormatResponse)
async def convert_color_to(target: str, value: str = Query(...)):
    try:
        output = parse_color(value).format(target)
    except ColorParseError as e:
        logger.warning("Rejected color conversion to %s: %s", target, e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ColorFormatResponse(input=value, format=target, output=output)
