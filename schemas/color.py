from pydantic import Field

from schemas.casing import CamelModel


class ColorConversionResponse(CamelModel):
    input: str
    formats: dict[str, str] = Field(..., description="Colour rendered in each target notation, keyed by format")


class ColorFormatResponse(CamelModel):
    input: str
    format: str
    output: str
