from schemas.casing import (
    CaseChainRequest,
    CaseChainResponse,
    CaseConversionRequest,
    CaseConversionResponse,
    CasingResultSchema,
    CasingRuleSchema,
)
from schemas.color import ColorConversionResponse, ColorFormatResponse

__all__ = [
    "CaseChainRequest",
    "CaseChainResponse",
    "CaseConversionRequest",
    "CaseConversionResponse",
    "CasingResultSchema",
    "CasingRuleSchema",
    "ColorConversionResponse",
    "ColorFormatResponse",
]
