from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes as camelCase; accepts snake_case or camelCase on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CasingRuleSchema(CamelModel):
    key: str
    name: str


class CasingResultSchema(CamelModel):
    key: str
    name: str
    output: str


class CaseConversionResponse(CamelModel):
    input: str
    results: list[CasingResultSchema]


class CaseChainRequest(CamelModel):
    """Apply several casing modes in sequence to one input."""
    text: str = ""
    modes: list[str] = Field(..., min_length=1, description="Rule keys applied left to right, e.g. ['lower', 'kebab']")


class CaseChainResponse(CamelModel):
    input: str
    modes: list[str]
    output: str


class CaseConversionRequest(CamelModel):
    """Body form of GET /api/case; the page posts this so input length is not bound by the URL."""
    text: str = ""
