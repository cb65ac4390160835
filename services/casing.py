"""
Casing rules shown on the converter page.
Each rule is a pure, total str -> str transform. Words are split on the literal
single space only, so runs of spaces yield empty words (kept, not merged).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from schemas.casing import CasingResultSchema

logger = logging.getLogger(__name__)

WORD_SEPARATOR = " "


class UnknownCasingRule(KeyError):
    """Raised when a casing rule key does not name any rule."""

    def __init__(self, key: str, valid_keys: Iterable[str]):
        self.key = key
        self.valid_keys = tuple(valid_keys)
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown casing mode '{self.key}'. Valid modes: {', '.join(self.valid_keys)}"


@dataclass(frozen=True)
class CasingRule:
    key: str
    name: str
    transform: Callable[[str], str]


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def _lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def upper_case(text: str) -> str:
    return text.upper()


def lower_case(text: str) -> str:
    return text.lower()


def kebab_case(text: str) -> str:
    return "-".join(text.split(WORD_SEPARATOR))


def snake_case(text: str) -> str:
    return "_".join(text.split(WORD_SEPARATOR))


def camel_case(text: str) -> str:
    """Lowercase the first character of every word; the rest of each word is kept as typed."""
    return "".join(_lower_first(w) for w in text.split(WORD_SEPARATOR))


def pascal_case(text: str) -> str:
    """Uppercase the first character of every word; the rest of each word is kept as typed."""
    return "".join(_upper_first(w) for w in text.split(WORD_SEPARATOR))


CASING_RULES: tuple[CasingRule, ...] = (
    CasingRule(key="upper", name="Upper Case", transform=upper_case),
    CasingRule(key="lower", name="Lower Case", transform=lower_case),
    CasingRule(key="kebab", name="Kebab Case", transform=kebab_case),
    CasingRule(key="snake", name="Snake Case", transform=snake_case),
    CasingRule(key="camel", name="Camel Case", transform=camel_case),
    CasingRule(key="pascal", name="Pascal Case", transform=pascal_case),
)

_RULES_BY_KEY = {rule.key: rule for rule in CASING_RULES}


def rule_keys() -> list[str]:
    return [rule.key for rule in CASING_RULES]


def get_rule(key: str) -> CasingRule:
    """Look up a rule by key (case-insensitive). Raises UnknownCasingRule if missing."""
    rule = _RULES_BY_KEY.get(key.strip().lower())
    if rule is None:
        raise UnknownCasingRule(key, rule_keys())
    return rule


def convert_all(text: str) -> list[CasingResultSchema]:
    """Apply every rule, in display order, to the same input."""
    return [
        CasingResultSchema(key=rule.key, name=rule.name, output=rule.transform(text))
        for rule in CASING_RULES
    ]


def convert_chain(text: str, modes: Iterable[str]) -> str:
    """
    Apply the named rules left to right, each to the previous output.
    All modes are resolved before anything is applied, so an unknown mode fails the whole chain.
    """
    rules = [get_rule(mode) for mode in modes]
    for rule in rules:
        text = rule.transform(text)
    logger.debug("Applied chain %s", [r.key for r in rules])
    return text
