"""Deep-link template builder service: public interface."""

from services.deeplink.service import (
    BuilderState,
    assign,
    build_template,
    edit_format,
    edit_uppercase,
    parse_example,
    save_template,
)

__all__ = [
    "BuilderState",
    "parse_example",
    "assign",
    "edit_format",
    "edit_uppercase",
    "build_template",
    "save_template",
]
