# Clearopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Parser behaviour settings, shared by the parser and the config loader."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParserSettings(BaseModel):
    """
    Settings that change how `CommandLineParser` matches and validates options.

    Attributes:
        case_sensitive: Match option names (and the help option) case-sensitively.
        mutually_exclusive: Enforce `mutually_exclusive_set` groups.
        ignore_unknown_arguments: Skip unknown options instead of failing.
        report_all_violations: Report every mutual-exclusion group and missing
            required option instead of stopping at the first of each.
        maximum_display_width: Width used when rendering the help screen.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    case_sensitive: bool = True
    mutually_exclusive: bool = False
    ignore_unknown_arguments: bool = False
    report_all_violations: bool = False
    maximum_display_width: int = Field(default=80, ge=20)
