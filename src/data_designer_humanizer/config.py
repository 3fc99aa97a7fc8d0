# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_humanizer.core import HumanizationLevel, WritingMode


class HumanizerAnalysisColumnConfig(SingleColumnConfig):
    """Score text columns for AI-typical vocabulary and uniform sentence rhythm.

    Produces an AI-likeness score (5-99, 0 for empty text), a readability estimate
    (10-100), word and sentence counts, and optional suggestions and flagged words.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        max_ai_score: Highest AI score that still counts as ``is_valid=True``.
        include_suggestions: Include rewrite suggestions in output.
        include_flagged_phrases: Include the trigger words found in output.
    """

    target_columns: list[str]
    max_ai_score: int = Field(default=50, ge=0, le=100, description="Maximum AI score for is_valid=True")
    include_suggestions: bool = Field(default=True, description="Include rewrite suggestions in output")
    include_flagged_phrases: bool = Field(default=True, description="Include flagged trigger words in output")
    column_type: Literal["humanizer-analysis"] = "humanizer-analysis"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50d"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []


class HumanizerRewriteColumnConfig(SingleColumnConfig):
    """Rewrite a text column toward a casual or formal register.

    Attributes:
        target_column: Column holding the text to rewrite.
        level: Substitution intensity. ``heavy`` also inserts fillers or transitions.
        mode: ``general`` rewrites casually and folds contractions; ``professional``
            rewrites formally.
        seed: Seed for the random source, for reproducible runs.
        include_scores: Store a dict with the rewrite and its AI score before and after
            instead of the bare rewritten text.
    """

    target_column: str
    level: HumanizationLevel = Field(default=HumanizationLevel.MEDIUM, description="Humanization intensity")
    mode: WritingMode = Field(default=WritingMode.GENERAL, description="Target writing register")
    seed: int | None = Field(default=None, description="Random seed for reproducible rewrites")
    include_scores: bool = Field(default=False, description="Include AI scores before and after the rewrite")
    column_type: Literal["humanizer-rewrite"] = "humanizer-rewrite"

    @staticmethod
    def get_column_emoji() -> str:
        return "✍️"

    @property
    def required_columns(self) -> list[str]:
        return [self.target_column]

    @property
    def side_effect_columns(self) -> list[str]:
        return []
