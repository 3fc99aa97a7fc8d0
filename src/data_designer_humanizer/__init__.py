# SPDX-License-Identifier: Apache-2.0
"""Humanizer plugin for NeMo Data Designer.

Adds two column types: ``humanizer-analysis`` scores text for AI-typical vocabulary
and uniform sentence rhythm, and ``humanizer-rewrite`` rewrites text toward a casual
or formal register. Pure heuristics, no LLM calls.

Usage::

    from data_designer_humanizer import HumanizerRewriteColumnConfig

    builder.add_column(HumanizerRewriteColumnConfig(
        name="article_casual",
        target_column="article",
        level="heavy",
        mode="general",
        seed=7,
    ))
"""

from data_designer_humanizer.config import HumanizerAnalysisColumnConfig, HumanizerRewriteColumnConfig
from data_designer_humanizer.core import (
    AnalysisResult,
    FlaggedPhrase,
    HumanizationLevel,
    Hyperparameters,
    TextStats,
    WritingMode,
    analyze_text,
    get_stats,
    humanize_text,
)

__all__ = [
    "HumanizerAnalysisColumnConfig",
    "HumanizerRewriteColumnConfig",
    "AnalysisResult",
    "FlaggedPhrase",
    "HumanizationLevel",
    "Hyperparameters",
    "TextStats",
    "WritingMode",
    "analyze_text",
    "get_stats",
    "humanize_text",
]
