# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
import random

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_humanizer.config import HumanizerAnalysisColumnConfig, HumanizerRewriteColumnConfig
from data_designer_humanizer.core import analyze_text, humanize_text

logger = logging.getLogger(__name__)


def _row_text(values) -> str:
    return " ".join(str(v) for v in values if v is not None and not pd.isna(v))


def score_rows(data: pd.DataFrame, config: HumanizerAnalysisColumnConfig) -> list[dict]:
    """Analyze the concatenated target columns of every row."""
    results = []
    for _, row in data[config.target_columns].iterrows():
        analysis = analyze_text(_row_text(row.values))
        output: dict = {
            "is_valid": analysis.ai_score <= config.max_ai_score,
            "ai_score": analysis.ai_score,
            "readability_score": analysis.readability_score,
            "word_count": analysis.word_count,
            "sentence_count": analysis.sentence_count,
        }
        if config.include_suggestions:
            output["suggestions"] = list(analysis.suggestions)
        if config.include_flagged_phrases:
            output["flagged_phrases"] = [p.to_payload() for p in analysis.flagged_phrases]
        results.append(output)
    return results


def rewrite_rows(data: pd.DataFrame, config: HumanizerRewriteColumnConfig) -> list:
    """Humanize the target column of every row. Missing values pass through unchanged.

    One random source serves the whole run, so a fixed ``seed`` reproduces every row.
    """
    rng = random.Random(config.seed)
    results = []
    for value in data[config.target_column]:
        if value is None or pd.isna(value):
            results.append(value)
            continue
        text = str(value)
        rewritten = humanize_text(text, config.level, config.mode, rng=rng)
        if config.include_scores:
            results.append({
                "text": rewritten,
                "ai_score_before": analyze_text(text).ai_score,
                "ai_score_after": analyze_text(rewritten).ai_score,
            })
        else:
            results.append(rewritten)
    return results


class HumanizerAnalysisColumnGenerator(ColumnGeneratorFullColumn[HumanizerAnalysisColumnConfig]):
    """Column generator that scores text for AI-likeness and readability."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50d Scoring column {self.config.name!r} for AI-typical writing")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_ai_score: {self.config.max_ai_score}")

        results = score_rows(data, self.config)
        data = data.copy()
        data[self.config.name] = results
        return data


class HumanizerRewriteColumnGenerator(ColumnGeneratorFullColumn[HumanizerRewriteColumnConfig]):
    """Column generator that rewrites text with the humanization engine."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"✍️ Rewriting column {self.config.target_column!r} into {self.config.name!r}")
        logger.info(f"   level: {self.config.level}, mode: {self.config.mode}")
        if self.config.seed is not None:
            logger.info(f"   seed: {self.config.seed}")

        results = rewrite_rows(data, self.config)
        data = data.copy()
        data[self.config.name] = results
        return data
