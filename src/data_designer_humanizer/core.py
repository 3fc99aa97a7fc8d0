# SPDX-License-Identifier: Apache-2.0
#
# Heuristic AI-likeness scorer and probabilistic "humanizer".
#
# Scores text from trigger-word density and sentence-length variance, and rewrites
# text through dictionary substitution, filler/transition insertion and contractions.

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Sequence

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class HumanizationLevel(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class WritingMode(str, Enum):
    GENERAL = "general"
    PROFESSIONAL = "professional"


# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Thresholds, weights and probabilities used by both engines."""

    trigger_density_weight: float = 300.0
    uniform_variance_max: float = 10.0
    uniform_variance_penalty: float = 20.0
    natural_variance_min: float = 50.0
    natural_variance_bonus: float = 10.0
    score_min: int = 5
    score_max: int = 99

    readability_max: float = 100.0
    readability_sentence_weight: float = 2.0
    readability_min: float = 10.0

    buzzword_advice_min: int = 2
    variety_advice_variance_max: float = 15.0
    long_sentence_advice_min: float = 25.0
    short_text_word_count: int = 20

    light_probability: float = 0.3
    medium_probability: float = 0.6
    heavy_probability: float = 0.9
    filler_probability: float = 0.25
    filler_min_chars: int = 10
    fillers: tuple[str, ...] = ("Honestly,", "Basically,", "You know,", "Look,", "To be fair,", "Actually,")
    transition_probability: float = 0.2
    transition_min_chars: int = 15
    transitions: tuple[str, ...] = ("Furthermore,", "Consequently,", "In addition,", "Moreover,", "Therefore,", "Notably,")

    def replacement_probability(self, level: HumanizationLevel) -> float:
        if level == HumanizationLevel.LIGHT:
            return self.light_probability
        if level == HumanizationLevel.MEDIUM:
            return self.medium_probability
        return self.heavy_probability


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextStats:
    chars: int
    words: int
    sentences: int


@dataclass(frozen=True)
class FlaggedPhrase:
    phrase: str
    reason: str

    def to_payload(self) -> dict[str, str]:
        return {"phrase": self.phrase, "reason": self.reason}


@dataclass(frozen=True)
class AnalysisResult:
    ai_score: int
    readability_score: int
    word_count: int
    sentence_count: int
    suggestions: tuple[str, ...] = ()
    flagged_phrases: tuple[FlaggedPhrase, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        return {
            "ai_score": self.ai_score,
            "readability_score": self.readability_score,
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "suggestions": list(self.suggestions),
            "flagged_phrases": [p.to_payload() for p in self.flagged_phrases],
        }


class RandomSource(Protocol):
    def random(self) -> float: ...

    def choice(self, seq: Sequence[str]) -> str: ...


# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

TRIGGER_WORDS: tuple[str, ...] = (
    "delve", "landscape", "tapestry", "nuance", "leverage", "utilize",
    "harness", "unleash", "paramount", "crucial", "pivotal", "foster",
    "game-changer", "transformative", "meticulous", "comprehensive",
    "realm", "underscore", "highlight", "moreover", "furthermore",
    "consequently", "seamlessly", "robust", "paradigm",
)

# Formal -> casual. Applied in this order.
GENERAL_SYNONYMS: tuple[tuple[str, str], ...] = (
    ("utilize", "use"),
    ("leverage", "use"),
    ("facilitate", "help"),
    ("demonstrate", "show"),
    ("subsequently", "later"),
    ("nevertheless", "but"),
    ("furthermore", "also"),
    ("moreover", "plus"),
    ("commence", "start"),
    ("terminate", "end"),
    ("endeavor", "try"),
    ("approximately", "about"),
    ("purchase", "buy"),
    ("require", "need"),
    ("obtain", "get"),
    ("seamlessly", "smoothly"),
    ("robust", "strong"),
    ("paramount", "key"),
    ("crucial", "vital"),
    ("unleash", "release"),
    ("harness", "control"),
    ("delve", "dig"),
)

# Casual -> formal. Applied in this order.
PROFESSIONAL_SYNONYMS: tuple[tuple[str, str], ...] = (
    ("get", "obtain"),
    ("buy", "purchase"),
    ("bad", "suboptimal"),
    ("good", "beneficial"),
    ("fix", "rectify"),
    ("ask", "inquire"),
    ("need", "require"),
    ("start", "initiate"),
    ("end", "conclude"),
    ("help", "assist"),
    ("try", "attempt"),
    ("use", "leverage"),
    ("maybe", "perhaps"),
    ("really", "significantly"),
    ("very", "highly"),
    ("think", "believe"),
    ("make", "generate"),
    ("give", "provide"),
    ("keep", "maintain"),
    ("show", "demonstrate"),
    ("tell", "inform"),
    ("fast", "expedited"),
    ("slow", "gradual"),
    ("change", "modify"),
    ("idea", "concept"),
    ("problem", "challenge"),
    ("result", "outcome"),
)

CONTRACTIONS: tuple[tuple[str, str], ...] = (
    ("cannot", "can't"),
    ("do not", "don't"),
    ("is not", "isn't"),
    ("we are", "we're"),
    ("they are", "they're"),
    ("it is", "it's"),
)

TRIGGER_REASON = "Commonly overused by AI."

SUGGEST_BUZZWORDS = "Reduce the use of complex, 'buzzword' vocabulary."
SUGGEST_VARIETY = "Vary your sentence structure. Mix short and long sentences."
SUGGEST_SHORTER = "Your sentences are quite long. Try breaking them up."
SUGGEST_LONGER_TEXT = "Text is too short for accurate analysis."

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------


def _whole_word(phrase: str) -> re.Pattern[str]:
    return re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE)


_TRIGGER_RES = [(w, _whole_word(w)) for w in TRIGGER_WORDS]
_GENERAL_RES = [(_whole_word(src), dst) for src, dst in GENERAL_SYNONYMS]
_PROFESSIONAL_RES = [(_whole_word(src), dst) for src, dst in PROFESSIONAL_SYNONYMS]
_CONTRACTION_RES = [(_whole_word(src), dst) for src, dst in CONTRACTIONS]
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def get_stats(text: str) -> TextStats:
    """Count characters, whitespace-delimited words and sentences in ``text``."""
    if not text.strip():
        return TextStats(chars=len(text), words=0, sentences=0)
    return TextStats(chars=len(text), words=len(text.split()), sentences=len(_sentences(text)))


def _length_moments(text: str) -> tuple[float, float]:
    lengths = [len(s.split()) for s in _sentences(text)]
    n = len(lengths) or 1
    mean = sum(lengths) / n
    variance = sum((x - mean) ** 2 for x in lengths) / n
    return mean, variance


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_text(text: str, hyperparameters: Hyperparameters | None = None) -> AnalysisResult:
    """Score text for AI-typical vocabulary and uniform sentence rhythm.

    Args:
        text: The prose to analyze.
        hyperparameters: Optional tuning overrides. Uses the stock heuristics if omitted.

    Returns:
        An ``AnalysisResult``. Empty or whitespace-only text scores 0 with
        readability 100; any other text scores within ``[score_min, score_max]``.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    stats = get_stats(text)
    if stats.words == 0:
        return AnalysisResult(ai_score=0, readability_score=100, word_count=0, sentence_count=0)

    triggers_found = 0
    flagged: list[FlaggedPhrase] = []
    for word, pattern in _TRIGGER_RES:
        hits = len(pattern.findall(text))
        if hits:
            triggers_found += hits
            if not any(p.phrase == word for p in flagged):
                flagged.append(FlaggedPhrase(word, TRIGGER_REASON))

    avg_length, variance = _length_moments(text)

    raw = (triggers_found / stats.words) * hp.trigger_density_weight
    if variance < hp.uniform_variance_max:
        raw += hp.uniform_variance_penalty
    if variance > hp.natural_variance_min:
        raw -= hp.natural_variance_bonus
    ai_score = min(max(_round_half_up(raw), hp.score_min), hp.score_max)

    readability = max(hp.readability_max - avg_length * hp.readability_sentence_weight, hp.readability_min)

    suggestions: list[str] = []
    if triggers_found > hp.buzzword_advice_min:
        suggestions.append(SUGGEST_BUZZWORDS)
    if variance < hp.variety_advice_variance_max:
        suggestions.append(SUGGEST_VARIETY)
    if avg_length > hp.long_sentence_advice_min:
        suggestions.append(SUGGEST_SHORTER)
    if stats.words < hp.short_text_word_count:
        suggestions.append(SUGGEST_LONGER_TEXT)

    return AnalysisResult(
        ai_score=ai_score,
        readability_score=_round_half_up(readability),
        word_count=stats.words,
        sentence_count=stats.sentences,
        suggestions=tuple(suggestions),
        flagged_phrases=tuple(flagged),
    )


def _substitute(text: str, pairs: list[tuple[re.Pattern[str], str]], probability: float, rng: RandomSource) -> str:
    for pattern, replacement in pairs:
        text = pattern.sub(lambda m, r=replacement: r if rng.random() < probability else m.group(0), text)
    return text


def _prefix_segments(
    text: str, phrases: Sequence[str], probability: float, min_chars: int, rng: RandomSource
) -> str:
    out = []
    for segment in text.split(". "):
        # One draw per segment, short or not.
        if rng.random() < probability and len(segment) > min_chars:
            segment = f"{rng.choice(phrases)} {segment[:1].lower()}{segment[1:]}"
        out.append(segment)
    return ". ".join(out)


def humanize_text(
    text: str,
    level: HumanizationLevel,
    mode: WritingMode,
    rng: RandomSource | None = None,
    hyperparameters: Hyperparameters | None = None,
) -> str:
    """Rewrite text toward a casual (general) or formal (professional) register.

    Dictionary matches are replaced independently with a probability set by ``level``.
    At ``HEAVY`` some ". "-delimited segments also gain a leading filler (general) or
    transition (professional). General mode always folds common contractions.

    Output is random unless ``rng`` is seeded or stubbed.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    rng = rng or random.Random()
    level = HumanizationLevel(level)
    general = mode == WritingMode.GENERAL

    out = _substitute(
        text,
        _GENERAL_RES if general else _PROFESSIONAL_RES,
        hp.replacement_probability(level),
        rng,
    )

    if level == HumanizationLevel.HEAVY:
        if general:
            out = _prefix_segments(out, hp.fillers, hp.filler_probability, hp.filler_min_chars, rng)
        else:
            out = _prefix_segments(out, hp.transitions, hp.transition_probability, hp.transition_min_chars, rng)

    if general:
        for pattern, contraction in _CONTRACTION_RES:
            out = pattern.sub(contraction, out)

    return out
