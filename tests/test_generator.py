import pandas as pd

from data_designer_humanizer import HumanizerAnalysisColumnConfig, HumanizerRewriteColumnConfig
from data_designer_humanizer.generator import rewrite_rows, score_rows


ARTICLES = pd.DataFrame({
    "title": ["Hello", "Notes"],
    "article": [
        "world.",
        "We utilize robust tools daily. It is crucial that we leverage them. They are cheap",
    ],
})


class TestScoreRows:
    def test_is_valid_boundary(self):
        # "Hello world." scores exactly 20
        at_limit = HumanizerAnalysisColumnConfig(name="ai", target_columns=["title", "article"], max_ai_score=20)
        below_limit = HumanizerAnalysisColumnConfig(name="ai", target_columns=["title", "article"], max_ai_score=19)
        assert score_rows(ARTICLES, at_limit)[0]["ai_score"] == 20
        assert score_rows(ARTICLES, at_limit)[0]["is_valid"] is True
        assert score_rows(ARTICLES, below_limit)[0]["is_valid"] is False

    def test_default_output_shape(self):
        config = HumanizerAnalysisColumnConfig(name="ai", target_columns=["article"])
        results = score_rows(ARTICLES, config)
        assert len(results) == 2
        assert set(results[1]) == {
            "is_valid", "ai_score", "readability_score", "word_count",
            "sentence_count", "suggestions", "flagged_phrases",
        }
        assert [p["phrase"] for p in results[1]["flagged_phrases"]] == ["leverage", "utilize", "crucial", "robust"]

    def test_optional_fields_can_be_dropped(self):
        config = HumanizerAnalysisColumnConfig(
            name="ai", target_columns=["article"], include_suggestions=False, include_flagged_phrases=False,
        )
        for output in score_rows(ARTICLES, config):
            assert "suggestions" not in output
            assert "flagged_phrases" not in output

    def test_missing_values_are_skipped(self):
        data = pd.DataFrame({"a": ["Hello", None], "b": [float("nan"), "world."]})
        config = HumanizerAnalysisColumnConfig(name="ai", target_columns=["a", "b"])
        results = score_rows(data, config)
        assert results[0]["word_count"] == 1
        assert results[1]["word_count"] == 1


class TestRewriteRows:
    def test_plain_output(self):
        config = HumanizerRewriteColumnConfig(name="casual", target_column="article", level="medium", seed=1)
        results = rewrite_rows(ARTICLES, config)
        assert len(results) == 2
        assert all(isinstance(r, str) for r in results)
        assert "It is" not in results[1]
        assert "they're cheap" in results[1]

    def test_seed_reproduces_whole_run(self):
        config = HumanizerRewriteColumnConfig(name="casual", target_column="article", level="heavy", seed=7)
        data = pd.concat([ARTICLES] * 5, ignore_index=True)
        assert rewrite_rows(data, config) == rewrite_rows(data, config)

    def test_include_scores(self):
        data = pd.DataFrame({"article": ["delve leverage paramount"]})
        config = HumanizerRewriteColumnConfig(
            name="casual", target_column="article", level="heavy", seed=3, include_scores=True,
        )
        (output,) = rewrite_rows(data, config)
        assert set(output) == {"text", "ai_score_before", "ai_score_after"}
        assert output["ai_score_before"] == 99
        assert 5 <= output["ai_score_after"] <= 99
        assert isinstance(output["text"], str)

    def test_professional_mode_from_config(self):
        data = pd.DataFrame({"article": ["We need help"]})
        config = HumanizerRewriteColumnConfig(name="formal", target_column="article", level="light", mode="professional")
        (output,) = rewrite_rows(data, config)
        assert output.split()[0] == "We"
        assert len(output.split()) == 3

    def test_missing_values_pass_through(self):
        data = pd.DataFrame({"article": ["it is fine", None, float("nan")]})
        config = HumanizerRewriteColumnConfig(name="casual", target_column="article", seed=0)
        results = rewrite_rows(data, config)
        assert results[0] == "it's fine"
        assert results[1] is None
        assert pd.isna(results[2])
