"""Tests for DimensionScore and ClassificationResult."""

import itertools
from datetime import timedelta

import pytest
from tabsense_ml.data_models import (
    TOP_K_SIZE,
    TOP_K_THRESHOLD,
    ClassificationMetadata,
    ClassificationResult,
    Dimension,
    DimensionScore,
    LabelScore,
    SessionSummary,
)

from tests.shared.fixtures import NOW


def _status(*scores: float) -> DimensionScore:
    return DimensionScore(labels=Dimension.STATUS.labels, scores=scores)


def _expected_top_k(score: DimensionScore) -> list[tuple[str, float]]:
    ranked = sorted(zip(score.labels, score.scores), key=lambda item: item[1], reverse=True)
    return [item for item in ranked if item[1] > TOP_K_THRESHOLD][:TOP_K_SIZE]


class TestConstruction:
    def test_rejects_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="length mismatch"):
            DimensionScore(labels=("a", "b"), scores=(0.5,))

    def test_from_ranked_reorders_to_label_order(self) -> None:
        ranked = [
            LabelScore("search", 0.7),
            LabelScore("content", 0.2),
            LabelScore("communication", 0.1),
        ]
        score = DimensionScore.from_ranked(Dimension.CONTENT_TYPE, ranked)

        assert score.labels == ("content", "communication", "search")
        assert score.scores == (0.2, 0.1, 0.7)

    def test_from_ranked_fills_missing_labels_with_zero(self) -> None:
        score = DimensionScore.from_ranked(Dimension.INTENT, [LabelScore("navigational", 0.6)])

        assert score.scores == (0.0, 0.6, 0.0)


class TestTopK:
    def test_filters_threshold_and_caps_size(self) -> None:
        score = _status(0.9, 0.8, 0.7, 0.6, 0.3)

        assert [item.label for item in score.top_k] == ["to-read", "to-do", "reference"]

    def test_threshold_is_exclusive(self) -> None:
        score = _status(0.3, 0.31, 0.0, 0.0, 0.0)

        assert [item.label for item in score.top_k] == ["to-do"]

    def test_empty_top_k_has_zero_top_score(self) -> None:
        score = _status(0.1, 0.1, 0.1, 0.1, 0.1)

        assert score.top_k == ()
        assert score.top_label is None
        assert score.top_score == 0.0

    def test_ties_keep_label_order(self) -> None:
        score = _status(0.5, 0.5, 0.0, 0.0, 0.0)

        assert score.top_label == "to-read"


class TestWithBoost:
    def test_unknown_label_is_noop(self) -> None:
        score = _status(0.5, 0.35, 0.1, 0.05, 0.0)

        boosted = score.with_boost("communication", 0.3)

        assert boosted == score
        assert boosted.top_k == score.top_k

    def test_returns_new_value(self) -> None:
        score = _status(0.5, 0.35, 0.1, 0.05, 0.0)

        boosted = score.with_boost("reference", 0.1)

        assert score.scores[2] == 0.1
        assert boosted.scores[2] == pytest.approx(0.2)

    @pytest.mark.parametrize("amount", [2.0, -2.0, 0.75, -0.75])
    def test_clamps_to_unit_interval(self, amount: float) -> None:
        score = _status(0.5, 0.35, 0.1, 0.05, 0.0)

        for label in score.labels:
            score = score.with_boost(label, amount)
            assert all(0.0 <= s <= 1.0 for s in score.scores)

    def test_top_k_consistent_after_boost_sequences(self) -> None:
        amounts = (0.15, -0.1, 0.3, -0.4)
        labels = Dimension.STATUS.labels

        for sequence in itertools.product(labels, amounts, repeat=2):
            score = _status(0.5, 0.35, 0.25, 0.1, 0.0)
            pairs = zip(sequence[::2], sequence[1::2])
            for label, amount in pairs:
                score = score.with_boost(label, amount)
                assert [(i.label, i.score) for i in score.top_k] == _expected_top_k(score)

    def test_boost_can_reorder_top_k(self) -> None:
        score = _status(0.5, 0.0, 0.45, 0.0, 0.0)

        boosted = score.with_boost("reference", 0.1)

        assert boosted.top_label == "reference"


def _result(classified_at=NOW) -> ClassificationResult:
    return ClassificationResult(
        tab_id="42",
        classifications={
            Dimension.INTENT: DimensionScore(Dimension.INTENT.labels, (0.6, 0.3, 0.1)),
            Dimension.STATUS: _status(0.2, 0.2, 0.2, 0.2, 0.2),
            Dimension.CONTENT_TYPE: DimensionScore(Dimension.CONTENT_TYPE.labels, (0.9, 0.0, 0.0)),
        },
        metadata=ClassificationMetadata(
            model_version="distilbert-v1",
            classified_at=classified_at,
            session_context_summary=SessionSummary(3, ("a.com", "b.com")),
        ),
    )


class TestClassificationResult:
    def test_avg_top_score_counts_empty_dimension_as_zero(self) -> None:
        assert _result().avg_top_score == pytest.approx((0.6 + 0.0 + 0.9) / 3)

    def test_top_labels(self) -> None:
        assert _result().top_labels() == {
            Dimension.INTENT: "informational",
            Dimension.STATUS: None,
            Dimension.CONTENT_TYPE: "content",
        }

    def test_dict_round_trip_preserves_result(self) -> None:
        result = _result()

        restored = ClassificationResult.from_dict(result.to_dict())

        assert restored == result
        assert restored.metadata.classified_at.tzinfo is not None

    def test_to_dict_uses_wire_dimension_names(self) -> None:
        data = _result().to_dict()

        assert set(data["classifications"]) == {"intent", "status", "contentType"}
        assert data["classifications"]["intent"]["top_k"][0] == {
            "label": "informational",
            "score": 0.6,
        }


class TestFreshness:
    TTL = timedelta(hours=24)

    def test_just_past_ttl_is_stale(self) -> None:
        result = _result(classified_at=NOW - self.TTL - timedelta(milliseconds=1))

        assert not result.is_fresh(NOW, self.TTL)

    def test_just_within_ttl_is_fresh(self) -> None:
        result = _result(classified_at=NOW - self.TTL + timedelta(milliseconds=1))

        assert result.is_fresh(NOW, self.TTL)

    def test_exactly_ttl_is_stale(self) -> None:
        result = _result(classified_at=NOW - self.TTL)

        assert not result.is_fresh(NOW, self.TTL)
