"""Scripted zero-shot model and tab builders."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from tabsense_ml.data_models import DIMENSIONS, Dimension, LabelScore, TabRecord

NOW = datetime(2025, 11, 3, 12, 0, tzinfo=UTC)

# Every dimension's top label well above 0.5
CONFIDENT: dict[Dimension, tuple[float, ...]] = {
    Dimension.INTENT: (0.9, 0.05, 0.05),
    Dimension.STATUS: (0.8, 0.1, 0.1, 0.05, 0.05),
    Dimension.CONTENT_TYPE: (0.85, 0.1, 0.05),
}

# Average top score 0.35
UNCERTAIN: dict[Dimension, tuple[float, ...]] = {
    Dimension.INTENT: (0.35, 0.3, 0.2),
    Dimension.STATUS: (0.35, 0.3, 0.2, 0.1, 0.05),
    Dimension.CONTENT_TYPE: (0.35, 0.3, 0.2),
}


def _dimension_for(labels: Sequence[str]) -> Dimension:
    return next(d for d in DIMENSIONS if d.labels == tuple(labels))


class FakeZeroShotModel:
    """Stand-in for the NLI pipeline.

    Scores come from the first ``per_text`` key contained in the input
    text, falling back to ``scores``. Dimensions in ``fail_on`` raise.
    """

    def __init__(
        self,
        scores: dict[Dimension, tuple[float, ...]] | None = None,
        per_text: dict[str, dict[Dimension, tuple[float, ...]]] | None = None,
        fail_on: Sequence[Dimension] = (),
        model_name: str = "fake-nli",
    ):
        self._scores = scores or CONFIDENT
        self._per_text = per_text or {}
        self._fail_on = set(fail_on)
        self._model_name = model_name
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    @property
    def model_name(self) -> str:
        return self._model_name

    def classify(
        self,
        text: str,
        labels: Sequence[str],
        multi_label: bool = True,
    ) -> list[LabelScore]:
        self.calls.append((text, tuple(labels)))
        dimension = _dimension_for(labels)
        if dimension in self._fail_on:
            msg = f"inference failed for {dimension.value}"
            raise RuntimeError(msg)

        table = next(
            (scores for key, scores in self._per_text.items() if key in text),
            self._scores,
        )
        ranked = sorted(zip(labels, table[dimension]), key=lambda item: item[1], reverse=True)
        return [LabelScore(label, score) for label, score in ranked]


def make_tab(
    tab_id: str,
    title: str = "Some page",
    domain: str = "blog.example.org",
    age: timedelta = timedelta(hours=1),
    inactive: bool = False,
    path: str = "",
) -> TabRecord:
    return TabRecord(
        id=tab_id,
        title=title,
        url=f"https://{domain}/{path}",
        domain=domain,
        last_active_at=NOW - age,
        inactive=inactive,
    )
