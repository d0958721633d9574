"""Zero-shot model protocol definition."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from tabsense_ml.data_models import LabelScore


@runtime_checkable
class ZeroShotModel(Protocol):
    """Protocol for zero-shot text classifiers.

    The engine treats the model as a black box: it may be slow and it may
    raise. Implementations are called from worker threads.
    """

    @property
    def model_name(self) -> str:
        """Return the model identifier."""
        ...

    def classify(
        self,
        text: str,
        labels: Sequence[str],
        multi_label: bool = True,
    ) -> list[LabelScore]:
        """Score ``text`` against ``labels``.

        Returns
        -------
        list[LabelScore]
            Labels ranked by score, highest first.
        """
        ...
