"""Zero-shot NLI model wrapper."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from transformers import pipeline

from tabsense_ml.data_models import LabelScore


class NLIClassifier:
    """Wrapper around HuggingFace zero-shot classification pipeline."""

    def __init__(self, pipe: Any, model_name: str):
        self._pipe = pipe
        self._model_name = model_name

    @classmethod
    def load(cls, model_name: str, device: str = "cpu") -> NLIClassifier:
        """Load NLI classifier from model name."""
        pipe = pipeline(
            "zero-shot-classification",
            model=model_name,
            device=device,
        )
        return cls(pipe, model_name)

    @property
    def model_name(self) -> str:
        return self._model_name

    def classify(
        self,
        text: str,
        labels: Sequence[str],
        multi_label: bool = True,
    ) -> list[LabelScore]:
        """Classify one text against candidate labels.

        Args:
            text: Text to classify.
            labels: Candidate labels.
            multi_label: Score each label independently (entailment vs.
                contradiction) instead of a softmax over all labels.

        Returns:
            Labels with their scores, highest first.
        """
        result = self._pipe(text, list(labels), multi_label=multi_label)

        # Handle batched result shape
        if isinstance(result, list):
            result = result[0]

        scores = np.asarray(result["scores"], dtype=np.float32)
        order = np.argsort(-scores, kind="stable")
        return [LabelScore(result["labels"][i], float(scores[i])) for i in order]
