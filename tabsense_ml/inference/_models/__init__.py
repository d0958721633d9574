"""Zero-shot classifier models.

Usage:
    from tabsense_ml.inference._models import ClassifierHandle

    handle = ClassifierHandle.from_settings(settings)
    model = await handle.get()
"""

from .handle import ClassifierHandle, ModelLoader
from .nli import NLIClassifier
from .protocol import ZeroShotModel

__all__ = [
    "ClassifierHandle",
    "ModelLoader",
    "NLIClassifier",
    "ZeroShotModel",
]
