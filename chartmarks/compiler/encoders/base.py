from abc import ABC, abstractmethod

from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap


class MarkEncoder(ABC):
    @abstractmethod
    def properties(self, model: Model) -> PropertyMap:
        """Derive the update properties of the main mark."""
        pass

    def labels(self, model: Model) -> PropertyMap | None:
        """Properties of the label overlay, or None when the mark has none."""
        return None

    def background(self, model: Model) -> PropertyMap | None:
        return None
