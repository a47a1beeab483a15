from __future__ import annotations

from abc import ABC, abstractmethod


class IClipboard(ABC):
    @abstractmethod
    def copy(self, text: str) -> None:
        """Put ``text`` on the system clipboard; raises ClipboardError on failure."""
        raise NotImplementedError
