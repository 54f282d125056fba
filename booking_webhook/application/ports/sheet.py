from abc import ABC, abstractmethod
from typing import Any, Mapping


class SheetPort(ABC):
    @abstractmethod
    def forward(self, record: Mapping[str, Any]) -> Any:
        """Send one record to the sheet endpoint. Returns the endpoint's response body."""
        raise NotImplementedError
