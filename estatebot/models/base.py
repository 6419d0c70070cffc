from typing import Protocol
from ..data.base import PropertyDetails

class ValuationModel(Protocol):
    def estimate(self, details: PropertyDetails) -> int:
        """
        Returns the estimated property value in whole rupees.
        Raises InvalidInput when the details cannot be valued.
        """
        ...
