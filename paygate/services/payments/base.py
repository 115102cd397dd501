from typing import Any, Dict


class PaymentsProvider:
    """base payments provider interface."""

    name = "base"

    def create_order(self, data: Dict[str, Any]) -> Dict[str, Any]:  # pragma: no cover
        """create an order on the gateway and return its order object."""
        raise NotImplementedError
