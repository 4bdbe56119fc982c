"""Builder for the ``sort`` parameter."""

from __future__ import annotations


class SortOrderBuilder:
    """Collects ``field direction`` pairs in precedence order.

    Repeated fields are kept as given.
    """

    def __init__(self) -> None:
        self.order: list[str] = []

    def asc(self, field: str) -> SortOrderBuilder:
        self.order.append(f"{field} asc")
        return self

    def desc(self, field: str) -> SortOrderBuilder:
        self.order.append(f"{field} desc")
        return self

    def build(self) -> str:
        return ",".join(self.order)
