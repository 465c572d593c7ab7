from dataclasses import dataclass
from typing import Callable, Sequence

from costscope.models import NameListing, UsageRecord


@dataclass(frozen=True)
class Dataset:
    """
    Dataset is the in-memory collection of decoded usage
    records and the application/resource name lists. It is
    built once after loading and never mutated; rankings work
    on sorted copies so every query sees all original records.
    """

    records: "tuple[UsageRecord, ...]"
    applications: "tuple[str, ...]" = ()
    resources: "tuple[str, ...]" = ()

    @classmethod
    def build(
        cls,
        records: "Sequence[UsageRecord]",
        applications: "Sequence[str]" = (),
        resources: "Sequence[str]" = (),
    ) -> "Dataset":
        return cls(tuple(records), tuple(applications), tuple(resources))

    def _top_by(
        self,
        key: "Callable[[UsageRecord], float]",
        n: "int",
    ) -> "list[UsageRecord]":
        # sorted() stays stable with reverse=True, so ties keep source order
        ranked = sorted(self.records, key=key, reverse=True)
        # clamp instead of assuming at least n records
        return ranked[: max(0, min(n, len(ranked)))]

    def top_by_cost(self, n: "int") -> "list[UsageRecord]":
        """
        returns the n records with the highest cost, descending.
        """
        return self._top_by(lambda r: r.cost, n)

    def top_by_consumed_quantity(self, n: "int") -> "list[UsageRecord]":
        """
        returns the n records with the highest consumed quantity, descending.
        """
        return self._top_by(lambda r: r.consumed_quantity, n)

    def list_applications(self) -> "NameListing":
        return NameListing(self.applications)

    def list_resources(self) -> "NameListing":
        return NameListing(self.resources)
