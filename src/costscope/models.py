from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class UsageRecord:
    """
    UsageRecord represents a single billing line
    item for a cloud resource.
    """

    consumed_quantity: "float"
    cost: "float"
    date: "str" = ""
    instance_id: "str" = ""
    meter_category: "str" = ""
    # label used when rendering rankings
    resource_group: "str" = ""
    resource_location: "str" = ""
    unit_of_measure: "str" = ""
    location: "str" = ""
    service_name: "str" = ""
    # e.g. {"app-name": "Macao", "environment": "Test"}
    tags: "Mapping[str, str]" = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )


@dataclass(frozen=True, slots=True)
class NameListing:
    """
    NameListing is the result of listing applications
    or resources: the names in source order and their count.
    """

    names: "tuple[str, ...]"

    @property
    def count(self) -> "int":
        return len(self.names)
