import json
import math
from types import MappingProxyType
from typing import Any, Mapping

from costscope.errors import MalformedDataError
from costscope.models import UsageRecord

# each tuple is (json_key, record_field)
STRING_FIELDS: "list[tuple[str, str]]" = [
    ("Date", "date"),
    ("InstanceId", "instance_id"),
    ("MeterCategory", "meter_category"),
    ("ResourceGroup", "resource_group"),
    ("ResourceLocation", "resource_location"),
    ("UnitOfMeasure", "unit_of_measure"),
    ("Location", "location"),
    ("ServiceName", "service_name"),
]


def _load_array(text: "str") -> "list[Any]":
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedDataError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise MalformedDataError(
            f"expected a JSON array, got {type(data).__name__}"
        )
    return data


def _parse_number(raw: "Any", index: "int", key: "str") -> "float":
    """
    parses a numeric string into a float. Plain JSON numbers are
    rejected, the source format always quotes them.
    """
    if not isinstance(raw, str):
        raise MalformedDataError(
            f"record {index}: {key} must be a numeric string, got {raw!r}"
        )
    try:
        value = float(raw)
    except ValueError as exc:
        raise MalformedDataError(
            f"record {index}: {key} is not a number: {raw!r}"
        ) from exc

    if not math.isfinite(value):
        raise MalformedDataError(f"record {index}: {key} is not finite: {raw!r}")
    return value


def _parse_tags(raw: "Any", index: "int") -> "Mapping[str, str]":
    if not isinstance(raw, dict):
        raise MalformedDataError(
            f"record {index}: Tags must be an object, got {raw!r}"
        )
    for key, value in raw.items():
        if not isinstance(value, str):
            raise MalformedDataError(
                f"record {index}: tag {key!r} must be a string, got {value!r}"
            )
    # read-only view so records stay immutable
    return MappingProxyType(dict(raw))


def decode_usage_record(obj: "Any", index: "int" = 0) -> "UsageRecord":
    """
    decodes a single usage record object. Cost, ConsumedQuantity
    and Tags are required; missing or null string fields decode
    to an empty string.
    """
    if not isinstance(obj, dict):
        raise MalformedDataError(f"record {index}: expected an object")

    for key in ("ConsumedQuantity", "Cost", "Tags"):
        if key not in obj:
            raise MalformedDataError(f"record {index}: missing required field {key}")

    strings: "dict[str, str]" = {}
    for key, attr in STRING_FIELDS:
        value = obj.get(key)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise MalformedDataError(
                f"record {index}: {key} must be a string, got {value!r}"
            )
        strings[attr] = value

    return UsageRecord(
        consumed_quantity=_parse_number(
            obj["ConsumedQuantity"], index, "ConsumedQuantity"
        ),
        cost=_parse_number(obj["Cost"], index, "Cost"),
        tags=_parse_tags(obj["Tags"], index),
        **strings,
    )


def decode_usage_records(text: "str") -> "list[UsageRecord]":
    """
    decodes a JSON array of usage records. Any bad record fails
    the whole batch, no partial result is returned.
    """
    return [
        decode_usage_record(obj, index) for index, obj in enumerate(_load_array(text))
    ]


def decode_name_list(text: "str") -> "list[str]":
    """
    decodes a JSON array of plain strings, keeping order and duplicates.
    """
    names = _load_array(text)
    for index, name in enumerate(names):
        if not isinstance(name, str):
            raise MalformedDataError(
                f"entry {index}: expected a string, got {name!r}"
            )
    return names
