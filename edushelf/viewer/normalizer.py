"""
Item normalization.

Turns arbitrary source records (dicts, pydantic models, plain objects) into
DisplayItems, either through a caller-supplied mapper or by probing well-known
field names.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Union

from pydantic import ValidationError

from edushelf.configs.logging_init import logger
from edushelf.models.components import DisplayItem

Mapper = Callable[[Any], Union[DisplayItem, Mapping[str, Any]]]

# Probe order for inferred fields
TITLE_FIELDS = ("title", "name")
SUBTITLE_FIELDS = ("subtitle", "role")
IMAGE_FIELDS = ("image", "avatar")
IMAGE_ID_FIELDS = ("imageId", "image_id")


def _string_keys(data: Mapping) -> dict[str, Any]:
    return {str(key): value for key, value in data.items()}


def record_as_mapping(record: Any) -> dict[str, Any]:
    """Read a source record as a plain dict with string keys; unreadable records become empty."""
    if isinstance(record, Mapping):
        return _string_keys(record)
    if hasattr(record, "model_dump"):
        try:
            return _string_keys(record.model_dump())
        except Exception as e:
            logger.warning(f"Could not dump record {type(record).__name__}: {e}")
            return {}
    if hasattr(record, "__dict__"):
        return {k: v for k, v in vars(record).items() if not k.startswith("_")}
    return {}


def _image_reference(value: Any) -> Optional[Union[str, dict[str, Any]]]:
    """Direct image reference: a string, or a mapping with string keys and a ``src``."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        if "src" in value and all(isinstance(key, str) for key in value):
            return dict(value)
        return None
    return str(value)


def _first_present(data: Mapping[str, Any], fields: Iterable[str]) -> Any:
    for field in fields:
        value = data.get(field)
        if value is not None and value != "":
            return value
    return None


def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value is not None and value != "" else None


def infer_item(record: Any, index: int) -> DisplayItem:
    """Build a DisplayItem by probing alternate field names on ``record``."""
    data = record_as_mapping(record)

    raw_id = data.get("id")
    fallback_id = f"item-{index}"

    try:
        return DisplayItem(
            id=str(raw_id) if raw_id is not None and raw_id != "" else fallback_id,
            title=_first_present(data, TITLE_FIELDS),
            subtitle=_optional_str(_first_present(data, SUBTITLE_FIELDS)),
            description=_optional_str(data.get("description")),
            image=_image_reference(_first_present(data, IMAGE_FIELDS)),
            image_id=_optional_str(_first_present(data, IMAGE_ID_FIELDS)),
            icon=_optional_str(data.get("icon")),
            metadata=data,
        )
    except ValidationError as e:
        logger.warning(f"Record {index} could not be normalized, using a placeholder: {e}")
        return DisplayItem(id=fallback_id)


def _mapped_item(record: Any, index: int, mapper: Mapper) -> DisplayItem:
    try:
        mapped = mapper(record)
        if isinstance(mapped, DisplayItem):
            return mapped
        if isinstance(mapped, Mapping):
            data = dict(mapped)
            data.setdefault("id", f"item-{index}")
            return DisplayItem.model_validate(data)
        logger.warning(
            f"Mapper returned {type(mapped).__name__} for record {index}; inferring fields instead"
        )
    except ValidationError as e:
        logger.warning(f"Mapper output for record {index} is invalid: {e}")
    except Exception as e:
        logger.exception(f"Mapper failed on record {index}: {e}")
    return infer_item(record, index)


def normalize(records: Iterable[Any], mapper: Optional[Mapper] = None) -> list[DisplayItem]:
    """
    Normalize source records into display items.

    Exactly one DisplayItem is produced per record and the call never raises.
    Item ids are made unique within the pass by suffixing the position of later
    duplicates, which keeps them stable across re-renders of the same list.

    Args:
        records: Caller-provided records of arbitrary shape.
        mapper: Optional explicit mapping function, invoked once per record.

    Returns:
        The normalized display items, in input order.
    """
    items: list[DisplayItem] = []
    seen_ids: set[str] = set()

    for index, record in enumerate(records or []):
        item = _mapped_item(record, index, mapper) if mapper else infer_item(record, index)

        if item.id in seen_ids:
            unique_id = f"{item.id}-{index}"
            logger.warning(f"Duplicate item id '{item.id}' at position {index}; using '{unique_id}'")
            item = item.model_copy(update={"id": unique_id})
        seen_ids.add(item.id)
        items.append(item)

    logger.debug(f"Normalized {len(items)} records (mapper={'yes' if mapper else 'no'})")
    return items


def metadata_value(item: DisplayItem, key: str) -> Optional[str]:
    """Return ``item.metadata[key]`` as display text, or None when absent or null."""
    value = item.metadata.get(key) if item.metadata else None
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
