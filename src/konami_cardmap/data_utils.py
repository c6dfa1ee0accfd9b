"""Parsing and extraction of KONAMI ID mappings from the card database payload."""

import json
import logging
import math
from operator import attrgetter
from typing import Any, Dict, Iterator, List, Optional

from konami_cardmap.exceptions import ParseError, SchemaError
from konami_cardmap.models import INVALID_CARD_ID, CardIdMapping

log = logging.getLogger(__name__)


def parse_card_data(json_file_contents: str) -> Dict[str, Any]:
    """Decode the API response and check its top-level shape.

    Args:
        json_file_contents: Raw response body

    Returns:
        The decoded payload, guaranteed to hold a ``data`` list

    Raises:
        ParseError: If the text is not JSON or has no ``data`` list

    """
    try:
        payload = json.loads(json_file_contents)
    except json.JSONDecodeError as e:
        raise ParseError(f"Card database is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError(
            f"Expected a JSON object at the top level, got {type(payload).__name__}"
        )
    if not isinstance(payload.get("data"), list):
        raise ParseError("Card database payload has no 'data' list")

    return payload


def iter_card_records(payload: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Iterate over card records in the order the API returned them."""
    for index, data_entry in enumerate(payload["data"]):
        if not isinstance(data_entry, dict):
            raise SchemaError(f"Card record #{index} is not a JSON object")
        yield data_entry


def _to_card_id(value: Any, card_name: str) -> int:
    # bool is an int subclass but never a valid ID
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"Card {card_name!r} has a non-integer konami_id: {value!r}")
    if not math.isfinite(value):
        raise SchemaError(f"Card {card_name!r} has a non-finite konami_id: {value!r}")
    return int(value)


def find_konami_id(
    misc_info: List[Dict[str, Any]],
    include_negative_ids: bool = False,
    card_name: str = "",
) -> Optional[int]:
    """Find the first usable KONAMI ID among a card's misc_info records.

    The first record carrying ``konami_id`` wins. When negative IDs are
    excluded, a negative value is skipped and the scan continues with the
    remaining records.

    Args:
        misc_info: The card's misc_info list
        include_negative_ids: Accept negative IDs instead of skipping them
        card_name: Card name, only used in error messages

    Returns:
        The KONAMI ID, or None if no record yields an accepted one

    """
    for misc_info_entry in misc_info:
        if not isinstance(misc_info_entry, dict) or "konami_id" not in misc_info_entry:
            continue

        konami_id = _to_card_id(misc_info_entry["konami_id"], card_name)
        if konami_id < 0 and not include_negative_ids:
            log.debug("Skipping negative KONAMI ID %d for %s", konami_id, card_name)
            continue

        return konami_id

    return None


def extract_card_id_mappings(
    payload: Dict[str, Any], include_negative_ids: bool = False
) -> List[CardIdMapping]:
    """Build one mapping per card record, in encounter order.

    Cards without an accepted KONAMI ID are mapped to INVALID_CARD_ID.

    Raises:
        SchemaError: If a card lacks its name or has a malformed misc_info list

    """
    card_id_mappings = []

    for data_entry in iter_card_records(payload):
        card_name = data_entry.get("name")
        if not isinstance(card_name, str):
            raise SchemaError(f"Card record has no 'name' field: {data_entry!r:.200}")

        # null and missing both mean "no misc info"
        misc_info = data_entry.get("misc_info") or []
        if not isinstance(misc_info, list):
            raise SchemaError(f"Card {card_name!r} has a malformed misc_info field")

        konami_id = find_konami_id(misc_info, include_negative_ids, card_name)
        if konami_id is None:
            log.debug("KONAMI ID not found for card name %s", card_name)
            konami_id = INVALID_CARD_ID

        card_id_mappings.append(CardIdMapping(konami_id, card_name))

    return card_id_mappings


def sort_card_id_mappings(card_id_mappings: List[CardIdMapping]) -> List[CardIdMapping]:
    """Sort mappings by KONAMI ID, keeping encounter order for equal IDs."""
    return sorted(card_id_mappings, key=attrgetter("card_id"))
