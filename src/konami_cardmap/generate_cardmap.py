#!/usr/bin/env python3
"""Generate a C++ header mapping KONAMI IDs to card names."""

import logging
import time
from enum import Enum
from typing import List, Optional

from konami_cardmap.api_utils import download_file_contents
from konami_cardmap.config import BuilderConfig, __version__
from konami_cardmap.data_utils import (
    extract_card_id_mappings,
    parse_card_data,
    sort_card_id_mappings,
)
from konami_cardmap.file_utils import get_file_size_human, write_string_to_file
from konami_cardmap.header_generator import to_cpp_header
from konami_cardmap.models import CardIdMapping

log = logging.getLogger(__name__)


class BuildStage(Enum):
    """Pipeline stages, in execution order."""

    IDLE = "idle"
    DOWNLOADING = "downloading"
    PARSING = "parsing"
    BUILDING = "building"
    WRITING = "writing"
    DONE = "done"


def generate_cardmap(config: Optional[BuilderConfig] = None) -> List[CardIdMapping]:
    """Download the card database and write the KONAMI ID mapping header.

    Any failure aborts the build. The output file is only touched once
    every earlier stage has succeeded.

    Args:
        config: Build settings, defaults to BuilderConfig()

    Returns:
        The sorted mappings that were written

    """
    if config is None:
        config = BuilderConfig()

    log.info("KONAMI ID -> Card Name Mapping Builder %s", __version__)
    start_time = time.perf_counter()
    stage = BuildStage.IDLE

    try:
        stage = BuildStage.DOWNLOADING
        log.info("Downloading card details...")
        json_file_contents = download_file_contents(
            config.download_url, timeout=config.timeout
        )

        stage = BuildStage.PARSING
        log.info("Parsing card details...")
        payload = parse_card_data(json_file_contents)

        log.info("Reading card ID mappings...")
        card_id_mappings = extract_card_id_mappings(
            payload, include_negative_ids=config.include_negative_ids
        )

        stage = BuildStage.BUILDING
        log.info("Sorting...")
        card_id_mappings = sort_card_id_mappings(card_id_mappings)

        log.info("Building C++ header...")
        cpp_code = to_cpp_header(card_id_mappings, table_name=config.table_name)

        stage = BuildStage.WRITING
        log.info("Writing C++ header...")
        write_string_to_file(config.output_file, cpp_code)

        stage = BuildStage.DONE
    except Exception:
        log.error("Build failed while %s", stage.value)
        raise

    placeholders = sum(1 for mapping in card_id_mappings if mapping.is_placeholder)

    log.info("✅ Completed!")
    log.info("   📊 Total cards: %d", len(card_id_mappings))
    log.info("   ❔ Without KONAMI ID: %d", placeholders)
    log.info(
        "   📁 Output file: %s (%s)",
        config.output_file,
        get_file_size_human(config.output_file),
    )
    log.info("Process took: %.2fs", time.perf_counter() - start_time)

    return card_id_mappings

