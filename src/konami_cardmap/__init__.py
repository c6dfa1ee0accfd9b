"""KONAMI ID Mapping Builder: generate a C++ lookup table of Yu-Gi-Oh! card names.

Downloads the YGOPRODeck card database, maps each card's KONAMI ID to its
English name and writes the result as a static ``std::map`` header.
"""

from .api_utils import download_file_contents
from .config import BuilderConfig, __version__
from .data_utils import (
    extract_card_id_mappings,
    find_konami_id,
    parse_card_data,
    sort_card_id_mappings,
)
from .exceptions import (
    CardMapError,
    NetworkError,
    OutputWriteError,
    ParseError,
    SchemaError,
)
from .generate_cardmap import BuildStage, generate_cardmap
from .header_generator import to_cpp_header
from .models import INVALID_CARD_ID, CardIdMapping

__all__ = [
    "__version__",
    # Data models
    "CardIdMapping",
    "INVALID_CARD_ID",
    # Configuration
    "BuilderConfig",
    # Pipeline stages
    "download_file_contents",
    "parse_card_data",
    "extract_card_id_mappings",
    "find_konami_id",
    "sort_card_id_mappings",
    "to_cpp_header",
    "generate_cardmap",
    "BuildStage",
    # Errors
    "CardMapError",
    "NetworkError",
    "ParseError",
    "SchemaError",
    "OutputWriteError",
]
