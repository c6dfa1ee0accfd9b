"""Build configuration and defaults."""

from dataclasses import dataclass, field
from pathlib import Path

__version__ = "0.1.0"

# The misc=yes parameter makes the API include the KONAMI ID for every card.
# Not all KONAMI IDs are available from ygoprodeck, e.g. "Lucky Trinket";
# the official values live at https://www.db.yugioh-card.com/yugiohdb/
DEFAULT_DOWNLOAD_URL = "https://db.ygoprodeck.com/api/v7/cardinfo.php?misc=yes"
DEFAULT_OUTPUT_FILE = Path("CardIdMapping.hpp")
DEFAULT_TABLE_NAME = "card_id_mapping"
DEFAULT_TIMEOUT = 30.0


@dataclass
class BuilderConfig:
    """Settings for a single mapping build.

    Attributes:
        download_url: Card database endpoint, must return the misc_info list
        output_file: Header file to (over)write, relative to the working directory
        include_negative_ids: Keep negative KONAMI IDs instead of skipping them
        timeout: HTTP timeout in seconds
        table_name: Name of the generated C++ variable

    """

    download_url: str = DEFAULT_DOWNLOAD_URL
    output_file: Path = field(default_factory=lambda: DEFAULT_OUTPUT_FILE)
    include_negative_ids: bool = False
    timeout: float = DEFAULT_TIMEOUT
    table_name: str = DEFAULT_TABLE_NAME
