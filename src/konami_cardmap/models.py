"""Data models for KONAMI ID to card name mappings."""

from dataclasses import dataclass

# Cards without a known KONAMI ID are kept under this ID and commented out
INVALID_CARD_ID = 0


@dataclass
class CardIdMapping:
    """A single KONAMI ID -> English card name pair."""

    card_id: int
    card_name: str

    @property
    def is_placeholder(self) -> bool:
        """Whether this entry has no usable KONAMI ID."""
        return self.card_id == INVALID_CARD_ID
