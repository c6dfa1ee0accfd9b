"""C++ header generator for KONAMI ID -> card name mappings."""

import logging
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from konami_cardmap.config import DEFAULT_TABLE_NAME
from konami_cardmap.models import CardIdMapping

log = logging.getLogger(__name__)


def escape_quotes(card_name: str) -> str:
    """Escape double quotes so the name can sit inside a C++ string literal."""
    return card_name.replace('"', '\\"')


class HeaderGenerator:
    """Renders card ID mappings as a static ``std::map`` initializer."""

    template_name = "card_id_mapping.hpp.j2"

    def __init__(self, table_name: str = DEFAULT_TABLE_NAME):
        """Initialize the HeaderGenerator with the generated variable name."""
        self.table_name = table_name

        # Setup Jinja2 environment; block tags must not leave blank lines behind
        template_dir = Path(__file__).parent / "templates"
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            keep_trailing_newline=False,
        )
        self.jinja_env.filters["escape_quotes"] = escape_quotes

    def render(self, card_id_mappings: List[CardIdMapping]) -> str:
        """Render the header text for already sorted mappings."""
        template = self.jinja_env.get_template(self.template_name)
        header_file_contents = template.render(
            table_name=self.table_name, card_id_mappings=card_id_mappings
        )
        log.debug(
            "Rendered %d mappings into %d characters",
            len(card_id_mappings),
            len(header_file_contents),
        )
        return header_file_contents


def to_cpp_header(
    card_id_mappings: List[CardIdMapping], table_name: str = DEFAULT_TABLE_NAME
) -> str:
    """Render mappings as C++ header source.

    Entries without a KONAMI ID are emitted commented out so they stay visible
    without becoming lookup keys.
    """
    return HeaderGenerator(table_name).render(card_id_mappings)
