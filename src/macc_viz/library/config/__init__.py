"""Style and field configuration for MACC rendering."""

from macc_viz.library.config.loaders import load_style_config
from macc_viz.library.config.models import (
    STYLE_BAG_KEYS,
    FieldKeys,
    MaccStyle,
)

__all__ = [
    "STYLE_BAG_KEYS",
    "FieldKeys",
    "MaccStyle",
    "load_style_config",
]
