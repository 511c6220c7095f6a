"""
Loading style configuration from YAML files.

Unlike host style bags, a style file is written by the user on purpose, so
problems in it are reported instead of silently replaced by defaults.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from macc_viz.library.config.models import MaccStyle
from macc_viz.library.error_messages import format_error, suggest_similar
from macc_viz.library.exceptions import ConfigurationError, DataLoadingError


def load_style_config(config_path: Path | str) -> MaccStyle:
    """
    Load and validate a style configuration file.

    Parameters
    ----------
    config_path
        Path to a YAML file mapping style option names (``positive_color``,
        ``decimal_places``...) to values. Options left out keep their defaults.

    Returns
    -------
    MaccStyle
        Validated style

    Raises
    ------
    DataLoadingError
        If the file does not exist
    ConfigurationError
        If the file is not a mapping, names an unknown option or holds an
        invalid value
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise DataLoadingError(format_error("config_file_missing", path=config_path))

    with open(config_path) as f:
        raw_config = yaml.safe_load(f)

    # An empty file means "all defaults"
    if raw_config is None:
        return MaccStyle()

    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            format_error(
                "config_not_mapping",
                path=config_path,
                actual_type=type(raw_config).__name__,
            )
        )

    valid_options = list(MaccStyle.model_fields)
    for option in raw_config:
        if option not in valid_options:
            raise ConfigurationError(
                format_error(
                    "unknown_style_option",
                    option=option,
                    suggestion=suggest_similar(str(option), valid_options),
                )
            )

    try:
        return MaccStyle(**raw_config)
    except ValidationError as e:
        first = e.errors()[0]
        option = first["loc"][0] if first["loc"] else "?"
        raise ConfigurationError(
            format_error(
                "invalid_style_value",
                option=option,
                details=first["msg"],
                path=config_path,
            )
        ) from e
