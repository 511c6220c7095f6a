"""
Error message templates for MACC rendering configuration.

Messages follow WHAT/CAUSE/FIX structure.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "config_file_missing": """
Style configuration file not found: {path}

WHAT HAPPENED:
  The style file passed to load_style_config does not exist.

LIKELY CAUSE:
  - Typo in the file name
  - Relative path resolved from a different working directory

HOW TO FIX:
  Check the path exists:
  >>> from pathlib import Path
  >>> Path("{path}").resolve().exists()
""",
    "config_not_mapping": """
Invalid style configuration in {path}.

WHAT HAPPENED:
  The file must contain a YAML mapping of option names to values.
  Got: {actual_type}

HOW TO FIX:
  Use one option per line, for example:

    positive_color: "#4C78A8"
    negative_color: "#72B7B2"
    decimal_places: 2
""",
    "unknown_style_option": """
Style option '{option}' not recognized.

WHAT HAPPENED:
  The style configuration contains an option the chart does not use.

LIKELY CAUSE:
  Possible typo in the option name.

HOW TO FIX:
  {suggestion}

  Recognized style options:
  - 'positive_color': fill for bars with cost >= 0
  - 'negative_color': fill for bars with cost < 0
  - 'axis_color': stroke/text colour for axes and tick labels
  - 'show_labels': whether per-bar labels render
  - 'currency_symbol': prefix for cost tick labels
  - 'unit_symbol': suffix for abatement tick labels
  - 'decimal_places': precision for cost labels
""",
    "invalid_style_value": """
Invalid value for style option '{option}'.

WHAT HAPPENED:
  {details}

HOW TO FIX:
  Check the value type and range of '{option}' in {path}.
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
