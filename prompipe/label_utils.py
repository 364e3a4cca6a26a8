"""Label utility functions for Prometheus exposition labels.

Labels arrive as 'key1=value1,key2=value2' strings from the PROMPIPE_LABELS
environment variable and the -l flag.
"""

import logging

from prompipe.errors import LabelFormatError

_logger = logging.getLogger(__name__)


def combine_labels(env_labels: str, cli_labels: str) -> str:
    """Merge environment and command-line label strings, environment first."""
    if env_labels and cli_labels:
        return f"{env_labels},{cli_labels}"
    return env_labels or cli_labels


def format_label(token: str) -> str:
    """
    Format a single 'key=value' token as key="value".
    A value that is already wrapped in double quotes is kept as is.

    Raises:
        LabelFormatError: If the token is not exactly one key and one value,
            the key contains a double quote, or the value is only partially quoted.
    """
    parts = token.split("=")
    if len(parts) != 2:
        raise LabelFormatError(token)
    key, value = parts
    if '"' in key:
        raise LabelFormatError(token)

    if '"' not in value:
        return f'{key}="{value}"'
    if value.startswith('"') and value.endswith('"'):
        return f"{key}={value}"
    raise LabelFormatError(token)


def format_labels(raw: str, logger: logging.Logger = None) -> str:
    """Format a comma separated label list, stopping at the first invalid token."""
    if not raw:
        return ""
    log = logger or _logger
    formatted = []
    for token in raw.split(","):
        log.debug(f"Formatting label {token}")
        formatted.append(format_label(token))
    return ",".join(formatted)


def resolve_labels(
    cli_labels: str, env_labels: str, logger: logging.Logger = None
) -> str:
    """Combine both label sources and format them; no labels gives ''."""
    combined = combine_labels(env_labels, cli_labels)
    if combined == "":
        return ""
    return format_labels(combined, logger)
