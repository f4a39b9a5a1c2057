"""
Marker-based field extractors (no grammar).

Each extractor takes one line and returns the extracted token, or None when
the line does not have the expected shape. Deciding which extractor applies
to a line is the record builders' job, using the markers below.
"""

# Line markers
NAME_MARKER = "name:"
INFO_MARKER = "info[]:"
TORQUE_MARKER = "torque:"
RPM_LIMIT_MARKER = "rpm_limit:"
RATIO_FORWARD_MARKER = "ratios_forward["
RETARDER_MARKER = "retarder:"

# Localization placeholder for the kilowatt unit inside object names
KW_PLACEHOLDER = "@@kw@@"


def _quoted(line: str) -> str | None:
    """Return the text between the first pair of double quotes."""
    parts = line.split('"')
    if len(parts) < 3:
        return None
    return parts[1]


def object_name(line: str) -> str | None:
    """
    Extract the quoted object name from a line.

    Example:
        >>> object_name('name: "DC13 148 450"')
        'DC13 148 450'
        >>> object_name('name: "E-Motor 230@@kw@@"')
        'E-Motor 230kw'
    """
    name = _quoted(line)
    if name is None:
        return None
    if KW_PLACEHOLDER in name:
        name = name.replace(KW_PLACEHOLDER, "kw")
    return name


def engine_rated_power(line: str) -> str | None:
    """
    Extract the rated-power class from an info[] entry.

    The quoted info text is split on whitespace; at least two tokens are
    required and the first one is returned.

    Example:
        >>> engine_rated_power('info[]: "450 @@hp@@ (331@@kw@@)"')
        '450'
    """
    info = _quoted(line)
    if info is None:
        return None
    tokens = info.split()
    if len(tokens) < 2:
        return None
    return tokens[0]


def colon_value(line: str) -> str | None:
    """Return the stripped text after the first colon of a ``key: value`` line."""
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return value.strip()


def split_brand_model(folder_name: str) -> tuple[str, str] | None:
    """
    Split a ``brand.model`` folder name.

    Args:
        folder_name: Folder name such as ``scania.r_2016``

    Returns:
        (brand, model) tuple, or None unless the name has exactly one dot
        with text on both sides
    """
    parts = folder_name.split(".")
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]
