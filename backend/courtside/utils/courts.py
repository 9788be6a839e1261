"""
Canonical parser for tournament court names.

Handles both string ("Front Left,Back") and list (["Front Left", "Back"])
inputs so labels are never silently corrupted (e.g. list("1,5") -> ['1', ',', '5']).
"""
import os
from typing import List, Optional, Union

DEFAULT_COURT_NAMES = ["Front Left", "Front Right", "Back"]


def parse_court_names(court_names: Optional[Union[str, List[str]]]) -> List[str]:
    """
    Normalize court_names to a list of non-empty strings.

    - None or "" -> []
    - String (e.g. "1,5,6") -> split on commas, strip whitespace, drop empties -> ["1","5","6"]
    - List (e.g. ["1","5","6"]) -> coerce each to str(x).strip(), drop empties
    - Duplicates are dropped, first occurrence wins (a court label is a key)
    """
    if court_names is None:
        return []
    if isinstance(court_names, str):
        raw = court_names.split(",")
    elif isinstance(court_names, list):
        raw = [str(x) for x in court_names]
    else:
        return []

    labels: List[str] = []
    for x in raw:
        label = x.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


def default_court_names() -> List[str]:
    """Courts used when a tournament is created without any; COURTSIDE_DEFAULT_COURTS overrides."""
    configured = parse_court_names(os.getenv("COURTSIDE_DEFAULT_COURTS"))
    return configured or list(DEFAULT_COURT_NAMES)
