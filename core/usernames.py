"""
Username normalization.
"""

import re

_SUFFIX_RE = re.compile(r"@.*$")


def add_username_suffix(username: str, domain: str) -> str:
    """
    Return ``username`` qualified with ``domain``.

    Any existing ``@...`` suffix is replaced, so ``alice`` and
    ``alice@elsewhere`` both become ``alice@<domain>``.
    """
    return f"{_SUFFIX_RE.sub('', username)}@{domain.strip('@')}"
