"""
Unit tests for username domain suffixing.
"""

import pytest

from core.usernames import add_username_suffix


@pytest.mark.parametrize(
    "username, domain, expected",
    [
        ("alice", "iplantcollaborative.org", "alice@iplantcollaborative.org"),
        ("alice@iplantcollaborative.org", "iplantcollaborative.org", "alice@iplantcollaborative.org"),
        ("alice@other.org", "iplantcollaborative.org", "alice@iplantcollaborative.org"),
        ("alice", "@example.org", "alice@example.org"),
        ("alice", "example.org@", "alice@example.org"),
    ],
)
def test_add_username_suffix(username, domain, expected):
    assert add_username_suffix(username, domain) == expected
