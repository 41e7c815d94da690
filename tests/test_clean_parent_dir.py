import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pathclean.clean import clean


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/..", "/"),
        ("/../../..", "/"),
        ("/../test", "/test"),
        ("test/..", "."),
        ("test/path/..", "test"),
        ("test/../path", "path"),
        ("/test/../path", "/path"),
        ("test/path/../../", "."),
        ("test/path/../../..", ".."),
        ("/test/path/../../..", "/"),
        ("/test/path/../../../..", "/"),
        ("test/path/../../../..", "../.."),
        ("test/path/../../another/path", "another/path"),
        ("test/path/../../another/path/..", "another"),
        ("../test", "../test"),
        ("../test/", "../test"),
        ("../test/path", "../test/path"),
        ("../test/..", ".."),
        ("../../x", "../../x"),
        ("a/../..", ".."),
        ("a/../../b/../..", "../.."),
    ],
)
def test_eliminate_parent_dir(path, expected):
    assert clean(path) == expected


def test_preserved_dotdot_is_not_erased_by_later_dotdot():
    assert clean("../a/../..") == "../.."


def test_backtrack_over_long_segments():
    first = "x" * 10_000
    second = "y" * 10_000
    assert clean(f"{first}/{second}/..") == first
    assert clean(f"/{first}/{second}/../..") == "/"
    assert clean(f"{first}/../{second}") == second


def test_backtrack_keeps_root_separator():
    assert clean("/abc/..") == "/"
    assert clean("/abc/../def") == "/def"
