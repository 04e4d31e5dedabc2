from collections.abc import Sequence

_TEST_MARKERS = ("_test.", ".test.")


def parse_extensions(raw: str) -> list[str]:
    """Split a comma-separated extension list, trimming blanks and dropping empty entries."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def match_extension(name: str, extensions: Sequence[str]) -> str | None:
    """Return the first configured extension that *name* ends with, or None.

    Matching is case-sensitive and exact: ``go`` matches ``foo.go`` but not ``foo.Go``.
    """
    for ext in extensions:
        if name.endswith(f".{ext}"):
            return ext
    return None


def is_test_file(name: str) -> bool:
    # substring anywhere in the name, so "my_test.helper.go" counts as well
    return any(marker in name for marker in _TEST_MARKERS)


def select_file(name: str, extensions: Sequence[str], skip_tests: bool) -> bool:
    if match_extension(name, extensions) is None:
        return False
    return not (skip_tests and is_test_file(name))
