"""Default marks for the test suite.

Tests collected under `tests/unit/` get the `unit` mark and tests under
`tests/functional/` get the `functional` mark, unless already marked.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "functional": "functional",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to each collected item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for folder, marker_name in FOLDER_MARKS.items():
            if folder not in path.parents:
                continue
            if not any(marker.name == marker_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, marker_name))
