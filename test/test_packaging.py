"""Tests for package layout used by the wheel build."""

from __future__ import annotations

import importlib
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

PACKAGE_ROOT = REPO_ROOT / "src" / "SuggestShaper"


class TestPackageLayout(unittest.TestCase):
    def test_every_module_directory_is_a_regular_package(self) -> None:
        # packages.find only collects directories with an __init__.py.
        for directory in sorted({path.parent for path in PACKAGE_ROOT.rglob("*.py")}):
            with self.subTest(directory=directory.relative_to(PACKAGE_ROOT.parent).as_posix()):
                self.assertTrue((directory / "__init__.py").is_file())

    def test_utils_is_not_a_namespace_package(self) -> None:
        utils = importlib.import_module("SuggestShaper.utils")
        self.assertIsNotNone(utils.__file__)
        self.assertTrue(hasattr(importlib.import_module("SuggestShaper.utils.log"), "configure_logging"))


if __name__ == "__main__":
    unittest.main()
