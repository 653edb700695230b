import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


@pytest.fixture
def make_package():
    """Write a package.json into ``directory`` and return the directory."""

    def _make_package(directory, name, version="1.0.0", **sections):
        directory.mkdir(parents=True, exist_ok=True)
        data = {"name": name, "version": version}
        for key, value in sections.items():
            data[key] = value
        (directory / "package.json").write_text(json.dumps(data))
        return directory

    return _make_package
