# -*- coding: Utf-8 -*-

from __future__ import annotations

import os
import pathlib

import pytest

################################## Environment initialization ##################################
# Always hide support on pygame import
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

# Use the default settings whatever the developer's environment is
os.environ.pop("PYSHAPES_CURVE_SAMPLING_STEP", None)
os.environ.pop("PYSHAPES_ELLIPSE_CIRCLE_DEPTH", None)


################################## fixtures ##################################


@pytest.fixture(scope="session")
def pyshapes_rootdirs_list() -> list[pathlib.Path]:
    import importlib

    pyshapes_spec = importlib.import_module("pyshapes").__spec__
    assert pyshapes_spec is not None
    assert pyshapes_spec.submodule_search_locations is not None

    return [pathlib.Path(path) for path in pyshapes_spec.submodule_search_locations]


@pytest.fixture
def unload_pyshapes(monkeypatch: pytest.MonkeyPatch) -> None:
    import re
    import sys

    for module in tuple(sys.modules):
        if re.fullmatch(r"pyshapes(?:\.\w+)*", module):
            monkeypatch.delitem(sys.modules, module, raising=False)
