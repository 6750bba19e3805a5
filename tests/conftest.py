import os
from typing import Iterator

import pytest  # type: ignore

from quantikit import units
from quantikit.config import reset_config


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("QUANTIKIT_"):
            monkeypatch.delenv(name)
    reset_config()
    units.default_cache.clear()
    yield
    reset_config()
    units.default_cache.clear()
