import os
import sys

import pytest


def pytest_configure():
    # Ensure `src/` is importable so `corekit.*` resolves from a plain checkout
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    src_path = os.path.join(root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture(autouse=True)
def _isolated_localization(monkeypatch):
    for name in ("COREKIT_LOCALE_DOMAIN", "COREKIT_LOCALE_DIR", "COREKIT_LOCALE_LANGUAGES"):
        monkeypatch.delenv(name, raising=False)
    from corekit.common.localization import reset_localization

    reset_localization()
    yield
    reset_localization()
