from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient


# Ensure `import geoutils.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("GEOUTILS_DEFAULT_GEOHASH_LENGTH", "8")
    monkeypatch.setenv("GEOUTILS_CHECK_RADIUS_M", "100000")
    monkeypatch.setenv("GEOUTILS_CORS_ALLOW_ORIGIN", "http://localhost:3000")
    monkeypatch.delenv("GEOUTILS_POSITION_PROVIDER_URL", raising=False)

    from geoutils.core.settings import get_settings

    get_settings.cache_clear()

    from geoutils.main import create_app

    app = create_app()
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from geoutils.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
