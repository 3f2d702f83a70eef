import sys
from pathlib import Path

import pytest

# Ensure `src` is on sys.path so `cli`, `core` and `adapters` resolve
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
src_dir_str = str(SRC_DIR)
if src_dir_str not in sys.path:
    sys.path.insert(0, src_dir_str)

from core.config import AppSettings  # noqa: E402
from core.domain.models import CountryInfo  # noqa: E402


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        locale_directory_url="https://directory.test/api/locales",
        device_mode="adb",
        adb_path="adb",
    )


@pytest.fixture
def canada() -> CountryInfo:
    return CountryInfo(name="Canada", latitude=45.4215, longitude=-75.6972)
