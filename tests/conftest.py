from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def fresh_settings():
    from config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def all_samples() -> np.ndarray:
    return np.arange(-32768, 32768, dtype=np.int32).astype(np.int16)


@pytest.fixture(scope="session")
def all_codes() -> bytes:
    return bytes(range(256))


@pytest.fixture()
def sine_pcm() -> np.ndarray:
    # 20ms of 8kHz samples
    return (np.sin(np.linspace(0, 2 * np.pi, 160, endpoint=False)) * 12000).astype(np.int16)
