import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from securelink.crypto import CryptoManager  # noqa: E402
from securelink.link_manager import LinkManager  # noqa: E402


@pytest.fixture
def crypto():
    return CryptoManager()


@pytest.fixture
def manager(crypto):
    return LinkManager(crypto=crypto, base_url="https://links.example/open")
