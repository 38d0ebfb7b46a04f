import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.append(str(ROOT / "src"))

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def _load(name: str) -> Dict[str, Any]:
    with (FIXTURES_DIR / name).open("r", encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def fixture_path() -> Callable[[str], Path]:
    return lambda name: FIXTURES_DIR / name


@pytest.fixture
def mail_typed_data() -> Dict[str, Any]:
    return _load("typed-data-1.json")


@pytest.fixture
def approval_typed_data() -> Dict[str, Any]:
    return _load("typed-data-2.json")


@pytest.fixture
def array_typed_data() -> Dict[str, Any]:
    return _load("typed-data-3.json")
