"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
# This ensures that the local lcovreport package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of lcovreport modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("lcovreport"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from LCOVREPORT__* / GitHub env vars and the global config."""
    for key in list(os.environ):
        if key.startswith("LCOVREPORT__") or key in (
            "GITHUB_TOKEN",
            "GITHUB_REPOSITORY",
            "GITHUB_EVENT_PATH",
        ):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "lcovreport.config.loader.GLOBAL_CONFIG_PATH",
        tmp_path / "global-config" / "config.yaml",
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to streams captured by a previous test."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()
