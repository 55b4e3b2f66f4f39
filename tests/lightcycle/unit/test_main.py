import logging
import os

import pytest

from lightcycle.infra.logging import LoggingConfig, configure_logging
from lightcycle.main import main


@pytest.fixture
def workdir(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield clean_env
    configure_logging(LoggingConfig())
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def test_main_runs_headless_in_landscape(workdir) -> None:
    workdir.setenv("LIGHTCYCLE_FPS", "20")
    assert main(["--ticks", "50", "--seed", "3", "--width", "800", "--height", "480"]) == 0


def test_main_reads_env_file_from_working_directory(workdir, tmp_path) -> None:
    workdir.setenv("LIGHTCYCLE_ICON_ROWS", "4")
    (tmp_path / ".env.lightcycle").write_text("LIGHTCYCLE_ICON_ROWS=3\n", encoding="utf-8")
    assert main(["--ticks", "5"]) == 0
    assert os.environ["LIGHTCYCLE_ICON_ROWS"] == "3"
