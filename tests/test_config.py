import logging
from pathlib import Path

from cardrewards.config import DEFAULT_CATALOG_FILE, Settings
from cardrewards.logging_setup import HANDLER_NAME, setup_logging


def test_defaults_point_to_bundled_catalog(monkeypatch) -> None:
    monkeypatch.delenv("CARD_CATALOG_FILE", raising=False)
    monkeypatch.delenv("POINT_VALUE", raising=False)

    config = Settings(_env_file=None)

    assert Path(config.card_catalog_file) == DEFAULT_CATALOG_FILE
    assert DEFAULT_CATALOG_FILE.exists()
    assert config.point_value == 0.01
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CARD_CATALOG_FILE", str(tmp_path / "cards.json"))
    monkeypatch.setenv("POINT_VALUE", "0.015")

    config = Settings(_env_file=None)

    assert config.card_catalog_file == str(tmp_path / "cards.json")
    assert config.point_value == 0.015


def test_setup_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == len(previous_handlers) + 1
    finally:
        for handler in root.handlers[:]:
            if handler not in previous_handlers:
                root.removeHandler(handler)
        root.setLevel(previous_level)


def test_setup_logging_twice_keeps_one_handler() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        setup_logging("info")
        setup_logging("warning")

        ours = [handler for handler in root.handlers if handler.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert ours[0].level == logging.WARNING
        assert root.level == logging.WARNING
    finally:
        for handler in root.handlers[:]:
            if handler not in previous_handlers:
                root.removeHandler(handler)
        root.setLevel(previous_level)
