import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a throwaway directory"""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TEXT_DIFF_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
