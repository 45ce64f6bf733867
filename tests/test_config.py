import logging

from autolp_metrics.core.config import DEFAULT_SUBGRAPH_URL, Settings, configure_logging
from autolp_metrics.core.exceptions import MetricsComputationError, NoPositionDataError


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUBGRAPH_API_KEY", "env-key")
    monkeypatch.setenv("SUBGRAPH_TIMEOUT_SECONDS", "12")
    monkeypatch.delenv("SUBGRAPH_URL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.SUBGRAPH_API_KEY == "env-key"
    assert settings.SUBGRAPH_TIMEOUT_SECONDS == 12
    assert settings.SUBGRAPH_URL == DEFAULT_SUBGRAPH_URL


def test_configure_logging_sets_level(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging("debug")

    assert calls["level"] == "DEBUG"
    assert "%(levelname)s" in calls["format"]


def test_error_messages() -> None:
    assert str(NoPositionDataError()) == "No position data found for this user and pool"
    assert str(MetricsComputationError(RuntimeError("timeout"))) == "Failed to calculate position metrics: timeout"
    assert str(MetricsComputationError(RuntimeError())) == "Failed to calculate position metrics: Unknown error"
