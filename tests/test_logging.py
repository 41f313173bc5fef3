import logging

from charge_sim.logging_config import setup_logging
from charge_sim.simulator import Simulator, SimulatorConfig
from charge_sim.types import Bounds
from charge_sim.util import env_log_level


def test_env_log_level(monkeypatch):
    monkeypatch.delenv("CHARGE_SIM_LOG_LEVEL", raising=False)
    assert env_log_level() == logging.INFO
    monkeypatch.setenv("CHARGE_SIM_LOG_LEVEL", "debug")
    assert env_log_level() == logging.DEBUG
    monkeypatch.setenv("CHARGE_SIM_LOG_LEVEL", "30")
    assert env_log_level() == logging.WARNING
    monkeypatch.setenv("CHARGE_SIM_LOG_LEVEL", "chatty")
    assert env_log_level() == logging.INFO


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "sim.log"
    setup_logging(logging.DEBUG, log_file=str(log_file))
    setup_logging(logging.DEBUG, log_file=str(log_file))

    logger = logging.getLogger("charge_sim")
    assert len(logger.handlers) == 2

    sim = Simulator(SimulatorConfig(bounds=Bounds(400.0, 300.0), seed=1))
    sim.add_charge("positive")
    sim.reset()
    for h in logger.handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Added positive charge" in text
    assert "Simulation reset." in text

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
