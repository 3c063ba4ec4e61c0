import sys

from loguru import logger

from commanddeck import demo
from commanddeck.core.logging import setup_logging


def test_remote_control_demo_leaves_devices_off():
    devices = demo.remote_control_demo()
    assert not devices["tv"].is_on
    assert devices["tv"].channel == 2
    assert not devices["stereo"].is_on
    assert devices["stereo"].volume == 1

def test_macro_demo_honours_party_volume():
    devices = demo.macro_demo(party_volume=7)
    assert devices["stereo"].volume == 7
    assert not devices["light"].is_on
    assert not devices["tv"].is_on

def test_queue_demo_runs_both_batches():
    result = demo.queue_demo()
    assert result["printer"].printed == ["Report.pdf", "Invoice.pdf", "Presentation.pptx", "Agenda.pdf"]
    assert len(result["email"].sent) == 3
    assert result["queue"].is_empty()

def test_undo_demo_ends_with_light_off(log_messages):
    result = demo.undo_demo()
    assert not result["light"].is_on
    assert result["remote"].last_command is None
    assert "Nothing to undo" in log_messages

def test_main_runs_with_config(tmp_path, monkeypatch):
    import main

    monkeypatch.chdir(tmp_path)
    try:
        assert main.main([str(tmp_path / "settings.json")]) == 0
    finally:
        # restore a plain stderr sink for the rest of the session
        logger.remove()
        logger.add(sys.stderr)
    assert (tmp_path / "settings.json").exists()
    assert not (tmp_path / "logs").exists()

def test_setup_logging_file_sink(tmp_path):
    log_dir = tmp_path / "logs"
    try:
        setup_logging(debug_mode=False, log_dir=str(log_dir))
        logger.info("hello file sink")
    finally:
        logger.remove()
        logger.add(sys.stderr)
    files = list(log_dir.glob("commanddeck_*.log"))
    assert len(files) == 1
    assert "hello file sink" in files[0].read_text(encoding="utf-8")

def test_file_sink_keeps_debug_tracing_when_console_is_quiet(tmp_path):
    log_dir = tmp_path / "logs"
    try:
        setup_logging(debug_mode=False, log_dir=str(log_dir))
        logger.debug("queue trace")
    finally:
        logger.remove()
        logger.add(sys.stderr)
    text = next(log_dir.glob("commanddeck_*.log")).read_text(encoding="utf-8")
    assert "queue trace" in text
