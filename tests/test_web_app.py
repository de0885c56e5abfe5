from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "feedforward_net" / "web_app.py"


def test_playground_runs_default_network():
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()

    assert not at.exception
    assert len(at.error) == 0
    assert "Sortie" in at.success[0].value


def test_playground_reports_invalid_topology():
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    at.sidebar.text_input[0].set_value("3, 0, 1").run()

    assert not at.exception
    assert "Topologie invalide" in at.error[0].value
