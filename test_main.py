from conftest import FakeTerminal
from cursive import Cursive
from event import KEY_ESC
from main import BASE_LAYERS, __version__, build, main
from text_view import TextView


def _demo(keys):
    term = FakeTerminal(w=60, h=16, keys=keys)
    siv = Cursive(terminal=term)
    build(siv)
    return siv, term


def test_build_creates_two_screens_with_status_line():
    siv, _ = _demo([])
    assert siv.screen_count == 2
    assert siv.screen().layer_count == BASE_LAYERS
    assert isinstance(siv.find_id("status"), TextView)
    siv.close()


def test_help_dialog_opens_and_closes():
    siv, term = _demo(["h", KEY_ESC, "q"])
    siv.run()
    siv.close()
    assert siv.screen().layer_count == BASE_LAYERS
    assert term.frames == 3
    assert siv.find_id("status", TextView).get_content() == "layers: 2"


def test_switch_screen_and_quit():
    siv, term = _demo(["s", "q"])
    siv.run()
    siv.close()
    assert siv.active_screen_id == 1
    assert "Second screen" in term.text()


def test_version_flag(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["cursive-demo", "-v"])
    main()
    assert capsys.readouterr().out.strip() == __version__
