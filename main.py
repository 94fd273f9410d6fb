import sys

import config_paths
from box_view import BoxView
from cursive import Cursive
from event import KEY_ESC
from id_view import IdView
from log_setup import configure_logging
from text_view import TextView

__version__ = "0.1.0"


BASE_LAYERS = 2

HELP_TEXT = (
    "Hello World!\n"
    "Press q to quit, h for help, s to switch screens."
)

DIALOG_TEXT = (
    "This box is a layer on top of the first one. "
    "Keys go to it first; the ones it ignores reach the global callbacks. "
    "Press Esc to close it."
)


def _show_help(siv):
    siv.add_layer(BoxView(TextView(DIALOG_TEXT), size=(40, 8), border=True))
    _set_status(siv, f"layers: {siv.screen().layer_count}")


def _close_layer(siv):
    # keep the text and the status line
    if siv.screen().layer_count > BASE_LAYERS:
        siv.pop_layer()
    _set_status(siv, f"layers: {siv.screen().layer_count}")


def _switch_screen(siv):
    siv.set_screen((siv.active_screen_id + 1) % siv.screen_count)


def _set_status(siv, text):
    status = siv.find_id("status", TextView)
    if status is not None:
        status.set_content(text)


def build(siv: Cursive):
    siv.add_layer(TextView(HELP_TEXT))
    siv.add_layer(BoxView(IdView("status", TextView("layers: 2")), size=(20, 1)))

    second = siv.add_screen()
    siv.set_screen(second)
    siv.add_layer(BoxView(TextView("Second screen. Press s to go back."), border=True))
    siv.set_screen(0)

    siv.add_global_callback("q", Cursive.quit)
    siv.add_global_callback("h", _show_help)
    siv.add_global_callback("s", _switch_screen)
    siv.add_global_callback(KEY_ESC, _close_layer)


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print("cursive-demo - layered text-mode views\n\nUsage:\n  cursive-demo\n  cursive-demo -v\n")
        return

    config_paths.ensure_config_dirs()
    cfg = config_paths.load_config()
    configure_logging(cfg)

    with Cursive(config=cfg) as siv:
        build(siv)
        siv.run()


if __name__ == "__main__":
    main()
