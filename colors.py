import curses

# color pair ids; 0 is reserved by curses for the terminal default
BACKGROUND = 1
SHADOW = 2
PRIMARY = 3
SECONDARY = 4
TERTIARY = 5
TITLE_PRIMARY = 6
HIGHLIGHT = 7
HIGHLIGHT_INACTIVE = 8

# pair id -> (foreground, background)
LEGACY_PALETTE = {
    BACKGROUND: (curses.COLOR_WHITE, curses.COLOR_BLUE),
    SHADOW: (curses.COLOR_WHITE, curses.COLOR_BLACK),
    PRIMARY: (curses.COLOR_BLACK, curses.COLOR_WHITE),
    SECONDARY: (curses.COLOR_BLUE, curses.COLOR_WHITE),
    TERTIARY: (curses.COLOR_WHITE, curses.COLOR_WHITE),
    TITLE_PRIMARY: (curses.COLOR_RED, curses.COLOR_WHITE),
    HIGHLIGHT: (curses.COLOR_WHITE, curses.COLOR_RED),
    HIGHLIGHT_INACTIVE: (curses.COLOR_WHITE, curses.COLOR_BLUE),
}


def load_legacy(terminal):
    """Register the default palette and paint the background with it."""
    for pair_id, (fg, bg) in LEGACY_PALETTE.items():
        terminal.init_pair(pair_id, fg, bg)
    terminal.set_background(BACKGROUND)
