import io

from maze_visualizer.grid import MARK_PATH, MARK_FRONTIER, MARK_VISITED
from maze_visualizer.terminal import (
    TerminalRenderer, classify, CURSOR_HOME, PATH_COLOR, WALL_COLOR, ENDPOINT_COLOR, RESET,
)


def test_classify_precedence(serpentine):
    serpentine.add_mark(1, 2, MARK_VISITED | MARK_FRONTIER | MARK_PATH)
    serpentine.add_mark(1, 3, MARK_VISITED | MARK_FRONTIER)
    serpentine.add_mark(1, 4, MARK_VISITED)
    serpentine.add_mark(1, 1, MARK_PATH)
    serpentine.add_mark(0, 0, MARK_PATH)

    assert classify(serpentine, 1, 1, (1, 1), (9, 9)) == 'start'
    assert classify(serpentine, 9, 9, (1, 1), (9, 9)) == 'end'
    assert classify(serpentine, 0, 0, (1, 1), (9, 9)) == 'wall'
    assert classify(serpentine, 1, 2, (1, 1), (9, 9)) == 'path'
    assert classify(serpentine, 1, 3, (1, 1), (9, 9)) == 'frontier'
    assert classify(serpentine, 1, 4, (1, 1), (9, 9)) == 'visited'
    assert classify(serpentine, 1, 5, (1, 1), (9, 9)) == 'empty'


def test_plain_frame(serpentine):
    serpentine.add_mark(1, 2, MARK_PATH)
    frame = TerminalRenderer(plain=True).render_frame(serpentine, (1, 1), (9, 9))
    lines = frame.splitlines()
    assert len(lines) == 11
    assert all(len(line) == 22 for line in lines)
    assert lines[0] == "#" * 22
    assert lines[1].startswith("##SS**  ")
    assert lines[9].endswith("EE##")


def test_color_frame(serpentine):
    serpentine.add_mark(1, 2, MARK_PATH)
    frame = TerminalRenderer().render_frame(serpentine, (1, 1), (9, 9))
    first, second = frame.splitlines()[:2]
    assert first.count(WALL_COLOR) == 11
    assert second.startswith(f"{WALL_COLOR}  {RESET}{ENDPOINT_COLOR}  {RESET}{PATH_COLOR}  {RESET}")


def test_draw_redraws_from_home(serpentine):
    out = io.StringIO()
    renderer = TerminalRenderer(stream=out)
    renderer.draw(serpentine, (1, 1), (9, 9))
    assert out.getvalue().startswith(CURSOR_HOME)


def test_plain_mode_writes_no_escape_sequences(serpentine):
    out = io.StringIO()
    renderer = TerminalRenderer(stream=out, plain=True)
    renderer.hide_cursor()
    renderer.clear_screen()
    renderer.draw(serpentine, (1, 1), (9, 9))
    renderer.show_cursor()
    assert "\x1b" not in out.getvalue()
