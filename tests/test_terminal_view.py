from roguekit.core.point import Point
from roguekit.maps.grid_map import GridMap
from roguekit.systems.pathfinding import a_star_search
from roguekit.utils.cli.terminal_view import TerminalView


def test_render_plain_map(simple_map):
    view = TerminalView(colour=False)
    assert view.render(simple_map).splitlines() == [
        "...#.",
        ".#..#",
        "###.#",
        "..#..",
        "....#",
    ]


def test_render_path_with_endpoints(simple_map):
    origin, goal = Point(1, 3), Point(0, 0)
    path = a_star_search(origin, goal, simple_map)
    view = TerminalView(colour=False)
    assert view.render(simple_map, path, origin, goal).splitlines() == [
        "X*.#.",
        ".#*.#",
        "###*#",
        ".@#*.",
        "..*.#",
    ]


def test_costly_tiles_render_as_digits():
    grid = GridMap(3, 1, [1.0, 3.0, 25.0])
    assert TerminalView(colour=False).render(grid) == ".39"


def test_colour_output_uses_ansi_codes(simple_map):
    text = TerminalView(colour=True).render(simple_map)
    assert "\x1b[34m#" in text
    assert text.splitlines()[0].endswith("\x1b[0m")


def test_show_writes_to_stdout(simple_map, capsys):
    TerminalView(colour=False).show(simple_map)
    out = capsys.readouterr().out
    assert out.startswith("...#.\n")
