import threading

import pytest

import wavepath.finder
from wavepath import InvalidInput, InvalidState, WavePathfinder, find_path
from wavepath.utils.maps import parse_ascii_map

NO_PATH_MAP = """
    |A| |x| | |
    | | |x| | |
    | | |x| | |
    | | |x|B| |
"""

LEFT_TO_RIGHT_MAP = """
    |A|1|2|3|4|
    |x|x|x|x|5|
    |x| | |x|6|
    | | | |x|B|
"""

RIGHT_TO_LEFT_MAP = """
    |B|6|x| | |
    |x|5|4|x| |
    | |x|3|2|x|
    | | |x|1|A|
"""


@pytest.mark.parametrize(
    "drawing",
    [NO_PATH_MAP, LEFT_TO_RIGHT_MAP, RIGHT_TO_LEFT_MAP],
    ids=["no-path", "left-to-right", "right-to-left"],
)
def test_find_path_on_ascii_maps(drawing):
    ascii_map = parse_ascii_map(drawing)
    path = WavePathfinder.find_path_once(ascii_map.passable, ascii_map.start, ascii_map.finish)
    assert path == ascii_map.expected_path


def test_constructor_rejects_non_table():
    with pytest.raises(InvalidInput):
        WavePathfinder("bla-bla-bla")


def test_constructor_copies_grid():
    ascii_map = parse_ascii_map(NO_PATH_MAP)
    finder = WavePathfinder(ascii_map.passable)
    ascii_map.passable[0][2] = True
    assert finder.grid.to_list() == [
        [True, True, False, True, True],
        [True, True, False, True, True],
        [True, True, False, True, True],
        [True, True, False, True, True],
    ]


def test_backtrace_before_expand_raises():
    finder = WavePathfinder([[0, 1], [1, 0]])
    with pytest.raises(InvalidState):
        finder.backtrace_path((1, 1))


def test_severed_grid_has_no_path():
    grid = [
        [True, True, False, True],
        [False, False, False, True],
        [False, True, True, True],
        [True, True, True, False],
    ]
    assert find_path(grid, (0, 0), (3, 3)) is None


def test_one_expansion_serves_many_finishes():
    grid = [
        [1, 1, 1],
        [0, 0, 1],
        [1, 1, 1],
    ]
    finder = WavePathfinder(grid)
    field = finder.expand_wave((0, 0))
    assert finder.distance_field is field
    assert finder.backtrace_path((0, 2)) == [(0, 0), (0, 1), (0, 2)]
    assert finder.backtrace_path((2, 0)) == [
        (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)
    ]
    assert finder.result_path[-1] == (2, 0)
    assert finder.backtrace_path((1, 0)) is None
    assert finder.result_path is None
    assert finder.distance_field is field


def test_new_expansion_replaces_field():
    finder = WavePathfinder([[1, 1, 1, 1, 1]])
    first = finder.expand_wave((0, 0))
    second = finder.expand_wave((0, 4))
    assert first is not second
    assert finder.distance_field is second
    assert finder.backtrace_path((0, 0)) == [(0, 4), (0, 3), (0, 2), (0, 1), (0, 0)]
    assert first.distance((0, 4)) == 4


def test_instance_find_path_matches_module_function():
    grid = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    finder = WavePathfinder(grid)
    assert finder.find_path((0, 0), (2, 2)) == find_path(grid, (0, 0), (2, 2))
    assert len(finder.result_path) == 5


def test_same_start_and_finish():
    assert find_path([[1, 1], [1, 1]], (1, 1), (1, 1)) == [(1, 1)]


def test_blocked_start_still_routes():
    assert find_path([[0, 1, 1]], (0, 0), (0, 2)) == [(0, 0), (0, 1), (0, 2)]


def test_concurrent_expand_and_backtrace_return_whole_paths():
    size = 8
    finish = (size - 1, size - 1)
    starts = [(0, 0), (0, size - 1), (size - 1, 0), (3, 4), (6, 2)]
    finder = WavePathfinder([[1] * size for _ in range(size)])
    finder.expand_wave(starts[0])
    errors = []
    paths = []
    done = threading.Event()

    def writer():
        try:
            for _ in range(40):
                for start in starts:
                    finder.expand_wave(start)
        except Exception as exc:
            errors.append(exc)
        finally:
            done.set()

    def reader():
        try:
            while True:
                paths.append(finder.backtrace_path(finish))
                if done.is_set():
                    break
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert paths
    for path in paths:
        assert path is not None
        assert path[0] in starts
        assert path[-1] == finish
        (r0, c0), (r1, c1) = path[0], path[-1]
        assert len(path) == abs(r1 - r0) + abs(c1 - c0) + 1
        for (ra, ca), (rb, cb) in zip(path, path[1:]):
            assert abs(ra - rb) + abs(ca - cb) == 1


def test_stale_backtrace_does_not_overwrite_result_path(monkeypatch):
    finder = WavePathfinder([[1, 1, 1, 1, 1]])
    finder.expand_wave((0, 0))
    real_backtrace = wavepath.finder.backtrace

    def backtrace_then_reexpand(field, finish):
        path = real_backtrace(field, finish)
        finder.expand_wave((0, 4))
        return path

    monkeypatch.setattr(wavepath.finder, "backtrace", backtrace_then_reexpand)
    assert finder.backtrace_path((0, 2)) == [(0, 0), (0, 1), (0, 2)]
    assert finder.result_path is None
    assert finder.distance_field.start == (0, 4)
