import logging

from stickymaze.maze import Maze
from stickymaze.rng import PMRandom
from stickymaze.tiles import START, GOAL

def markers(maze):
    out = {START: [], GOAL: []}
    for x, y in maze.interior_cells():
        v = maze.stickiness.get(x, y)
        if v in out:
            out[v].append((x, y))
    return out

def test_three_by_three_places_one_start_one_goal():
    m = Maze.new(3, 3, PMRandom.from_seed(17)).generate()
    start, goal = m.add_map()
    found = markers(m)
    assert found[START] == [start]
    assert found[GOAL] == [goal]
    assert start != goal
    assert all(1 <= c <= 3 for c in start + goal)

def test_single_cell_places_start_only_and_warns(caplog):
    m = Maze.new(1, 1, PMRandom.from_seed(2)).generate()
    with caplog.at_level(logging.WARNING, logger="stickymaze.mapgen.placement"):
        start, goal = m.add_map()
    assert start == (1, 1)
    assert goal is None
    assert m.stickiness.get(1, 1) == START
    assert "Not enough non-wall cells" in caplog.text

def test_no_interior_places_nothing(caplog):
    m = Maze.new(0, 0, PMRandom.from_seed(2)).generate()
    with caplog.at_level(logging.WARNING):
        assert m.add_map() == (None, None)
    assert len(caplog.records) == 1

def test_two_cells_no_warning(caplog):
    m = Maze.new(2, 1, PMRandom.from_seed(4)).generate()
    with caplog.at_level(logging.WARNING):
        start, goal = m.add_map()
    assert {start, goal} == {(1, 1), (2, 1)}
    assert caplog.records == []
