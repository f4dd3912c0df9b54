import pytest

from drillbook.search import (
    BabySharkGame,
    has_friend_chain,
    min_mirrors,
    shortest_cleaning_route,
)

PATH = [(0, 1), (1, 2), (2, 3), (3, 4)]


def test_path_of_five_has_chain():
    assert has_friend_chain(5, PATH)


def test_star_has_no_chain():
    assert not has_friend_chain(5, [(0, 1), (0, 2), (0, 3), (0, 4)])


def test_four_people_cannot_chain():
    assert not has_friend_chain(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


def test_edge_order_does_not_matter():
    assert has_friend_chain(5, PATH[::-1]) == has_friend_chain(5, PATH)


def test_extra_edges_keep_chain():
    assert has_friend_chain(6, PATH + [(0, 5), (2, 5)])


def test_no_fish_takes_no_time():
    game = BabySharkGame([[9, 0], [0, 0]])
    assert game.play() == 0


def test_start_cell_is_cleared():
    game = BabySharkGame([[0, 0], [0, 9]])
    assert game.position == (1, 1)
    assert game.grid[1][1] == 0


@pytest.mark.parametrize("col", [1, 2, 3])
def test_single_fish_time_is_distance(col):
    grid = [[0] * 4 for _ in range(4)]
    grid[0][0] = 9
    grid[0][col] = 1
    game = BabySharkGame(grid)
    assert game.play() == col
    assert game.position == (0, col)


def test_equal_size_fish_is_not_eaten():
    game = BabySharkGame([[9, 2], [0, 0]])
    game.play()
    assert game.grid[0][1] == 2
    assert game.position == (0, 0)


def test_bigger_fish_block_the_way():
    game = BabySharkGame([[9, 3, 1], [3, 3, 3], [0, 0, 0]])
    game.play()
    assert game.grid[0][2] == 1


def test_tie_prefers_upper_fish():
    game = BabySharkGame([[0, 1, 0], [1, 9, 0], [0, 0, 0]])
    game.play()
    assert game.position == (1, 0)
    assert all(value == 0 for row in game.grid for value in row)


def test_shark_grows_after_eating_its_size():
    game = BabySharkGame([[9, 1, 1], [0, 0, 0], [0, 0, 0]])
    game.play()
    assert game.size == 3
    assert game.eaten == 0


def test_room_without_dirt():
    assert shortest_cleaning_route(["o..", "..."]) == 0


def test_single_dirt_distance():
    row = "o...*"
    assert shortest_cleaning_route([row]) == row.index("*") - row.index("o")


def test_unreachable_dirt():
    assert shortest_cleaning_route(["o.x*"]) == -1


def test_more_dirt_is_never_shorter():
    small = shortest_cleaning_route(["....o....*"])
    big = shortest_cleaning_route(["*...o....*"])
    assert big >= small
    assert big >= 4


def test_room_without_robot():
    with pytest.raises(ValueError):
        shortest_cleaning_route(["..*"])


def test_straight_line_needs_no_mirror():
    assert min_mirrors(["C..C"]) == 0


def test_corner_needs_one_mirror():
    assert min_mirrors(["C..", "...", "..C"]) == 1


def test_transposed_map_same_answer():
    grid = ["C.*.", "..*.", "...C"]
    transposed = ["".join(col) for col in zip(*grid)]
    assert min_mirrors(grid) == min_mirrors(transposed)


def test_wall_never_reduces_mirrors():
    open_map = ["C...", "....", "...C"]
    walled = ["C.*.", "..*.", "...C"]
    assert min_mirrors(walled) >= min_mirrors(open_map)


def test_missing_endpoint():
    with pytest.raises(ValueError):
        min_mirrors(["C..."])


def test_unlinkable_endpoints():
    with pytest.raises(ValueError):
        min_mirrors(["C*C"])