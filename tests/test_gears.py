import pytest

from drillbook.gears import Gear, gear_score, parse_gear, simulate_gears


def test_parse_gear_reads_bits():
    text = "10101111"
    assert parse_gear(text).teeth == [ch == "1" for ch in text]


def test_parse_gear_pads_short_input():
    assert parse_gear("11").teeth == [True, True] + [False] * 6


def test_poles_read_from_expected_teeth():
    gear = parse_gear("10100010")
    assert (gear.top, gear.right, gear.left) == (True, True, True)


def test_rotate_clockwise_moves_last_tooth_to_top():
    gear = parse_gear("00000001")
    gear.rotate(1)
    assert gear.teeth == parse_gear("10000000").teeth


def test_rotate_counterclockwise_moves_second_tooth_to_top():
    gear = parse_gear("01000000")
    gear.rotate(-1)
    assert gear.teeth == parse_gear("10000000").teeth


def test_rotate_round_trip():
    gear = parse_gear("11001110")
    original = list(gear.teeth)
    gear.rotate(1)
    gear.rotate(-1)
    assert gear.teeth == original


def test_full_turn_is_identity():
    gear = parse_gear("01111101")
    original = list(gear.teeth)
    for _ in range(8):
        gear.rotate(1)
    assert gear.teeth == original


def test_sample_simulation():
    gears = [parse_gear(s) for s in ("10101111", "01111101", "11001110", "00000010")]
    simulate_gears(gears, [(3, -1), (1, 1)])
    assert gear_score(gears) == 7


def test_equal_poles_do_not_spread():
    gears = [Gear() for _ in range(4)]
    gears[1].teeth = parse_gear("00000001").teeth
    simulate_gears(gears, [(2, 1)])
    assert gears[1].teeth == parse_gear("10000000").teeth
    assert [g.teeth for g in (gears[0], gears[2], gears[3])] == [[False] * 8] * 3


def test_score_of_first_gear_only():
    gears = [parse_gear("1"), Gear(), Gear(), Gear()]
    assert gear_score(gears) == 1


def test_score_of_no_south_tops():
    assert gear_score([Gear() for _ in range(4)]) == 0


def test_invalid_gear_number_raises():
    gears = [Gear() for _ in range(4)]
    with pytest.raises(ValueError):
        simulate_gears(gears, [(5, 1)])