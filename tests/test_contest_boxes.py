import pytest

from tbalab.contest_boxes import StorageBox


def make_box(cur=10, max_cap=60):
    return StorageBox(100, 40, 60, max_cap, cur, "wood")


def test_parse_round_trip():
    text = "100 40 60 60 10 wood"
    assert str(StorageBox.parse(text)) == text


def test_parse_fields():
    box = StorageBox.parse("1 2 3 40 5 steel")
    assert (box.length, box.width, box.height, box.max_cap, box.cur_cap, box.material) == (
        1, 2, 3, 40, 5, "steel",
    )


def test_parse_accepts_newlines():
    box = StorageBox.parse("1\n2\n3\n40\n5\ncardboard\n")
    assert box.material == "cardboard"


@pytest.mark.parametrize("text", ["1 2 3 4 5", "1 2 3 4 5 wood extra", ""])
def test_parse_wrong_field_count(text):
    with pytest.raises(ValueError):
        StorageBox.parse(text)


def test_parse_non_integer():
    with pytest.raises(ValueError):
        StorageBox.parse("1 2 x 4 5 wood")


def test_free():
    box = make_box(cur=25)
    box.free()
    assert box.cur_cap == 0


def test_put_weight_fits():
    box = make_box(cur=10, max_cap=60)
    box.put_weight(20)
    assert box.cur_cap == 10 + 20


def test_put_weight_exactly_full():
    box = make_box(cur=10, max_cap=60)
    box.put_weight(50)
    assert box.cur_cap == box.max_cap


def test_put_weight_too_heavy_is_ignored():
    box = make_box(cur=10, max_cap=60)
    box.put_weight(51)
    assert box.cur_cap == 10


def test_put_weight_of_box():
    box = make_box(cur=10, max_cap=60)
    other = make_box(cur=15)
    box.put_weight(other)
    assert box.cur_cap == 10 + 15
    assert other.cur_cap == 15


def test_put_weight_of_box_too_heavy():
    box = make_box(cur=50, max_cap=60)
    box.put_weight(make_box(cur=15))
    assert box.cur_cap == 50


def test_multiply_within_capacity():
    box = make_box(cur=10, max_cap=60)
    box.multiply_weight(3)
    assert box.cur_cap == 10 * 3


def test_multiply_clamps_to_capacity():
    box = make_box(cur=10, max_cap=60)
    box.multiply_weight(7)
    assert box.cur_cap == box.max_cap


def test_can_hold():
    big = StorageBox(10, 10, 10, 100, 20, "wood")
    small = StorageBox(5, 5, 5, 50, 30, "paper")
    assert big.can_hold(small) is True
    assert small.can_hold(big) is False


def test_can_hold_fails_on_weight():
    big = StorageBox(10, 10, 10, 40, 20, "wood")
    small = StorageBox(5, 5, 5, 50, 30, "paper")
    assert big.can_hold(small) is False


def test_is_cube():
    assert StorageBox(3, 3, 3, 10, 0, "wood").is_cube() is True
    assert StorageBox(3, 3, 4, 10, 0, "wood").is_cube() is False