import pytest

from config.settings import WindowSettings
from core.window import WindowController, is_near_bottom


def test_initial_window_is_clamped_to_total():
    assert WindowController(total=60).visible_count == 25
    assert WindowController(total=10).visible_count == 10
    assert WindowController().visible_count == 0


def test_growth_is_monotonic_and_clamped():
    window = WindowController(total=60)
    seen = [window.visible_count]
    for _ in range(5):
        window.on_near_bottom_signal()
        seen.append(window.visible_count)

    assert seen == [25, 50, 60, 60, 60, 60]
    assert not window.has_more


def test_signal_at_boundary_is_a_no_op():
    window = WindowController(total=25)
    assert window.on_near_bottom_signal() is False
    assert window.visible_count == 25


def test_query_change_resets_regardless_of_prior_value():
    window = WindowController(total=100)
    window.on_near_bottom_signal()
    window.on_near_bottom_signal()
    assert window.visible_count == 75

    window.on_query_change()
    assert window.visible_count == 25

    window.on_query_change(total=7)
    assert window.visible_count == 7
    assert window.total == 7


def test_result_set_shrink_clamps_without_reset():
    window = WindowController(total=100)
    window.on_near_bottom_signal()
    window.on_result_set_size_change(30)
    assert window.visible_count == 30

    window.on_result_set_size_change(200)
    assert window.visible_count == 30
    assert window.has_more


def test_custom_settings_are_honoured():
    window = WindowController(WindowSettings(initial_window=2, increment=3), total=10)
    assert window.visible_count == 2
    window.on_near_bottom_signal()
    assert window.visible_count == 5


def test_window_slices_items():
    window = WindowController(WindowSettings(initial_window=2), total=4)
    assert window.window(["a", "b", "c", "d"]) == ["a", "b"]


def test_negative_total_is_rejected():
    with pytest.raises(ValueError):
        WindowController(total=-1)
    with pytest.raises(ValueError):
        WindowController().on_result_set_size_change(-5)


@pytest.mark.parametrize(
    "position, maximum, expected",
    [(0, 1000, False), (949, 1000, False), (950, 1000, True), (1000, 1000, True), (0, 0, True)],
)
def test_is_near_bottom(position, maximum, expected):
    assert is_near_bottom(position, maximum, 50) is expected
