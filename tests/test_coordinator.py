import math
import types

from retween.config import DEFAULT_DURATION
from retween.coordinator import AttributeCoordinator
from retween.easing import EASING_FUNCTIONS


def make_coord(driver, target, duration=1000):
    return AttributeCoordinator(target, duration=duration, easing="linear", ticker=driver.ticker)


def test_defaults():
    coord = AttributeCoordinator({})
    assert coord.duration == DEFAULT_DURATION == 280
    assert coord.easing is EASING_FUNCTIONS["easeOutQuart"]


def test_fans_out_numbers_and_colors(driver):
    target = {"x": 0, "fill": "#000000"}
    coord = make_coord(driver, target)
    coord.set({"x": 100, "fill": "#ffffff"})
    assert sorted(coord.keys()) == ["fill", "x"]
    assert coord.running
    driver.at(500)
    assert math.isclose(target["x"], 50)
    assert target["fill"] == "#808080"
    driver.at(1000)
    assert target == {"x": 100, "fill": "#ffffff"}
    assert not coord.running


def test_unknown_key_is_written_next_frame(driver):
    target = {}
    coord = make_coord(driver, target)
    coord.set({"y": 10, "skip": None})
    assert target == {}
    driver.at(16)
    assert target == {"y": 10}
    assert coord.engine("skip") is None


def test_keys_left_out_keep_running(driver):
    target = {"x": 0, "y": 0}
    coord = make_coord(driver, target)
    coord.set({"x": 100})
    driver.clock.now = 500
    coord.set({"y": 40})
    driver.at(750)
    assert math.isclose(target["x"], 75)
    assert math.isclose(target["y"], 10)


def test_retarget_through_coordinator(driver):
    target = {"x": 0}
    coord = make_coord(driver, target)
    coord.set({"x": 100})
    driver.clock.now = 500
    coord.set({"x": 0})
    assert math.isclose(target["x"], 50)
    driver.at(1000)
    assert target["x"] == 0


def test_object_target_uses_setattr(driver):
    target = types.SimpleNamespace(opacity=1.0)
    coord = make_coord(driver, target)
    coord.set({"opacity": 0.0})
    driver.at(250)
    assert math.isclose(target.opacity, 0.75)


def test_on_complete_reports_key(driver):
    finished = []
    target = {"x": 0, "y": 0}
    coord = make_coord(driver, target).on_complete(lambda k, v: finished.append((k, v)))
    coord.set({"x": 1, "y": 2})
    driver.at(1000)
    assert sorted(finished) == [("x", 1), ("y", 2)]


def test_complete_snaps_every_key(driver):
    target = {"x": 0}
    coord = make_coord(driver, target)
    coord.set({"x": 100})
    driver.clock.now = 250
    coord.complete()
    assert math.isclose(target["x"], 25)
    assert not coord.running


def test_destroy_releases_target(driver):
    target = {"x": 0}
    coord = make_coord(driver, target)
    coord.set({"x": 100})
    driver.at(100)
    coord.destroy()
    coord.destroy()
    assert coord.target is None
    assert driver.ticker.active == 0
    driver.at(1000)
    assert math.isclose(target["x"], 10)


def test_set_duration_applies_to_next_animation(driver):
    target = {"x": 0}
    coord = make_coord(driver, target)
    coord.set({"x": 10})
    driver.at(1000)
    coord.set_duration(100).set_easing("linear")
    assert coord.engine("x").duration == 100
    coord.set({"x": 20})
    driver.at(1050)
    assert math.isclose(target["x"], 15)


def test_default_ticker_drives_coordinator():
    from retween.ticker import default_ticker

    target = {"x": 0}
    coord = AttributeCoordinator(target, duration=0)
    try:
        coord.set({"x": 5})
        assert target["x"] == 0
        default_ticker.tick()
        assert target["x"] == 5
        assert not coord.running
    finally:
        coord.destroy()
        default_ticker.clear()
