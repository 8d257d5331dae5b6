import numpy as np
import pytest

from spirograph.controller.engine import CurveEngine
from spirograph.model.curve import make_spirograph
from spirograph.model.parameters import ParameterValues


@pytest.fixture
def inline_engine(store):
    engine = CurveEngine(store, threaded=False)
    yield engine
    engine.shutdown()


@pytest.fixture
def threaded_engine(store):
    engine = CurveEngine(store, threaded=True)
    yield engine
    engine.shutdown()


def test_startup_curve_uses_defaults(inline_engine, store):
    expected = make_spirograph(*store.values())
    assert np.array_equal(inline_engine.curve.points, expected.points)
    assert inline_engine.curve.parameters == store.values()


def test_generate_is_pure(inline_engine):
    a = inline_engine.generate(90, 40, 10, 25)
    b = inline_engine.generate(90, 40, 10, 25)
    assert np.array_equal(a.points, b.points)
    assert len(a) == inline_engine.iterations


def test_recomputes_on_change(inline_engine, store):
    published = []
    inline_engine.curve_changed.connect(published.append)

    store.set("offset", 10)

    assert len(published) == 1
    assert published[0] is inline_engine.curve
    assert published[0].parameters.offset == 10.0
    assert np.array_equal(published[0].points, make_spirograph(100, 50, 10, 50).points)


def test_noop_set_does_not_recompute(inline_engine, store):
    published = []
    inline_engine.curve_changed.connect(published.append)

    store.set("offset", store.get("offset"))

    assert published == []


def test_curve_is_replaced_not_mutated(inline_engine, store):
    before = inline_engine.curve
    snapshot = before.points.copy()

    store.set("major_radius", 60)

    assert inline_engine.curve is not before
    assert np.array_equal(before.points, snapshot)


def test_inline_error_is_reported(inline_engine):
    errors = []
    inline_engine.error_occurred.connect(errors.append)
    before = inline_engine.curve

    inline_engine.request(ParameterValues(100.0, 0.0, 25.0, 50.0))

    assert len(errors) == 1
    assert inline_engine.curve is before


def test_threaded_delivers_curve(threaded_engine, store):
    published = []
    threaded_engine.curve_changed.connect(published.append)

    store.set("sample_count", 30)
    assert threaded_engine.is_busy()
    assert threaded_engine.wait_until_idle()

    assert len(published) == 1
    assert published[0].parameters == store.values()
    assert np.array_equal(threaded_engine.curve.points, make_spirograph(*store.values()).points)


def test_threaded_latest_value_wins(threaded_engine, store):
    published = []
    threaded_engine.curve_changed.connect(published.append)

    # No events are processed between these calls, so the first worker's
    # result is already stale when it is delivered.
    for offset in (10, 11, 12, 13):
        store.set("offset", offset)

    assert threaded_engine.wait_until_idle()

    assert len(published) == 1
    assert published[0].parameters.offset == 13.0
    assert threaded_engine.curve.parameters == store.values()


def test_threaded_error_keeps_previous_curve(threaded_engine):
    errors = []
    threaded_engine.error_occurred.connect(errors.append)
    before = threaded_engine.curve

    threaded_engine.request(ParameterValues(100.0, 0.0, 25.0, 50.0))
    assert threaded_engine.wait_until_idle()

    assert len(errors) == 1
    assert threaded_engine.curve is before


def test_shutdown_ignores_later_changes(store):
    engine = CurveEngine(store, threaded=True)
    published = []
    engine.curve_changed.connect(published.append)

    engine.shutdown()
    store.set("offset", 3)

    assert not engine.is_busy()
    assert published == []


def test_threaded_stale_error_is_not_reported(threaded_engine, store):
    errors = []
    published = []
    threaded_engine.error_occurred.connect(errors.append)
    threaded_engine.curve_changed.connect(published.append)

    threaded_engine.request(ParameterValues(100.0, 0.0, 25.0, 50.0))
    store.set("offset", 10)
    assert threaded_engine.wait_until_idle()

    assert errors == []
    assert [c.parameters.offset for c in published] == [10.0]
