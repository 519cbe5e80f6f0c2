import pytest

from pizzadough.app.state import INPUT_EVENTS, Store
from pizzadough.config import DEFAULT_RATIOS, INPUT_RANGES


@pytest.fixture
def store(qapp):
    return Store()


def test_no_result_before_first_calculation(store):
    assert store.result is None
    assert store.value("count") == INPUT_RANGES["count"].default


def test_recalculate_uses_defaults(store):
    results = []
    store.result_changed.connect(results.append)

    result = store.recalculate()

    assert results == [result]
    assert store.result is result
    assert result.total_weight_grams == 1056


@pytest.mark.parametrize("event", ["count", "size", "hydration"])
def test_every_main_input_recalculates(store, event):
    results = []
    store.result_changed.connect(results.append)

    store.set_input(event, INPUT_RANGES[event].maximum)

    assert len(results) == 1
    assert results[0] is store.result


def test_count_change_scales_total(store):
    store.set_input("count", 2)

    assert store.result.inputs.pizza_count == 2
    assert store.result.total_weight_grams == 528


def test_input_changed_signal(store):
    changes = []
    store.input_changed.connect(lambda name, value: changes.append((name, value)))

    store.set_input("hydration", 72)
    store.set_custom_ratios(True)

    assert changes == [("hydration", 72), ("custom_ratios", True)]
    assert store.result.advisory is not None


def test_ratios_apply_only_when_custom(store):
    store.set_input("salt", 5.0)
    assert store.result.inputs.salt_pct == DEFAULT_RATIOS["salt"]

    store.set_input("custom_ratios", True)
    assert store.custom_ratios
    assert store.result.inputs.salt_pct == 5.0

    store.set_custom_ratios(False)
    assert store.result.inputs.salt_pct == DEFAULT_RATIOS["salt"]


def test_out_of_range_values_are_clamped(store):
    store.set_input("count", 0)

    assert store.result.inputs.pizza_count == INPUT_RANGES["count"].minimum


def test_extra_subscribers(store):
    seen = []
    for event in INPUT_EVENTS:
        store.subscribe(event, lambda event=event: seen.append(event))

    store.set_input("size", 32)
    store.set_custom_ratios(True)

    assert seen == ["size", "custom_ratios"]


def test_unknown_names_are_rejected(store):
    with pytest.raises(KeyError):
        store.subscribe("pepperoni", store.recalculate)
    with pytest.raises(KeyError):
        store.set_input("pepperoni", 1)
