import pytest

from brewcontrol.filters import CascadedFilter, FixedFilter


@pytest.mark.parametrize("b_value,expected_a", [(0, 4), (1, 6), (2, 8), (3, 10), (4, 12), (5, 14), (6, 16)])
def test_coefficients_follow_documented_table(b_value, expected_a):
    f = FixedFilter()
    f.set_coefficients(b_value)
    assert f.b == b_value
    assert f.a == expected_a


def test_fixed_filter_default_b_value():
    f = FixedFilter()
    assert f.b == 20
    assert f.a == 44


def test_cascaded_filter_defaults_to_b_two():
    c = CascadedFilter()
    assert len(c.sections) == 3
    assert all(s.b == 2 and s.a == 8 for s in c.sections)


def test_negative_coefficient_rejected():
    with pytest.raises(ValueError):
        FixedFilter(-1)


def test_init_sets_input_and_output():
    f = FixedFilter(2)
    f.init(1234)
    assert f.read_input() == 1234
    assert f.read_output() == 1234
    assert f.read_output_precise() == 1234 << 16
    assert f.read_prev_output_precise() == 1234 << 16


@pytest.mark.parametrize("b_value", [0, 1, 2, 3, 4])
def test_constant_input_is_steady(b_value):
    f = FixedFilter(b_value)
    f.init(-500)
    outputs = [f.add(-500) for _ in range(50)]
    assert outputs == [-500] * 50


def test_step_response_converges_without_overshoot():
    f = FixedFilter(2)
    f.init(0)
    outputs = [f.add(1000) for _ in range(2000)]
    assert max(outputs) <= 1000
    assert abs(outputs[-1] - 1000) <= 1
    assert f.read_input() == 1000


def test_step_response_is_monotonic():
    f = FixedFilter(1)
    f.init(0)
    outputs = [f.add(800) for _ in range(200)]
    assert all(later >= earlier for earlier, later in zip(outputs, outputs[1:]))


def test_add_matches_add_precise():
    regular = FixedFilter(2)
    precise = FixedFilter(2)
    regular.init(100)
    precise.init(100)
    for value in [150, 300, 280, 120, -40]:
        assert regular.add(value) == precise.add_precise(value << 16) >> 16
    assert regular.read_output_precise() == precise.read_output_precise()


def test_prev_output_tracks_previous_value():
    f = FixedFilter(2)
    f.init(0)
    first = f.add_precise(500 << 16)
    f.add_precise(500 << 16)
    assert f.read_prev_output_precise() == first


def test_no_peak_when_steady():
    f = FixedFilter(2)
    f.init(300)
    f.add(300)
    assert f.detect_pos_peak() is None
    assert f.detect_neg_peak() is None


def test_positive_peak_detected_after_rise_and_fall():
    f = FixedFilter(1)
    f.init(0)
    peaks = []
    for value in [1000] * 15 + [0] * 30:
        f.add(value)
        peak = f.detect_pos_peak()
        if peak is not None:
            peaks.append((peak, f.read_prev_output_precise() >> 16))
    assert peaks
    peak, prev = peaks[0]
    assert peak == prev
    assert 0 < peak <= 1000


def test_negative_peak_detected_after_fall_and_rise():
    f = FixedFilter(1)
    f.init(0)
    peaks = []
    for value in [-1000] * 15 + [0] * 30:
        f.add(value)
        peak = f.detect_neg_peak()
        if peak is not None:
            peaks.append(peak)
    assert peaks
    assert -1000 <= peaks[0] < 0


def test_cascaded_init_and_steady_state():
    c = CascadedFilter(2)
    c.init(420)
    assert c.read_input() == 420
    assert c.read_output() == 420
    assert [c.add(420) for _ in range(20)] == [420] * 20
    assert c.read_output_precise() == 420 << 16


def test_cascaded_lags_single_section():
    single = FixedFilter(2)
    cascade = CascadedFilter(2)
    single.init(0)
    cascade.init(0)
    for _ in range(20):
        s = single.add(1000)
        c = cascade.add(1000)
        assert c <= s
    assert cascade.read_output() < single.read_output()


def test_cascaded_converges_to_step():
    c = CascadedFilter(2)
    c.init(0)
    outputs = [c.add(500) for _ in range(3000)]
    assert max(outputs) <= 500
    assert abs(outputs[-1] - 500) <= 1
    assert c.read_input() == 500


def test_cascaded_set_coefficients_applies_to_all_sections():
    c = CascadedFilter()
    c.set_coefficients(4)
    assert [s.b for s in c.sections] == [4, 4, 4]
    assert [s.a for s in c.sections] == [12, 12, 12]


def test_cascaded_add_precise_chains_sections():
    c = CascadedFilter(1)
    c.init(0)
    result = c.add_precise(700 << 16)
    assert result == c.read_output_precise()
    assert c.sections[0].read_input() == 700
    assert c.sections[1].read_input() == c.sections[0].read_output()
    assert c.sections[2].read_input() == c.sections[1].read_output()


def test_cascaded_peak_detection_uses_last_section():
    c = CascadedFilter(1)
    c.init(0)
    found = None
    for value in [1000] * 20 + [0] * 60:
        c.add(value)
        peak = c.detect_pos_peak()
        if peak is not None:
            found = (peak, c.sections[-1].detect_pos_peak(), c.read_prev_output_precise() >> 16)
            break
    assert found is not None
    assert found[0] == found[1] == found[2]
    assert c.detect_neg_peak() is None