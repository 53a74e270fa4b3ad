from sweepradar.protocol import Reading
from sweepradar.state import RadarState, in_range


def test_range_map_first_write_wins():
    state = RadarState()
    state.update(Reading(5, 10))
    state.update(Reading(5, 15))
    assert state.range_map == {5: 10}
    # trail still gets both
    assert [r for _, r in state.history.entries()] == [Reading(5, 15), Reading(5, 10)]


def test_out_of_range_readings_skip_range_map():
    state = RadarState()
    for r in (Reading(1, 1), Reading(2, 50), Reading(3, 0), Reading(4, 2), Reading(5, 49)):
        state.update(r)
    assert state.range_map == {4: 2, 5: 49}
    assert state.history.size() == 5


def test_out_of_range_does_not_claim_angle():
    state = RadarState()
    state.update(Reading(7, 300))
    state.update(Reading(7, 20))
    assert state.range_map == {7: 20}


def test_in_range_bounds():
    assert not in_range(1)
    assert in_range(2)
    assert in_range(49)
    assert not in_range(50)


def test_every_reading_is_displayed():
    frames = []
    state = RadarState(display=frames.append)
    assert state.feed(b"10:20|30:40|") == 2
    assert len(frames) == 2
    assert frames[-1] is state.last_frame
    assert state.latest == Reading(30, 40)


def test_feed_skips_bad_records():
    frames = []
    state = RadarState(display=frames.append)
    assert state.feed(b"abc|10:5|") == 1
    assert state.latest == Reading(10, 5)
    assert len(frames) == 1


def test_feed_across_chunks():
    state = RadarState()
    assert state.feed(b"10:2") == 0
    assert state.latest is None
    assert state.feed(b"0|") == 1
    assert state.range_map == {10: 20}


def test_run_until_stopped(scripted):
    source = scripted([b"12:3", b"4|90:5|", b"", b"45:100|"])
    state = RadarState()
    state.run(source, should_stop=lambda: not source.chunks)
    assert [r for _, r in state.history.entries()] == \
        [Reading(45, 100), Reading(90, 5), Reading(12, 34)]
    assert state.range_map == {12: 34, 90: 5}
