#!filepath: tests/sources/test_tick_sources.py
from timeconductor.core.time import ReplayClock
from timeconductor.sources.local_clock import LocalClockTickSource
from timeconductor.sources.replay import ReplayTickSource


def test_local_clock_emits_clock_value():
    source = LocalClockTickSource(clock=lambda: 1234.0)
    seen = []
    source.listen(seen.append)

    assert source.tick() == 1234.0
    assert seen == [1234.0]
    assert source.metadata.mode == "realtime"


def test_local_clock_default_clock_is_epoch_ms():
    source = LocalClockTickSource()
    seen = []
    source.listen(seen.append)

    source.tick()

    # after 2001-09-09 in epoch milliseconds
    assert seen[0] > 1_000_000_000_000


def test_listen_returns_callable_unsubscribe():
    source = LocalClockTickSource(clock=lambda: 1.0)
    seen = []
    unsubscribe = source.listen(seen.append)

    unsubscribe()
    source.tick()

    assert seen == []
    assert source.listener_count() == 0


def test_replay_emits_every_step_in_order():
    source = ReplayTickSource(ReplayClock(start_ms=0, end_ms=4000, step_ms=1000))
    seen = []
    source.listen(seen.append)

    delivered = source.play()

    assert delivered == 5
    assert seen == [0, 1000, 2000, 3000, 4000]
    assert source.metadata.mode == "replay"


def test_replay_limit_and_restart():
    source = ReplayTickSource(ReplayClock(start_ms=0, end_ms=4000, step_ms=1000))
    seen = []
    source.listen(seen.append)

    assert source.play(limit=2) == 2
    assert source.play(limit=2) == 2
    assert seen == [0, 1000, 0, 1000]


def test_replay_without_listeners():
    source = ReplayTickSource(ReplayClock(start_ms=0, end_ms=1000))

    assert source.play() == 2
