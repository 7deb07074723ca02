from warsector.utils.profiler import FrameProfiler


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_sections_are_reported_after_interval() -> None:
    clock = FakeClock()
    profiler = FrameProfiler(interval=1.0, clock=clock)

    for _ in range(3):
        profiler.begin_frame()
        clock.now += 0.004
        profiler.mark("clear")
        clock.now += 0.006
        profiler.mark("shapes")
        profiler.end_frame()
    assert profiler.frame_count == 3

    clock.now += 1.0
    profiler.begin_frame()
    profiler.end_frame()
    assert profiler.frame_count == 0  # reported and reset


def test_report_lists_sections_in_first_seen_order() -> None:
    clock = FakeClock()
    profiler = FrameProfiler(interval=100.0, clock=clock)
    profiler.begin_frame()
    clock.now += 0.002
    profiler.mark("overlay")
    clock.now += 0.008
    profiler.mark("shapes")
    profiler.end_frame()

    text = profiler.report(period=1.0)
    lines = text.splitlines()
    assert "1.0 FPS" in lines[0]
    assert lines[2].split()[:2] == ["overlay", "2.00ms"]
    assert lines[3].split()[:2] == ["shapes", "8.00ms"]
    assert lines[4].split()[:2] == ["TOTAL", "10.00ms"]
