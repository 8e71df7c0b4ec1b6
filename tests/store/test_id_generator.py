from src.time_tracker.time_tracker.common.ids import IdGenerator


def test_ids_increase_even_when_clock_stalls():
    gen = IdGenerator(clock=lambda: 1000)

    assert gen.next_id("task") == "task-1000"
    assert gen.next_id("task") == "task-1001"
    assert gen.next_id("log") == "log-1002"


def test_ids_skip_values_already_taken():
    gen = IdGenerator(clock=lambda: 5)

    assert gen.next_id("user", taken={"user-5", "user-6"}) == "user-7"
