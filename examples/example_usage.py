"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the timer and CRUD rules live in the services.
"""

from src.time_tracker.time_tracker.container import build_container
from src.time_tracker.time_tracker.storage.memory_storage import MemoryStorage


def main():
    container = build_container(storage=MemoryStorage())
    member = container.auth_service.login("member@example.com", "password")

    timer = container.timer_service
    log = timer.start("task-2", member.user_id, now=0)
    timer.pause(log.log_id, now=10_000)
    timer.resume(log.log_id, now=10_000)
    stopped = timer.stop(log.log_id, now=25_000)
    print(f"{stopped.log_id}: {stopped.duration}s")

    report = container.report_service.build(member)
    print(report.project_hours, report.total_time)


if __name__ == "__main__":
    main()
