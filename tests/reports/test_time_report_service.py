from __future__ import annotations

from datetime import datetime

from src.time_tracker.time_tracker.common.datetime_utils import to_epoch_ms
from src.time_tracker.time_tracker.container import build_container
from src.time_tracker.time_tracker.core.enums import ReportPeriod
from src.time_tracker.time_tracker.reports.service import ReportService
from src.time_tracker.time_tracker.storage.memory_storage import MemoryStorage


def test_admin_report_groups_by_project_member_and_task():
    c = build_container(storage=MemoryStorage())
    admin = c.user_service.get_user("user-1")
    log = c.timer_service.start("task-1", "user-1", now=0)
    c.timer_service.stop(log.log_id, now=1_800_000)

    report = c.report_service.build(admin, ReportPeriod.ALL)

    assert report.project_hours == [
        {"name": "Marketing Campaign Q3", "hours": 2.5},
        {"name": "Website Redesign", "hours": 0.5},
    ]
    assert report.member_hours == [
        {"name": "Team Member", "hours": 2.5},
        {"name": "Admin User", "hours": 0.5},
    ]
    assert [r["name"] for r in report.task_hours] == ["Create Social Media Ads", "Design Homepage Mockup"]
    assert report.completed_tasks == []


def test_member_report_only_sees_own_logs():
    c = build_container(storage=MemoryStorage())
    member = c.user_service.get_user("user-2")
    log = c.timer_service.start("task-1", "user-1", now=0)
    c.timer_service.stop(log.log_id, now=3_600_000)

    report = c.report_service.build(member, ReportPeriod.ALL)

    assert report.project_hours == [{"name": "Marketing Campaign Q3", "hours": 2.5}]
    assert report.member_hours == []
    assert report.task_hours == []
    assert report.total_seconds == 9000
    assert report.total_time == "2h 30m"
    assert [t.task_id for t in report.completed_tasks] == ["task-3"]


def test_period_filter_uses_log_start_time():
    c = build_container(storage=MemoryStorage())
    member = c.user_service.get_user("user-2")
    now = datetime(2024, 8, 20, 12, 0)

    this_week = c.report_service.build(member, ReportPeriod.WEEK, now=now)
    this_month = c.report_service.build(member, ReportPeriod.MONTH, now=now)

    assert this_week.total_seconds == 0
    assert this_week.project_hours == []
    assert this_month.total_seconds == 9000


def test_task_breakdown_is_limited_to_top_tasks():
    c = build_container(storage=MemoryStorage())
    admin = c.user_service.get_user("user-1")
    start = to_epoch_ms(datetime(2024, 9, 1, 9, 0))
    log = c.timer_service.start("task-2", "user-2", now=start)
    c.timer_service.stop(log.log_id, now=start + 60_000)

    service = ReportService(c.time_logs_repo, c.tasks_repo, c.projects_repo, c.users_repo, top_tasks=1)
    report = service.build(admin, ReportPeriod.ALL)

    assert report.task_hours == [{"name": "Create Social Media Ads", "hours": 2.5}]
