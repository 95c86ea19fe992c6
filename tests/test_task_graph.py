"""Tests for the task dependency graph and the TaskGraph service."""

from __future__ import annotations

import pendulum
import pytest

from clientdesk.service.task_graph import (
    BlockedTaskError,
    CrossClientDependencyError,
    CycleError,
    TaskGraph,
    TaskNotFoundError,
    UnknownDependencyError,
    blocking_dependencies,
    can_reach,
    dangling_dependencies,
    dependents,
    find_path,
    is_blocked,
    resolvable_dependencies,
    would_create_cycle,
)

from doubles import InMemoryTaskStore, RecordingNotifier, make_task as _t

FIXED_NOW = pendulum.datetime(2026, 3, 1, 12, 0, 0, tz="UTC")


def _graph(
    store: InMemoryTaskStore,
    notifier: RecordingNotifier | None = None,
    enforce_blocking: bool = False,
) -> TaskGraph:
    counter = iter(range(1, 1000))
    return TaskGraph(
        store,
        notifier=notifier,
        enforce_blocking=enforce_blocking,
        clock=lambda: FIXED_NOW,
        id_factory=lambda: f"task-{next(counter)}",
    )


def _has_cycle(tasks) -> bool:
    return any(
        can_reach(tasks, dependency_id, task["id"])
        for task in tasks
        for dependency_id in task["dependencies"]
    )


class TestBlocked:
    def test_no_dependencies_is_not_blocked(self):
        """A task without dependencies is never blocked."""
        a = _t("a")
        assert is_blocked(a, [a]) is False
        assert blocking_dependencies(a, [a]) == []

    def test_incomplete_dependency_blocks(self):
        """Any direct dependency that is not Completed blocks the task."""
        a = _t("a", dependencies=["b", "c"])
        b = _t("b", status="Completed")
        c = _t("c", status="On Hold")
        tasks = [a, b, c]

        assert is_blocked(a, tasks) is True
        assert [task["id"] for task in blocking_dependencies(a, tasks)] == ["c"]

    def test_completing_all_dependencies_unblocks(self):
        """Blocked is recomputed from current statuses, nothing else changes."""
        a = _t("a", dependencies=["b"])
        b = _t("b", status="In Progress")
        assert is_blocked(a, [a, b]) is True

        b["status"] = "Completed"
        assert is_blocked(a, [a, b]) is False

    def test_dangling_dependency_is_ignored(self):
        """A dependency id with no matching task never blocks."""
        a = _t("a", dependencies=["gone"])
        assert is_blocked(a, [a]) is False

    def test_only_direct_dependencies_count(self):
        """Blocking is not transitive: a Completed dependency unblocks even if it is itself blocked."""
        a = _t("a", dependencies=["b"])
        b = _t("b", status="Completed", dependencies=["c"])
        c = _t("c")
        assert is_blocked(a, [a, b, c]) is False


class TestTraversal:
    def test_resolvable_dependencies_skip_dangling_and_duplicates(self):
        """Views list each existing dependency once, in stored order."""
        a = _t("a", dependencies=["c", "gone", "b", "c"])
        b, c = _t("b"), _t("c")
        result = resolvable_dependencies(a, [a, b, c])
        assert [task["id"] for task in result] == ["c", "b"]

    def test_find_path_follows_transitive_chain(self):
        """BFS reaches tasks through chains of any length."""
        tasks = [
            _t("a", dependencies=["b"]),
            _t("b", dependencies=["c"]),
            _t("c", dependencies=["d"]),
            _t("d"),
        ]
        assert find_path(tasks, "a", "d") == ["a", "b", "c", "d"]
        assert find_path(tasks, "d", "a") is None

    def test_find_path_returns_shortest_route(self):
        tasks = [
            _t("a", dependencies=["b", "d"]),
            _t("b", dependencies=["c"]),
            _t("c", dependencies=["d"]),
            _t("d"),
        ]
        assert find_path(tasks, "a", "d") == ["a", "d"]

    def test_traversal_skips_dangling_ids(self):
        tasks = [_t("a", dependencies=["gone", "b"]), _t("b")]
        assert can_reach(tasks, "a", "b") is True
        assert can_reach(tasks, "a", "c") is False

    def test_traversal_terminates_on_existing_cycle(self):
        """Corrupt data with a loop must not hang the search."""
        tasks = [_t("a", dependencies=["b"]), _t("b", dependencies=["a"])]
        assert can_reach(tasks, "a", "z") is False

    def test_would_create_cycle(self):
        tasks = [_t("a", dependencies=["b"]), _t("b", dependencies=["c"]), _t("c")]
        assert would_create_cycle(tasks, "c", "a") is True
        assert would_create_cycle(tasks, "a", "a") is True
        assert would_create_cycle(tasks, "a", "c") is False

    def test_dangling_dependencies(self):
        a = _t("a", dependencies=["gone", "b", "gone"])
        assert dangling_dependencies(a, [a, _t("b")]) == ["gone"]

    def test_dependents(self):
        tasks = [_t("a", dependencies=["c"]), _t("b", dependencies=["c"]), _t("c")]
        assert [task["id"] for task in dependents("c", tasks)] == ["a", "b"]


class TestAddDependency:
    def test_adds_and_persists(self):
        """A valid edge is appended and the whole collection saved."""
        store = InMemoryTaskStore([_t("a"), _t("b")])
        task = _graph(store).add_dependency("a", "b")

        assert task["dependencies"] == ["b"]
        assert store.get("a")["dependencies"] == ["b"]
        assert store.get("a")["updated"] == FIXED_NOW
        assert store.save_count == 1

    def test_transitive_cycle_rejected(self):
        """With A->B and B->C, adding C->A fails and leaves C unchanged."""
        store = InMemoryTaskStore(
            [_t("a", dependencies=["b"]), _t("b", dependencies=["c"]), _t("c")]
        )

        with pytest.raises(CycleError) as exc_info:
            _graph(store).add_dependency("c", "a")

        assert exc_info.value.cycle == ["c", "a", "b", "c"]
        assert store.get("c")["dependencies"] == []
        assert store.save_count == 0

    def test_self_dependency_rejected(self):
        store = InMemoryTaskStore([_t("a")])

        with pytest.raises(CycleError, match="itself") as exc_info:
            _graph(store).add_dependency("a", "a")

        assert exc_info.value.cycle == ["a", "a"]
        assert store.get("a")["dependencies"] == []

    def test_idempotent(self):
        """Adding the same edge twice keeps a single entry and raises nothing."""
        store = InMemoryTaskStore([_t("a"), _t("b")])
        graph = _graph(store)

        graph.add_dependency("a", "b")
        graph.add_dependency("a", "b")

        assert store.get("a")["dependencies"] == ["b"]
        assert store.save_count == 1

    def test_unknown_task_rejected(self):
        store = InMemoryTaskStore([_t("b")])
        with pytest.raises(TaskNotFoundError):
            _graph(store).add_dependency("missing", "b")

    def test_unresolvable_dependency_rejected(self):
        """Orphan references can exist but are never newly created."""
        store = InMemoryTaskStore([_t("a")])

        with pytest.raises(UnknownDependencyError):
            _graph(store).add_dependency("a", "missing")

        assert store.get("a")["dependencies"] == []
        assert store.save_count == 0

    def test_cross_client_dependency_rejected(self):
        store = InMemoryTaskStore([_t("a", client_id="one"), _t("b", client_id="two")])

        with pytest.raises(CrossClientDependencyError):
            _graph(store).add_dependency("a", "b")

        assert store.get("a")["dependencies"] == []

    def test_errors_are_value_errors(self):
        """Callers that only know ValueError still catch graph errors."""
        store = InMemoryTaskStore([_t("a")])
        with pytest.raises(ValueError):
            _graph(store).add_dependency("a", "a")

    def test_acyclic_after_many_additions(self):
        """Whatever edges are attempted, the accepted ones never form a loop."""
        ids = ["a", "b", "c", "d", "e"]
        store = InMemoryTaskStore([_t(task_id) for task_id in ids])
        graph = _graph(store)

        for task_id in ids:
            for dependency_id in ids:
                try:
                    graph.add_dependency(task_id, dependency_id)
                except CycleError:
                    pass

        assert _has_cycle(store.tasks) is False
        # a total order is the maximal acyclic result of this sequence
        assert sum(len(task["dependencies"]) for task in store.tasks) == 10


class TestRemoveDependency:
    def test_removes_and_persists(self):
        store = InMemoryTaskStore([_t("a", dependencies=["b"]), _t("b")])
        _graph(store).remove_dependency("a", "b")

        assert store.get("a")["dependencies"] == []
        assert store.save_count == 1

    def test_absent_is_noop(self):
        store = InMemoryTaskStore([_t("a"), _t("b")])
        _graph(store).remove_dependency("a", "b")
        assert store.save_count == 0

    def test_removes_dangling_id(self):
        """A dangling id can be cleaned up even though it no longer resolves."""
        store = InMemoryTaskStore([_t("a", dependencies=["gone"])])
        _graph(store).remove_dependency("a", "gone")
        assert store.get("a")["dependencies"] == []

    def test_remove_dangling_keeps_live_dependencies(self):
        """Only ids of deleted tasks are dropped, in one save."""
        store = InMemoryTaskStore(
            [_t("a", dependencies=["gone", "b", "lost", "gone"]), _t("b")]
        )

        removed = _graph(store).remove_dangling_dependencies("a")

        assert removed == ["gone", "lost"]
        assert store.get("a")["dependencies"] == ["b"]
        assert store.save_count == 1

    def test_remove_dangling_without_any_is_noop(self):
        store = InMemoryTaskStore([_t("a", dependencies=["b"]), _t("b")])
        assert _graph(store).remove_dangling_dependencies("a") == []
        assert store.save_count == 0


class TestUpdateStatus:
    def test_blocked_task_can_move_by_default(self):
        """Blocking is advisory unless enforcement is turned on."""
        store = InMemoryTaskStore([_t("a", dependencies=["b"]), _t("b")])
        _graph(store).update_status("a", "Completed")
        assert store.get("a")["status"] == "Completed"

    def test_enforced_blocking_rejects_gated_statuses(self):
        store = InMemoryTaskStore([_t("a", dependencies=["b"]), _t("b")])
        graph = _graph(store, enforce_blocking=True)

        with pytest.raises(BlockedTaskError) as exc_info:
            graph.update_status("a", "In Progress")

        assert exc_info.value.blocking_ids == ["b"]
        assert store.get("a")["status"] == "Pending"
        assert store.save_count == 0

    def test_enforced_blocking_allows_on_hold(self):
        store = InMemoryTaskStore([_t("a", dependencies=["b"]), _t("b")])
        _graph(store, enforce_blocking=True).update_status("a", "On Hold")
        assert store.get("a")["status"] == "On Hold"

    def test_enforced_blocking_ignores_dangling(self):
        store = InMemoryTaskStore([_t("a", dependencies=["gone"])])
        _graph(store, enforce_blocking=True).update_status("a", "Completed")
        assert store.get("a")["status"] == "Completed"

    def test_completed_can_be_reopened(self):
        store = InMemoryTaskStore([_t("a", status="Completed")])
        _graph(store).update_status("a", "Pending")
        assert store.get("a")["status"] == "Pending"

    def test_unknown_status_rejected(self):
        store = InMemoryTaskStore([_t("a")])
        with pytest.raises(ValueError, match="unknown status"):
            _graph(store).update_status("a", "Done")  # type: ignore[arg-type]

    def test_records_notification(self):
        store = InMemoryTaskStore([_t("a", client_id="c1", description="Design")])
        notifier = RecordingNotifier()

        _graph(store, notifier).update_status("a", "In Progress")

        assert notifier.events == [
            ("c1", "Task 'Design' moved from Pending to In Progress", FIXED_NOW)
        ]

    def test_same_status_is_silent(self):
        store = InMemoryTaskStore([_t("a")])
        notifier = RecordingNotifier()

        _graph(store, notifier).update_status("a", "Pending")

        assert notifier.events == []
        assert store.save_count == 0


class TestLifecycle:
    def test_create_task_defaults(self):
        """New tasks start Pending with no dependencies."""
        store = InMemoryTaskStore()
        due = pendulum.date(2026, 4, 1)

        task = _graph(store).create_task("c1", "Design", due_date=due, priority="High")

        assert task["id"] == "task-1"
        assert task["status"] == "Pending"
        assert task["dependencies"] == []
        assert task["due_date"] == due
        assert task["priority"] == "High"
        assert task["created"] == FIXED_NOW
        assert store.tasks == [task]

    def test_create_task_rejects_unknown_priority(self):
        store = InMemoryTaskStore()
        with pytest.raises(ValueError):
            _graph(store).create_task("c1", "x", priority="Urgent")  # type: ignore[arg-type]
        assert store.tasks == []

    def test_update_description_records_notification(self):
        store = InMemoryTaskStore([_t("a", client_id="c1", description="Draft")])
        notifier = RecordingNotifier()

        _graph(store, notifier).update_description("a", "Final")

        assert store.get("a")["description"] == "Final"
        assert notifier.events[0][1] == "Task 'Draft' renamed to 'Final'"

    def test_update_due_date_and_priority(self):
        store = InMemoryTaskStore([_t("a")])
        graph = _graph(store)

        graph.update_due_date("a", pendulum.date(2026, 5, 5))
        graph.update_priority("a", "Low")
        assert store.get("a")["due_date"] == pendulum.date(2026, 5, 5)
        assert store.get("a")["priority"] == "Low"

        graph.update_due_date("a", None)
        assert store.get("a")["due_date"] is None

    def test_delete_does_not_cascade(self):
        """Dependents keep the dangling id, which no longer blocks them."""
        store = InMemoryTaskStore([_t("a", dependencies=["b"]), _t("b")])
        graph = _graph(store)

        graph.delete_task("b")

        assert [task["id"] for task in store.tasks] == ["a"]
        assert store.get("a")["dependencies"] == ["b"]
        assert graph.is_blocked("a") is False

    def test_delete_unknown_task(self):
        with pytest.raises(TaskNotFoundError):
            _graph(InMemoryTaskStore()).delete_task("missing")


class TestScenario:
    def test_design_build_deploy(self):
        """Design, Build, Deploy: dependency, unblocking and a rejected loop."""
        store = InMemoryTaskStore()
        graph = _graph(store)

        t1 = graph.create_task("c1", "Design")
        t2 = graph.create_task("c1", "Build")
        t3 = graph.create_task("c1", "Deploy")

        graph.add_dependency(t2["id"], t1["id"])
        assert graph.is_blocked(t2["id"]) is True

        graph.update_status(t1["id"], "Completed")
        assert graph.is_blocked(t2["id"]) is False

        graph.add_dependency(t1["id"], t3["id"])

        with pytest.raises(CycleError) as exc_info:
            graph.add_dependency(t3["id"], t2["id"])

        assert exc_info.value.cycle == [t3["id"], t2["id"], t1["id"], t3["id"]]
        assert graph.get_task(t3["id"])["dependencies"] == []
