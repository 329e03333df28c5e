from datetime import datetime

from taskmind.schemas.task import TaskResponse
from taskmind.services.suggestion_service import build_suggestions
from taskmind.store.suggestion_store import SuggestionStore


def make_task(id, status="pending", priority="medium"):
    now = datetime(2026, 3, 1)
    return TaskResponse(
        id=id, user_id=1, title=f"Task {id}", description="", due_date=None,
        priority=priority, status=status, created_at=now, updated_at=now,
    )


# ========== règles ==========
def test_no_tasks_no_suggestions():
    assert build_suggestions([]) == []

def test_single_task_gets_only_productivity_tip():
    suggestions = build_suggestions([make_task(1, priority="high")])
    assert [s["type"] for s in suggestions] == ["productivity"]

def test_high_priority_suggestion_lists_related_tasks():
    tasks = [
        make_task(1, priority="high"),
        make_task(2, priority="high", status="completed"),
        make_task(3, priority="high"),
    ]
    suggestions = build_suggestions(tasks)
    priority = suggestions[0]
    assert priority["type"] == "task-priority"
    assert priority["related_task_ids"] == [1, 3]
    assert priority["content"].startswith("You have 2 high priority tasks")

def test_scheduling_suggestion_needs_more_than_three_open_tasks():
    three = [make_task(i) for i in range(1, 4)]
    assert "task-scheduling" not in [s["type"] for s in build_suggestions(three)]

    four = three + [make_task(4)]
    assert [s["type"] for s in build_suggestions(four)] == ["task-scheduling", "productivity"]


# ========== store local ==========
def test_suggestion_store_generate_apply_dismiss():
    store = SuggestionStore()
    store.add("idle-time", "Take a short break")
    new = store.generate([make_task(1), make_task(2, priority="high")])

    assert [s.type for s in store.suggestions] == ["idle-time", "task-priority", "productivity"]
    assert all(not s.applied for s in store.suggestions)

    store.apply(new[0].id)
    assert store.suggestions[1].applied is True

    store.dismiss(store.suggestions[0].id)
    assert [s.type for s in store.suggestions] == ["task-priority", "productivity"]

def test_suggestion_ids_are_unique():
    store = SuggestionStore()
    store.generate([make_task(1)])
    store.generate([make_task(1)])
    ids = [s.id for s in store.suggestions]
    assert len(ids) == len(set(ids)) == 2


# ========== endpoints ==========
def test_generate_and_list(client, auth_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "A", "priority": "high"})
    client.post("/tasks", headers=auth_headers, json={"title": "B"})

    response = client.post("/suggestions/generate", headers=auth_headers)
    assert response.status_code == 201
    assert [s["type"] for s in response.json()] == ["task-priority", "productivity"]

    listed = client.get("/suggestions", headers=auth_headers).json()
    assert len(listed) == 2

def test_generate_without_tasks(client, auth_headers):
    response = client.post("/suggestions/generate", headers=auth_headers)
    assert response.status_code == 201
    assert response.json() == []

def test_apply_and_dismiss(client, auth_headers, other_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "A"})
    suggestion = client.post("/suggestions/generate", headers=auth_headers).json()[0]

    assert client.post(f"/suggestions/{suggestion['id']}/apply", headers=other_headers).status_code == 404

    applied = client.post(f"/suggestions/{suggestion['id']}/apply", headers=auth_headers).json()
    assert applied["applied"] is True

    assert client.delete(f"/suggestions/{suggestion['id']}", headers=auth_headers).status_code == 204
    assert client.get("/suggestions", headers=auth_headers).json() == []
