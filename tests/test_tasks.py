from datetime import datetime, timedelta


# ========== CREATE ==========
def test_create_task_success(client, auth_headers):
    response = client.post("/tasks", headers=auth_headers, json={"title": "Ma première tâche", "priority": "high"})
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Ma première tâche"
    assert data["priority"] == "high"
    assert data["status"] == "pending"  # défaut
    assert data["description"] == ""
    assert data["category"] == ""
    assert data["due_date"] is None

def test_create_task_with_all_fields(client, auth_headers):
    due = (datetime.utcnow() + timedelta(days=2)).replace(microsecond=0)
    response = client.post("/tasks", headers=auth_headers, json={
        "title": "Rapport",
        "description": "Rapport trimestriel",
        "due_date": due.isoformat(),
        "priority": "low",
        "status": "in-progress",
        "category": "Work",
        "estimated_time": 90,
        "actual_time": 30
    })
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "in-progress"
    assert data["category"] == "Work"
    assert data["category_id"] is not None
    assert data["estimated_time"] == 90
    assert datetime.fromisoformat(data["due_date"]) == due

def test_create_task_reuses_category(client, auth_headers):
    first = client.post("/tasks", headers=auth_headers, json={"title": "A", "category": "Work"}).json()
    second = client.post("/tasks", headers=auth_headers, json={"title": "B", "category": "Work"}).json()
    assert first["category_id"] == second["category_id"]
    assert len(client.get("/categories", headers=auth_headers).json()) == 1

def test_create_task_validation(client, auth_headers):
    for payload in (
        {"title": ""},
        {"title": "x", "priority": "urgent"},
        {"title": "x", "status": "done"},
        {"title": "x", "estimated_time": -5},
    ):
        response = client.post("/tasks", headers=auth_headers, json=payload)
        assert response.status_code == 422, payload


# ========== LIST / FILTER ==========
def test_list_tasks_empty(client, auth_headers):
    response = client.get("/tasks", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []

def test_list_tasks_newest_first(client, auth_headers):
    for title in ("Tâche 1", "Tâche 2", "Tâche 3"):
        client.post("/tasks", headers=auth_headers, json={"title": title})
    data = client.get("/tasks", headers=auth_headers).json()
    assert [t["title"] for t in data] == ["Tâche 3", "Tâche 2", "Tâche 1"]

def test_filter_tasks_by_priority(client, auth_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "Low", "priority": "low"})
    client.post("/tasks", headers=auth_headers, json={"title": "High 1", "priority": "high"})
    client.post("/tasks", headers=auth_headers, json={"title": "High 2", "priority": "high"})

    data = client.get("/tasks?priority=high", headers=auth_headers).json()
    assert len(data) == 2
    assert all(t["priority"] == "high" for t in data)

    assert len(client.get("/tasks?priority=all", headers=auth_headers).json()) == 3
    assert client.get("/tasks?priority=urgent", headers=auth_headers).status_code == 422

def test_search_matches_title_or_description(client, auth_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "Buy GROCERIES"})
    client.post("/tasks", headers=auth_headers, json={"title": "Errands", "description": "groceries and pharmacy"})
    client.post("/tasks", headers=auth_headers, json={"title": "Gym"})

    data = client.get("/tasks?search=groceries", headers=auth_headers).json()
    assert sorted(t["title"] for t in data) == ["Buy GROCERIES", "Errands"]

def test_search_and_priority_combined(client, auth_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "Call bank", "priority": "high"})
    client.post("/tasks", headers=auth_headers, json={"title": "Call mom", "priority": "low"})
    data = client.get("/tasks?search=call&priority=high", headers=auth_headers).json()
    assert [t["title"] for t in data] == ["Call bank"]

def test_search_wildcards_are_literal(client, auth_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "Gym"})
    client.post("/tasks", headers=auth_headers, json={"title": "Save 50% on rent"})
    client.post("/tasks", headers=auth_headers, json={"title": "Fix", "description": "rename my_file"})

    for term, expected in (("_", ["Fix"]), ("50%", ["Save 50% on rent"]), ("%", ["Save 50% on rent"])):
        data = client.get("/tasks", headers=auth_headers, params={"search": term}).json()
        assert [t["title"] for t in data] == expected, term

def test_filter_by_status_and_category(client, auth_headers):
    client.post("/tasks", headers=auth_headers, json={"title": "A", "status": "completed", "category": "Work"})
    client.post("/tasks", headers=auth_headers, json={"title": "B", "category": "Work"})
    client.post("/tasks", headers=auth_headers, json={"title": "C", "status": "completed"})

    assert len(client.get("/tasks?status=completed", headers=auth_headers).json()) == 2
    assert len(client.get("/tasks?category=Work", headers=auth_headers).json()) == 2
    assert client.get("/tasks?category=Nope", headers=auth_headers).json() == []

def test_tasks_are_scoped_to_user(client, auth_headers, other_headers):
    task = client.post("/tasks", headers=auth_headers, json={"title": "Private"}).json()
    assert client.get("/tasks", headers=other_headers).json() == []
    assert client.get(f"/tasks/{task['id']}", headers=other_headers).status_code == 404
    assert client.delete(f"/tasks/{task['id']}", headers=other_headers).status_code == 404


# ========== UPDATE ==========
def test_update_task_success(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "Originale", "priority": "low"}).json()["id"]
    response = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"title": "Modifiée", "priority": "high"})
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Modifiée"
    assert data["priority"] == "high"

def test_update_keeps_category_when_absent(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "A", "category": "Work"}).json()["id"]
    data = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"title": "B"}).json()
    assert data["category"] == "Work"

def test_update_clears_category_with_empty_string(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "A", "category": "Work"}).json()["id"]
    data = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"category": ""}).json()
    assert data["category"] == ""
    assert data["category_id"] is None

def test_blank_category_means_no_category(client, auth_headers):
    data = client.post("/tasks", headers=auth_headers, json={"title": "A", "category": "   "}).json()
    assert data["category"] == ""
    assert data["category_id"] is None

    task_id = client.post("/tasks", headers=auth_headers, json={"title": "B", "category": "Work"}).json()["id"]
    data = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"category": "  "}).json()
    assert data["category_id"] is None
    assert [c["name"] for c in client.get("/categories", headers=auth_headers).json()] == ["Work"]

def test_update_null_title_is_ignored(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "Keep me"}).json()["id"]
    response = client.put(f"/tasks/{task_id}", headers=auth_headers, json={"title": None, "actual_time": 15})
    assert response.status_code == 200
    assert response.json()["title"] == "Keep me"
    assert response.json()["actual_time"] == 15

def test_update_missing_task(client, auth_headers):
    assert client.put("/tasks/999", headers=auth_headers, json={"title": "x"}).status_code == 404


# ========== STATUS ==========
def test_move_task(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "Tâche"}).json()["id"]
    response = client.post(f"/tasks/{task_id}/move", headers=auth_headers, json={"status": "in-progress"})
    assert response.status_code == 200
    assert response.json()["status"] == "in-progress"

def test_move_task_invalid_status(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "Tâche"}).json()["id"]
    response = client.post(f"/tasks/{task_id}/move", headers=auth_headers, json={"status": "archived"})
    assert response.status_code == 422

def test_complete_task(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "Tâche"}).json()["id"]
    response = client.post(f"/tasks/{task_id}/complete", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "completed"


# ========== DELETE ==========
def test_delete_task_success(client, auth_headers):
    task_id = client.post("/tasks", headers=auth_headers, json={"title": "À supprimer"}).json()["id"]
    response = client.delete(f"/tasks/{task_id}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get("/tasks", headers=auth_headers).json() == []
    assert client.get(f"/tasks/{task_id}", headers=auth_headers).status_code == 404


# ========== FROM TEXT ==========
def test_create_task_from_text_simple(client, auth_headers):
    response = client.post("/tasks/from-text", headers=auth_headers, json={"text": "Call John tomorrow"})
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Call John tomorrow"
    assert data["status"] == "pending"
    assert data["due_date"] is not None

def test_create_task_from_text_priority(client, auth_headers):
    high = client.post("/tasks/from-text", headers=auth_headers, json={"text": "Urgent: finish the report"}).json()
    low = client.post("/tasks/from-text", headers=auth_headers, json={"text": "When you can: read this article"}).json()
    assert high["priority"] == "high"
    assert low["priority"] == "low"

def test_create_task_from_text_empty(client, auth_headers):
    response = client.post("/tasks/from-text", headers=auth_headers, json={"text": ""})
    assert response.status_code == 422
