from datetime import timedelta

from tests.helpers import NOW, fmt


def test_add_alert(create_alert):
    response = create_alert()
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Exam"
    assert data["date"] == "24.10.2026"
    assert data["last_notified_at"] is None

def test_add_duplicate(create_alert):
    create_alert()
    response = create_alert()
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]

def test_add_past_date(create_alert):
    response = create_alert(date="01.01.2020")
    assert response.status_code == 400
    assert "01.01.2020" in response.json()["detail"]

def test_add_blank_name(create_alert):
    assert create_alert(name="   ").status_code == 422

def test_list_alerts(api_client, create_alert):
    empty = api_client.get("/alerts/")
    assert empty.status_code == 200
    assert empty.json() == {"alerts": [], "text": "No reminders found."}

    create_alert("Exam")
    create_alert("Project")
    data = api_client.get("/alerts/").json()
    assert [a["name"] for a in data["alerts"]] == ["Exam", "Project"]
    assert data["text"] == "-> Exam\n-> Project"

def test_alert_info(api_client, create_alert):
    create_alert()
    response = api_client.get("/alerts/Exam")
    assert response.status_code == 200
    embed = response.json()
    assert embed["title"] == "Reminder"
    assert embed["fields"][1] == {"name": "Date", "value": "24.10.2026", "inline": False}

def test_alert_info_missing(api_client):
    assert api_client.get("/alerts/Missing").status_code == 404

def test_edit_date_resets_notification(api_client, store, add_alert):
    add_alert("X", NOW + timedelta(hours=20), last_notified_at=NOW)

    new_date = fmt(NOW + timedelta(hours=10))
    response = api_client.put("/alerts/X", json={"property": "date", "value": new_date})

    assert response.status_code == 200
    assert response.json()["date"] == new_date
    assert response.json()["last_notified_at"] is None

def test_edit_errors(api_client, create_alert):
    create_alert("Exam")
    create_alert("Project")

    assert api_client.put("/alerts/Missing", json={"property": "description", "value": "x"}).status_code == 404
    assert api_client.put("/alerts/Exam", json={"property": "name", "value": "Project"}).status_code == 409
    assert api_client.put("/alerts/Exam", json={"property": "date", "value": "soon"}).status_code == 400
    assert api_client.put("/alerts/Exam", json={"property": "created_by", "value": "x"}).status_code == 422

def test_remove_alert(api_client, create_alert):
    create_alert()
    response = api_client.delete("/alerts/Exam")
    assert response.status_code == 200
    assert response.json()["message"] == "The alert 'Exam' was deleted."
    assert api_client.delete("/alerts/Exam").status_code == 404

def test_name_with_slash(api_client, create_alert):
    assert create_alert(name="Exam 1/2").status_code == 201

    info = api_client.get("/alerts/Exam%201%2F2")
    assert info.status_code == 200
    assert info.json()["fields"][0]["value"] == "Exam 1/2"

    edited = api_client.put("/alerts/Exam%201%2F2", json={"property": "description", "value": "Chapter 5"})
    assert edited.status_code == 200
    assert edited.json()["description"] == "Chapter 5"

    deleted = api_client.delete("/alerts/Exam%201%2F2")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "The alert 'Exam 1/2' was deleted."
    assert api_client.get("/alerts/").json()["alerts"] == []
