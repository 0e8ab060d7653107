def test_categories(client):
    res = client.post("/api/categories", json={"category_name": "Concrete", "unit_of_measurement": "m3"})
    assert res.json()["message"] == "Added"
    rows = client.get("/api/categories").json()
    assert rows == [{"id": 1, "category_name": "Concrete", "unit_of_measurement": "m3"}]


def test_fleet_newest_first(client):
    client.post("/api/fleet", json={"vehicle_name": "Dump Truck", "plate_number": "ABC-123", "type": "Truck"})
    client.post("/api/fleet", json={"vehicle_name": "Pickup", "plate_number": "XYZ-9", "type": "Light"})
    rows = client.get("/api/fleet").json()
    assert [r["vehicle_name"] for r in rows] == ["Pickup", "Dump Truck"]


def test_labor_roles(client):
    client.post("/api/labor-roles", json={"role_name": "Welder"})
    assert [r["role_name"] for r in client.get("/api/labor-roles").json()] == ["Welder"]


def test_labor_list_includes_project_name(client):
    pid = client.post("/api/projects", json={"project_name": "Airport"}).json()["id"]
    client.post(
        "/api/labor",
        json={
            "project_id": pid,
            "report_date": "2024-04-10",
            "engineer_count": 2,
            "technician_count": 5,
            "labor_count": 30,
            "total_hours": 280.5,
        },
    )
    rows = client.get("/api/labor").json()
    assert rows[0]["project_name"] == "Airport"
    assert rows[0]["labor_count"] == 30
    assert rows[0]["total_hours"] == 280.5


def test_equipment_list_includes_project_name(client):
    pid = client.post("/api/projects", json={"project_name": "Port"}).json()["id"]
    client.post(
        "/api/equipment",
        json={"project_id": pid, "equipment_name": "Crane", "status": "Working", "hours_operated": "8", "log_date": "2024-04-10"},
    )
    client.post("/api/equipment", json={"project_id": "", "equipment_name": "Loader"})

    rows = client.get("/api/equipment").json()
    by_name = {r["equipment_name"]: r for r in rows}
    assert by_name["Crane"]["project_name"] == "Port"
    assert by_name["Crane"]["hours_operated"] == 8.0
    assert by_name["Loader"]["project_name"] is None
    assert by_name["Loader"]["project_id"] is None
