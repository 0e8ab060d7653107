from datetime import date

from civiltech.db.models.company import Company
from civiltech.db.models.operations import DailyLabor
from civiltech.db.models.progress import Category, DailyProgress
from civiltech.db.models.project import Project
from civiltech.services.dashboard import (
    PALETTE,
    as_float,
    palette_color,
    summary_counters,
    work_distribution_series,
)


def test_fresh_schema_counters_are_zero(client):
    res = client.get("/api/dashboard/stats")
    assert res.status_code == 200
    assert res.json() == {"total": 0, "completed": 0, "ongoing": 0, "companies": 0, "labor": 0, "civil": 0}


def test_counters_over_seeded_data(client, company_id):
    today = date.today().isoformat()
    client.post("/api/categories", json={"category_name": "Civil Works", "unit_of_measurement": "m3"})
    other = client.post("/api/categories", json={"category_name": "Electrical"}).json()["id"]

    pid = client.post("/api/projects", json={"project_name": "A", "status": "Completed", "company_id": company_id}).json()["id"]
    client.post("/api/projects", json={"project_name": "B", "status": "Ongoing"})
    client.post("/api/projects", json={"project_name": "C", "status": "Ongoing"})
    client.post("/api/projects", json={"project_name": "D"})

    client.post("/api/labor", json={"project_id": pid, "report_date": today, "labor_count": 12})
    client.post("/api/labor", json={"project_id": pid, "report_date": today, "labor_count": 8})
    client.post("/api/labor", json={"project_id": pid, "report_date": "2001-01-01", "labor_count": 99})

    client.post("/api/progress", json={"project_id": pid, "category_id": 1, "quantity_completed": 40.5})
    client.post("/api/progress", json={"project_id": pid, "category_id": 1, "quantity_completed": 9.5})
    client.post("/api/progress", json={"project_id": pid, "category_id": other, "quantity_completed": 1000})

    stats = client.get("/api/dashboard/stats").json()
    assert stats == {"total": 4, "completed": 1, "ongoing": 2, "companies": 1, "labor": 20, "civil": 50.0}


def test_summary_counters_uses_given_day(db):
    db.add_all([
        DailyLabor(report_date=date(2024, 3, 1), labor_count=7),
        DailyLabor(report_date=date(2024, 3, 2), labor_count=5),
    ])
    db.commit()
    assert summary_counters(db, today=date(2024, 3, 1))["labor"] == 7
    assert summary_counters(db, today=date(2024, 3, 9))["labor"] == 0


def test_summary_counters_never_negative(db):
    db.add(DailyLabor(report_date=date(2024, 3, 1), labor_count=-4))
    db.commit()
    assert summary_counters(db, today=date(2024, 3, 1))["labor"] == 0


def test_civil_category_is_configurable(db):
    db.add_all([Category(id=1, category_name="Civil"), Category(id=2, category_name="Mechanical")])
    db.add(Project(id=1, project_name="P"))
    db.add_all([
        DailyProgress(project_id=1, category_id=1, quantity_completed=3),
        DailyProgress(project_id=1, category_id=2, quantity_completed=11),
    ])
    db.commit()
    assert summary_counters(db)["civil"] == 3.0
    assert summary_counters(db, civil_category_id=2)["civil"] == 11.0


def test_palette_cycles_by_position():
    for i in range(len(PALETTE) * 2 + 1):
        assert palette_color(i) == PALETTE[i % len(PALETTE)]


def test_as_float_treats_junk_as_zero():
    assert as_float(None) == 0.0
    assert as_float("abc") == 0.0
    assert as_float("12.5") == 12.5


def test_work_distribution_colors_follow_row_order(db):
    names = ["A-Civil", "B-Steel", "C-Paint", "D-Glass", "E-Roof", "F-Tiles", "G-Doors"]
    db.add(Project(id=1, project_name="P"))
    for i, name in enumerate(names, start=1):
        db.add(Category(id=i, category_name=name))
        db.add(DailyProgress(project_id=1, category_id=i, quantity_completed=i))
    db.commit()

    rows = work_distribution_series(db)
    assert [r["name"] for r in rows] == names
    assert [r["color"] for r in rows] == [PALETTE[i % len(PALETTE)] for i in range(len(names))]
    assert rows[6]["color"] == PALETTE[0]
    assert rows[2]["value"] == 3.0


def test_work_distribution_endpoint(client):
    pid = client.post("/api/projects", json={"project_name": "P"}).json()["id"]
    cat = client.post("/api/categories", json={"category_name": "Asphalt"}).json()["id"]
    client.post("/api/progress", json={"project_id": pid, "category_id": cat, "quantity_completed": 12.5})
    client.post("/api/progress", json={"project_id": pid, "category_id": cat, "quantity_completed": ""})

    rows = client.get("/api/charts/work-distribution").json()
    assert rows == [{"name": "Asphalt", "value": 12.5, "color": PALETTE[0]}]


def test_company_status_chart(client, db):
    db.add_all([Company(id=1, company_name="Alpha"), Company(id=2, company_name="Beta"), Company(id=3, company_name="Idle")])
    db.add_all([
        Project(project_name="a1", company_id=1, status="Completed"),
        Project(project_name="a2", company_id=1, status="Ongoing"),
        Project(project_name="a3", company_id=1, status="Completed"),
        Project(project_name="b1", company_id=2, status="Planned"),
        Project(project_name="orphan", status="Completed"),
    ])
    db.commit()

    rows = client.get("/api/charts/company-status").json()
    assert rows == [
        {"name": "Alpha", "completed": 2, "ongoing": 1},
        {"name": "Beta", "completed": 0, "ongoing": 0},
    ]
