def test_search_spans_projects_and_companies(client, company_id):
    client.post("/api/projects", json={"project_name": "Riyadh Tower", "company_id": company_id})
    client.post("/api/projects", json={"project_name": "Coastal Road"})

    rows = client.get("/api/search", params={"q": "Tower"}).json()
    hits = {(r["type"], r["title"]) for r in rows}
    assert hits == {("Project", "Riyadh Tower"), ("Company", "Tower Builders")}


def test_search_without_match(client, company_id):
    assert client.get("/api/search", params={"q": "Bridge"}).json() == []


def test_blank_search_returns_nothing(client, company_id):
    assert client.get("/api/search").json() == []
    assert client.get("/api/search", params={"q": "  "}).json() == []
