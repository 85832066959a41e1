def test_map_points_and_filters(client, alice, bob, plant_tree):
    oak = plant_tree(alice, species_id=1, planted_date="2022-05-01")
    willow = plant_tree(alice, species_id=4, planted_date="2023-05-01", health_status="needs_care")
    plant_tree(bob)

    points = client.get("/api/map/trees", headers=alice).json()
    assert {p["id"] for p in points} == {oak["id"], willow["id"]}
    assert set(points[0]) == {
        "id", "latitude", "longitude", "species_name", "health_status", "planted_date", "current_height_cm"
    }

    by_health = client.get("/api/map/trees", params={"health_status": "needs_care"}, headers=alice).json()
    assert [p["id"] for p in by_health] == [willow["id"]]

    by_year = client.get("/api/map/trees", params={"year": 2022}, headers=alice).json()
    assert [p["id"] for p in by_year] == [oak["id"]]

    by_species = client.get("/api/map/trees", params={"species_id": 4}, headers=alice).json()
    assert [p["species_name"] for p in by_species] == ["Willow Tree"]


def test_map_area_bounds_are_inclusive(client, alice, plant_tree):
    inside = plant_tree(alice, latitude=40.0, longitude=-75.0)
    edge = plant_tree(alice, latitude=41.0, longitude=-74.0)
    plant_tree(alice, latitude=45.0, longitude=-75.0)

    resp = client.get(
        "/api/map/trees/area",
        params={"north": 41.0, "south": 39.0, "east": -74.0, "west": -76.0},
        headers=alice,
    )
    assert resp.status_code == 200
    assert {p["id"] for p in resp.json()} == {inside["id"], edge["id"]}


def test_map_area_requires_bounds(client, alice):
    resp = client.get("/api/map/trees/area", params={"north": 41.0}, headers=alice)
    assert resp.status_code == 400
