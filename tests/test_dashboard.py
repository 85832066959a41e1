from datetime import date
from types import SimpleNamespace

from green_campus.services.dashboard_service import (
    build_statistics,
    carbon_offset,
    height_stats,
)


def _tree(planted, height=0, species="Oak Tree", health="healthy"):
    return SimpleNamespace(
        planted_date=planted,
        current_height_cm=height,
        species_name=species,
        health_status=health,
    )


def test_carbon_offset_uses_whole_years():
    assert carbon_offset([_tree(date(2020, 6, 1))], 2024) == 192
    assert carbon_offset([_tree(date(2024, 12, 31))], 2024) == 0


def test_height_stats_ignore_unmeasured_trees():
    trees = [_tree(date(2020, 1, 1), 100), _tree(date(2020, 1, 1), 300), _tree(date(2020, 1, 1), 0)]
    assert height_stats(trees) == (200, 300)
    assert height_stats([_tree(date(2020, 1, 1))]) == (0.0, 0.0)


def test_statistics_fall_back_to_unknown_species():
    stats = build_statistics([_tree(date(2020, 1, 1), species=None), _tree(date(2020, 1, 1))])
    assert stats["species_distribution"] == {"Unknown": 1, "Oak Tree": 1}
    assert stats["total_trees"] == 2


def test_overview_endpoint(client, alice, plant_tree):
    for year in range(2018, 2024):
        plant_tree(alice, planted_date=f"{year}-06-01")
    plant_tree(alice, planted_date="2024-06-01", health_status="struggling")

    resp = client.get("/api/dashboard/overview", headers=alice)
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {
        "totalTrees", "healthyTrees", "needsCareTrees", "strugglingTrees", "totalCarbonOffset", "recentTrees"
    }
    assert body["totalTrees"] == 7
    assert body["healthyTrees"] == 6
    assert body["strugglingTrees"] == 1
    assert body["needsCareTrees"] == 0

    current_year = date.today().year
    expected = sum((current_year - year) * 48 for year in range(2018, 2025))
    assert body["totalCarbonOffset"] == expected

    recent = body["recentTrees"]
    assert len(recent) == 5
    assert recent[0]["planted_date"] == "2024-06-01"


def test_statistics_endpoint(client, alice, plant_tree):
    plant_tree(alice, species_id=1, current_height_cm=100)
    plant_tree(alice, species_id=1, current_height_cm=300)
    plant_tree(alice, species_id=4)

    resp = client.get("/api/dashboard/statistics", headers=alice)
    assert resp.status_code == 200
    assert resp.json() == {
        "speciesDistribution": {"Oak Tree": 2, "Willow Tree": 1},
        "averageHeight": 200,
        "maxHeight": 300,
        "totalTrees": 3,
    }


def test_empty_dashboard(client, alice):
    overview = client.get("/api/dashboard/overview", headers=alice).json()
    assert overview["totalTrees"] == 0
    assert overview["recentTrees"] == []
    stats = client.get("/api/dashboard/statistics", headers=alice).json()
    assert stats["averageHeight"] == 0
    assert stats["maxHeight"] == 0
