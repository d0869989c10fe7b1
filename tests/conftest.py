import pandas as pd
import pytest


@pytest.fixture
def geo_records():
    """Two records with valid coordinates."""
    return [
        {"id": "1", "location_lat": 40.7128, "location_lng": -74.006},
        {"id": "2", "location_lat": 34.0522, "location_lng": -118.2437},
    ]


@pytest.fixture
def temporal_records():
    return [
        {"id": "1", "date_occurred": "2024-01-15", "title": "Event 1"},
        {"id": "2", "date_occurred": "2024-02-20", "title": "Event 2"},
        {"id": "3", "date_occurred": "2024-03-10", "title": "Event 3"},
    ]


@pytest.fixture
def category_temporal_records():
    """
    Six records with category + date: one more than the heatmap gate needs.
    """
    return [
        {"id": "1", "category": "ufo", "date": "2024-01-15"},
        {"id": "2", "category": "dreams", "date": "2024-01-20"},
        {"id": "3", "category": "ufo", "date": "2024-02-10"},
        {"id": "4", "category": "nde", "date": "2024-02-15"},
        {"id": "5", "category": "dreams", "date": "2024-03-05"},
        {"id": "6", "category": "ufo", "date": "2024-03-20"},
    ]


@pytest.fixture
def connection_records():
    return [
        {"id": "1", "name": "Node 1", "connections": [{"id": "2", "similarity_score": 0.8}]},
        {"id": "2", "name": "Node 2"},
    ]


@pytest.fixture
def ranking_records():
    return [
        {"id": "1", "name": "User 1", "score": 100},
        {"id": "2", "name": "User 2", "score": 85},
        {"id": "3", "name": "User 3", "score": 70},
    ]


@pytest.fixture
def multi_pattern_records():
    """Geo + temporal + category + score on only two records."""
    return [
        {
            "id": "1",
            "category": "ufo",
            "date_occurred": "2024-01-15",
            "location_lat": 40.7128,
            "location_lng": -74.006,
            "score": 100,
        },
        {
            "id": "2",
            "category": "dreams",
            "date_occurred": "2024-02-20",
            "location_lat": 34.0522,
            "location_lng": -118.2437,
            "score": 85,
        },
    ]


@pytest.fixture
def experiences_df():
    """
    DataFrame export with one row missing coordinates.
    """
    return pd.DataFrame({
        "id": ["1", "2", "3", "4"],
        "category": ["ufo", "dreams", "ufo", None],
        "location_lat": [40.7128, None, 34.0522, 51.5072],
        "location_lng": [-74.006, None, -118.2437, -0.1276],
        "date_occurred": ["2024-01-15", "2024-02-20", None, "2024-04-01"],
    })
