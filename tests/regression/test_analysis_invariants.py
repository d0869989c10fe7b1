import pytest

from vizshape import (
    VizKind,
    analyze_data_structure,
    get_primary_viz,
    get_viz_priority_score,
    is_suitable_for,
)


# -------------------------------------------------
# Fixtures
# -------------------------------------------------

DATASETS = {
    "empty": [],
    "structureless": [{"id": "1", "title": "Something"}],
    "geo_partial": [
        {"id": "1", "location_lat": 40.7128, "location_lng": -74.006},
        {"id": "2"},
        {"id": "3", "location_lat": 999, "location_lng": 999},
    ],
    "messy": [
        {"location_lat": "north", "date_occurred": "yesterday-ish 42", "score": "n/a"},
        {"category": None, "connections": "none", "tags": None},
        {"category": "ufo", "date_occurred": "2024-06-01", "score": 12},
    ],
    "wrapped": {"results": [{"id": "1", "category": "ufo"}, {"id": "2", "category": "ufo"}]},
    "everything": [
        {
            "id": str(i),
            "category": ["ufo", "dreams"][i % 2],
            "date_occurred": f"2024-0{(i % 9) + 1}-01",
            "location_lat": 10.0 + i,
            "location_lng": 20.0 + i,
            "connections": [{"id": str(i + 1)}],
            "score": i,
        }
        for i in range(8)
    ],
}


@pytest.fixture(params=sorted(DATASETS))
def analysis(request):
    return analyze_data_structure(DATASETS[request.param])


# -------------------------------------------------
# Invariant Regression Tests
# -------------------------------------------------

def test_ratios_in_range(analysis):
    assert 0.0 <= analysis.geo_ratio <= 1.0
    assert 0.0 <= analysis.temporal_ratio <= 1.0
    assert 0.0 <= analysis.category_diversity <= 1.0


def test_flags_match_ratios(analysis):
    assert analysis.has_geo == (analysis.geo_ratio > 0)
    assert analysis.has_temporal == (analysis.temporal_ratio > 0)
    assert analysis.has_categories == (analysis.category_diversity > 0)


def test_recommendations_non_empty_and_unique(analysis):
    assert len(analysis.recommended_viz) >= 1
    assert len(set(analysis.recommended_viz)) == len(analysis.recommended_viz)


def test_primary_is_first_recommendation(analysis):
    assert get_primary_viz(analysis) == analysis.recommended_viz[0]


@pytest.mark.parametrize("viz", list(VizKind))
def test_zero_score_iff_unsuitable(analysis, viz):
    assert (get_viz_priority_score(analysis, viz) == 0) == (not is_suitable_for(analysis, viz))


def test_scores_strictly_decreasing(analysis):
    scores = [get_viz_priority_score(analysis, v) for v in analysis.recommended_viz]

    assert scores[0] == 1.0
    assert all(a > b for a, b in zip(scores, scores[1:]))


@pytest.mark.parametrize("name", sorted(DATASETS))
def test_analysis_is_deterministic(name):
    assert analyze_data_structure(DATASETS[name]) == analyze_data_structure(DATASETS[name])


def test_empty_collection_contract():
    analysis = analyze_data_structure([])

    assert analysis.count == 0
    assert not any([
        analysis.has_geo,
        analysis.has_temporal,
        analysis.has_categories,
        analysis.has_tags,
        analysis.has_connections,
        analysis.has_rankings,
    ])
    assert analysis.recommended_viz == (VizKind.CHART,)


def test_everything_dataset_uses_all_views():
    analysis = analyze_data_structure(DATASETS["everything"])

    assert analysis.recommended_viz == tuple(VizKind)
