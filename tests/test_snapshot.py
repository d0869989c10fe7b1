import json

from vizshape import analysis_fingerprint, analysis_to_dict, analyze_data_structure


def test_snapshot_uses_renderer_keys(multi_pattern_records):
    payload = analysis_to_dict(analyze_data_structure(multi_pattern_records))

    assert payload["count"] == 2
    assert payload["hasGeo"] is True
    assert payload["geoRatio"] == 1.0
    assert payload["recommendedViz"] == ["map", "timeline", "chart"]
    assert payload["fields"] == sorted(payload["fields"])
    json.dumps(payload)


def test_fingerprint_is_stable_for_equal_inputs(geo_records):
    first = analysis_fingerprint(analyze_data_structure(geo_records))
    second = analysis_fingerprint(analyze_data_structure(list(geo_records)))

    assert first == second
    assert len(first) == 64


def test_fingerprint_changes_with_shape(geo_records, ranking_records):
    assert analysis_fingerprint(analyze_data_structure(geo_records)) != analysis_fingerprint(
        analyze_data_structure(ranking_records)
    )
