from vizshape.core.analysis import DataStructureAnalysis


def analysis_to_dict(analysis: DataStructureAnalysis) -> dict:
    """
    Renderer-facing payload.

    Keys follow the camelCase contract the UI layer consumes;
    ``fields`` is sorted so equal analyses serialize identically.
    """
    return {
        "count": analysis.count,
        "fields": sorted(analysis.fields),
        "hasGeo": analysis.has_geo,
        "geoRatio": analysis.geo_ratio,
        "hasTemporal": analysis.has_temporal,
        "temporalRatio": analysis.temporal_ratio,
        "hasCategories": analysis.has_categories,
        "categoryDiversity": analysis.category_diversity,
        "hasTags": analysis.has_tags,
        "hasConnections": analysis.has_connections,
        "hasRankings": analysis.has_rankings,
        "recommendedViz": [viz.value for viz in analysis.recommended_viz],
    }
