from .composer import RecommendationComposer, compose_recommendations

__all__ = [
    "RecommendationComposer",
    "compose_recommendations",
]
