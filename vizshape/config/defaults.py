DEFAULT_CONFIG = {
    # -----------------------------
    # ANALYZER (OPTIONAL)
    # -----------------------------
    # The analyzer runs with these values when no config is given.
    "analyzer": {
        "heatmap_min_records": 5,  # heatmap needs MORE than this many records
    },

    # -----------------------------
    # OUTPUT (CLI ONLY)
    # -----------------------------
    "output": {
        "indent": 2,
    },
}
