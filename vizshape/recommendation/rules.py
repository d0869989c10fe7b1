from vizshape.core.viz_kind import VizKind


# Each gate returns the VizKind it unlocks, or None.
# Gate order is recommendation priority (see GATES).


def gate_map(signals, config):
    if signals.has_geo:
        return VizKind.MAP
    return None


def gate_network(signals, config):
    if signals.has_connections:
        return VizKind.NETWORK
    return None


def gate_heatmap(signals, config):
    # category x time cells need enough points to mean anything
    if (
        signals.has_categories
        and signals.has_temporal
        and signals.count > config.heatmap_min_records
    ):
        return VizKind.HEATMAP
    return None


def gate_timeline(signals, config):
    if signals.has_temporal:
        return VizKind.TIMELINE
    return None


def gate_chart(signals, config):
    if signals.has_categories or signals.has_rankings:
        return VizKind.CHART
    return None


GATES = (
    gate_map,
    gate_network,
    gate_heatmap,
    gate_timeline,
    gate_chart,
)
