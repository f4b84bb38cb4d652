from .mytypes import InstanceKey, ReportedInstance


def _region_key(key):
    return InstanceKey(type=key.type, availability_zone='')


def reconcile(running, zone_reservations, region_reservations):
    """Match running instances against zone and region scoped reservations.

    Returns a mapping of InstanceKey to a signed delta: negative values are
    running instances without a covering reservation, positive values are
    unused reservations. Keys that match exactly are left out.

    Zone-scoped reservations are applied first. Remaining deficits then
    borrow from the region-scoped pool of the same instance type, in sorted
    (type, availability_zone) order, so when a pool is too small to serve
    every zone the alphabetically first zones are served first. Whatever is
    left in the pool is reported under the region key.

    The inputs are not modified.
    """
    out = {}
    for k in sorted(running):
        out[k] = -running[k]
    for k in sorted(zone_reservations):
        out[k] = out.get(k, 0) + zone_reservations[k]

    pool = dict(region_reservations)
    for k in sorted(out):
        v = out[k]
        if v >= 0:
            continue
        k2 = _region_key(k)
        if k2 not in pool:
            continue
        need, have = -v, pool[k2]
        if need >= have:
            out[k] = v + have
            del pool[k2]
        else:
            out[k] = 0
            pool[k2] = have - need

    for k in sorted(pool):
        out[k] = out.get(k, 0) + pool[k]
    return {
        k: out[k]
        for k in sorted(out)
        if out[k] != 0
    }


def split_report(result):
    """Split a reconciliation result into (on_demand, unused) report rows,
    each sorted by instance type."""
    on_demand = []
    unused = []
    for k, v in result.items():
        if v < 0:
            on_demand.append(ReportedInstance(
                type=k.type, count=-v, availability_zone=k.availability_zone))
        elif v > 0:
            unused.append(ReportedInstance(
                type=k.type, count=v, availability_zone=''))
    on_demand.sort(key=lambda ri: ri.type)
    unused.sort(key=lambda ri: ri.type)
    return on_demand, unused
