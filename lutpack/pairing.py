"""Greedy first-fit pairing of LUT instances.

Two LUTs can share a slot when their combined distinct inputs do not exceed
``max_inputs``. Instances are paired in discovery order: each unpaired LUT
takes the first later unpaired LUT it fits with. The result is deterministic
but not a maximum matching.
"""

from collections.abc import Sequence

from loguru import logger

from lutpack.netlist.instance import LutInstance, LutPair

DEFAULT_MAX_INPUTS = 6


def fits_together(a: LutInstance, b: LutInstance, max_inputs: int = DEFAULT_MAX_INPUTS) -> bool:
    """Check whether the union of both input sets has at most ``max_inputs`` nets.

    Stops counting as soon as the limit is exceeded.
    """
    count = len(a.inputs)
    seen = set(a.inputs)
    for net in b.inputs:
        if net not in seen:
            count += 1
            if count > max_inputs:
                return False
    return count <= max_inputs


def pair_instances(instances: Sequence[LutInstance], max_inputs: int = DEFAULT_MAX_INPUTS) -> list[LutPair]:
    """Pair instances greedily and mark the paired ones as consumed.

    Parameters
    ----------
    instances : Sequence[LutInstance]
        Instances in discovery order.
    max_inputs : int, optional
        Largest allowed number of distinct inputs in a pair. Default is 6.

    Returns
    -------
    list[LutPair]
        Pairs ordered by the position of their first member. Instances that
        fit with no later instance are left unconsumed and do not appear.
    """
    pairs: list[LutPair] = []
    for i, first in enumerate(instances):
        if first.consumed:
            continue
        for j in range(i + 1, len(instances)):
            second = instances[j]
            if second.consumed or not fits_together(first, second, max_inputs):
                continue
            first.consume()
            second.consume()
            pairs.append(LutPair(first, second, i, j))
            break

    logger.debug(f"Paired {2 * len(pairs)} of {len(instances)} LUT instances into {len(pairs)} pairs")
    return pairs
