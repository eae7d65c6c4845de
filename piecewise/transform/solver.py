import logging
from collections.abc import Iterable

from piecewise.model import Range

from .chain import MapChain

log = logging.getLogger(__name__)


def minimal_output(chain: MapChain, seeds: Iterable[Range] | None = None) -> int:
    """
    Smallest value the chain produces, found without walking the domain.

    Without ``seeds`` the final stage's destinations are inverted through the
    chain and the start of every inverted fragment is evaluated. Every stage
    is increasing on each fragment, so a fragment's smallest output is the
    output of its start. Outputs that pass the final stage by identity are
    not searched.

    With ``seeds`` the seed ranges are carried forward through every stage,
    split at source boundaries, and the smallest start of the resulting
    output ranges is returned. This is the exact minimum over the seed pool.
    """
    if seeds is None:
        outputs = chain.final_stage.destinations()
        starts = [
            candidate.start
            for output in outputs
            for candidate in chain.invert(output)
            if candidate.length
        ]
        if not starts:
            raise ValueError("No candidate inputs to evaluate")
        log.debug(
            "Evaluating %d candidate inputs from %d output ranges",
            len(starts),
            len(outputs),
        )
        result = min(chain.evaluate(start) for start in starts)
    else:
        pool = [seed for seed in seeds if seed.length]
        images = chain.image(pool)
        if not images:
            raise ValueError("No seed ranges to evaluate")
        log.debug(
            "Carried %d seed ranges to %d output ranges", len(pool), len(images)
        )
        result = min(image.start for image in images)
    log.debug("Minimal output %d", result)
    return result


def minimal_point_output(chain: MapChain, seeds: Iterable[int]) -> int:
    outputs = [chain.evaluate(seed) for seed in seeds]
    if not outputs:
        raise ValueError("No seeds to evaluate")
    return min(outputs)
