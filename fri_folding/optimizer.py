"""
Parallel Strategy Search
========================

Runs the optimal-strategy search for many independent configurations
across worker processes. Each worker builds its own table; nothing is
shared between searches.

Functions:
    parallel_strategy_search -- ProcessPoolExecutor over configurations

License: MIT
"""

import time

from fri_folding.search import optimal_strategy_for


def _search_single_config(config):
    """Worker function for parallel search. Must be at module level for pickle."""
    return optimal_strategy_for(config)


def parallel_strategy_search(configs, max_workers=None, verbose=False):
    """Search optimal strategies for several configurations in parallel.

    Parameters
    ----------
    configs : list of FoldingConfig
    max_workers : int or None
        Number of parallel workers. None = os.cpu_count().
    verbose : bool

    Returns
    -------
    dict
        'results' : list of StrategyResult, in input order
        'total_time' : float

    Raises
    ------
    FoldingStrategyError
        The first configuration that fails, re-raised from its worker.
    """
    from concurrent.futures import ProcessPoolExecutor

    t0 = time.time()
    configs = list(configs)

    results = []
    if configs:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for result in executor.map(_search_single_config, configs):
                results.append(result)
                if verbose:
                    print("    domain {} -> {}: {} ({} field elements)".format(
                        result.initial_domain_size, result.terminal_threshold,
                        list(result.arities),
                        result.total_estimated_field_elements))

    total_time = time.time() - t0

    return {
        'results': results,
        'total_time': round(total_time, 4),
    }
