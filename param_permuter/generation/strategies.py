"""
URL permutation strategies.

Every strategy takes one parsed URL, the parameter wordlist and the run
configuration, and returns the generated URLs ordered by value, then by
iteration. Wordlist names are consumed from the end of a working copy.
"""

from typing import Callable, Dict, List

from ..core.config import GenerationConfig, GenerationStrategy, ValueStrategy
from .query import ParsedURL, build_url, iteration_count, new_names, pop_name, transform_value

StrategyFunc = Callable[[ParsedURL, List[str], GenerationConfig], List[str]]


def _fill_slots(query: Dict[str, str], stack: List[str], slots: int, value: str) -> None:
    for _ in range(slots):
        if not stack:
            break
        query[pop_name(stack)] = value


def normal_strategy(parsed: ParsedURL, wordlist: List[str], config: GenerationConfig) -> List[str]:
    """
    Overwrite every existing parameter with the value and add new ones.

    Each generated URL carries the existing keys plus up to
    ``chunk - existing`` names taken from the wordlist.
    """
    existing = parsed.param_count
    iterations = iteration_count(len(wordlist), config.chunk, existing, parsed.url)
    slots = config.chunk - existing
    names = new_names(wordlist, parsed.keys)

    generated = []
    for raw_value in config.values:
        value = transform_value(raw_value, config.double_encode)
        stack = list(names)

        for _ in range(iterations):
            query = {key: value for key in parsed.keys}
            _fill_slots(query, stack, slots, value)
            generated.append(build_url(parsed, query))

    return generated


def combine_strategy(parsed: ParsedURL, wordlist: List[str], config: GenerationConfig) -> List[str]:
    """
    Pitchfork over the existing parameters, modifying one per URL.

    A URL without query parameters produces nothing. The wordlist is not used.
    """
    original = parsed.existing_params()

    generated = []
    for raw_value in config.values:
        value = transform_value(raw_value, config.double_encode)

        for key in original:
            query = dict(original)
            if config.value_strategy == ValueStrategy.REPLACE:
                query[key] = value
            else:
                query[key] = original[key] + value
            generated.append(build_url(parsed, query))

    return generated


def ignore_strategy(parsed: ParsedURL, wordlist: List[str], config: GenerationConfig) -> List[str]:
    """Keep the existing parameters untouched and append new ones."""
    existing = parsed.param_count
    iterations = iteration_count(len(wordlist), config.chunk, existing, parsed.url)
    slots = config.chunk - existing
    names = new_names(wordlist, parsed.keys)
    original = parsed.existing_params()

    generated = []
    for raw_value in config.values:
        value = transform_value(raw_value, config.double_encode)
        stack = list(names)

        for _ in range(iterations):
            query = dict(original)
            _fill_slots(query, stack, slots, value)
            generated.append(build_url(parsed, query))

    return generated


STRATEGY_HANDLERS: Dict[GenerationStrategy, StrategyFunc] = {
    GenerationStrategy.NORMAL: normal_strategy,
    GenerationStrategy.COMBINE: combine_strategy,
    GenerationStrategy.IGNORE: ignore_strategy,
}


def get_strategy(strategy: GenerationStrategy) -> StrategyFunc:
    """Look up the function implementing a strategy."""
    return STRATEGY_HANDLERS[GenerationStrategy(strategy)]
