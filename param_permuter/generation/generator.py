"""
Permutation generator.

Runs the selected strategies over every input URL and concatenates their
output in the fixed order normal, combine, ignore.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.config import GenerationConfig, GenerationStrategy
from ..core.exceptions import ProcessingError
from .query import ParsedURL, parse_url
from .strategies import get_strategy

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    """Counters collected during a run."""
    input_urls: int = 0
    wordlist_size: int = 0
    generated: Dict[str, int] = field(default_factory=dict)
    skipped: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.generated.values())


class PermutationGenerator:
    """Generate URL permutations for a fixed configuration."""

    def __init__(self, config: GenerationConfig):
        self.config = config
        self.stats = GenerationStats()

    def generate(self, urls: Sequence[str], wordlist: Sequence[str]) -> List[str]:
        """
        Generate URLs for every selected strategy.

        Args:
            urls: Input URLs, one per entry
            wordlist: Parameter names to inject

        Returns:
            Generated URLs, strategy by strategy, then URL, value and iteration

        Raises:
            ProcessingError: On the first invalid URL unless skip_invalid is set
        """
        self.stats = GenerationStats(input_urls=len(urls), wordlist_size=len(wordlist))
        params = list(wordlist)
        parsed_urls = self._parse_all(urls)

        output: List[str] = []
        for strategy in self.config.strategies:
            generated = self._run(strategy, parsed_urls, params)
            self.stats.generated[strategy.value] = len(generated)
            logger.debug(f"Strategy '{strategy.value}' generated {len(generated)} URLs")
            output.extend(generated)

        if self.stats.skipped:
            logger.warning(f"Skipped {len(self.stats.skipped)} invalid URL entries")
        logger.info(f"Generated {self.stats.total} URLs from {len(urls)} input URLs")
        return output

    def _parse_all(self, urls: Sequence[str]) -> List[ParsedURL]:
        parsed_urls = []
        for url in urls:
            parsed = self._guard(url, parse_url, url)
            if parsed is not None:
                parsed_urls.append(parsed)
        return parsed_urls

    def _run(
            self,
            strategy: GenerationStrategy,
            parsed_urls: List[ParsedURL],
            wordlist: List[str]
    ) -> List[str]:
        handler = get_strategy(strategy)
        generated: List[str] = []
        for parsed in parsed_urls:
            urls = self._guard(parsed.url, handler, parsed, wordlist, self.config)
            if urls:
                generated.extend(urls)
        return generated

    def _guard(self, url: str, func, *args) -> Optional[object]:
        """Apply the invalid URL policy around a single URL operation."""
        try:
            return func(*args)
        except ProcessingError as e:
            if not self.config.skip_invalid:
                raise
            logger.warning(f"Skipping {url!r}: {e.message}")
            self.stats.skipped.append((url, e.message))
            return None
