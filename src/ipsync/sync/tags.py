"""Tag normalization between caller tag names and NetBox tag references."""

import logging
from collections.abc import Iterable

from ipsync.backends.protocol import TagRegistry
from ipsync.sync.models import TagRef

logger = logging.getLogger(__name__)


class TagNormalizer:
    """
    Convert tag-name sets to registry references and back.

    Usage:
        normalizer = TagNormalizer(registry)
        refs = normalizer.to_remote({"prod", "core"})
        names = normalizer.to_local(refs)
    """

    def __init__(self, registry: TagRegistry) -> None:
        self.registry = registry

    def to_remote(self, names: Iterable[str]) -> list[TagRef]:
        """
        Resolve or create a reference for every tag name.

        Names are deduplicated and resolved in sorted order. A registry
        failure for any name propagates and no references are returned.

        Args:
            names: Tag names (any iterable, duplicates allowed)

        Returns:
            One TagRef per distinct name
        """
        unique = sorted(set(names))
        refs = [self.registry.ensure_tag(name) for name in unique]
        logger.debug(f"Resolved tags {unique} -> {[ref.id for ref in refs]}")
        return refs

    @staticmethod
    def to_local(refs: Iterable[TagRef]) -> frozenset[str]:
        """Project references back to their names."""
        return frozenset(ref.name for ref in refs)
