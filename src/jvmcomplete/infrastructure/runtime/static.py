"""Runtime class source backed by a fixed set of classes.

The engine cannot reflect on a JVM itself. Hosts either hand over the
reflective handles they already have, or a JDK ``classlist`` file that
provides names only.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional

from jvmcomplete.core.descriptors import to_internal_name
from jvmcomplete.domain.protocols import RuntimeClass, RuntimeClassSource
from jvmcomplete.logger import get_logger

logger = get_logger("runtime")


def read_classlist(path: str | Path) -> list[str]:
    """
    Read class names from a JDK ``lib/classlist`` style file.

    One internal name per line. Blank lines, ``#`` comments and ``@``
    directives (CDS archive hints such as ``@lambda-proxy``) are skipped,
    as is any trailing ``id:``/``super:`` metadata.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    names: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith(("#", "@")):
                continue
            names.append(to_internal_name(line.split()[0]))
    logger.debug("Read {} class names from {}", len(names), path)
    return names


class StaticRuntimeSource(RuntimeClassSource):
    """Runtime classes known up front.

    Args:
        classes: Reflective handles keyed by dotted name
        extra_names: Further loadable names (any form) with no handle
    """

    def __init__(
        self,
        classes: Optional[Mapping[str, RuntimeClass]] = None,
        extra_names: Iterable[str] = (),
    ) -> None:
        self._classes = dict(classes or {})
        self._names = frozenset(
            [to_internal_name(name) for name in self._classes] + [to_internal_name(name) for name in extra_names]
        )

    @classmethod
    def from_classlist(
        cls, path: str | Path, classes: Optional[Mapping[str, RuntimeClass]] = None
    ) -> "StaticRuntimeSource":
        return cls(classes, read_classlist(path))

    def all_class_names(self) -> frozenset[str]:
        return self._names

    def load_class(self, dotted_name: str) -> Optional[RuntimeClass]:
        return self._classes.get(dotted_name)
