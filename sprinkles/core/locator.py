"""Resource locator resolving ``stream://`` URIs to physical paths."""

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .errors import InvalidUriError

logger = logging.getLogger(__name__)

_URI_PATTERN = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-_]*)://(?P<path>.*)$")

PathLike = Union[str, Path]


class UniformResourceLocator:
    """
    Maps stream names to ordered lists of physical directories.

    Each stream (``templates``, ``config``...) holds prefixes, and each prefix
    holds a search path. Paths added later take precedence over paths added
    earlier, so the last sprinkle loaded overrides the resources of the ones
    before it.
    """

    def __init__(self, base: PathLike = "."):
        self.base = Path(base)
        # scheme -> prefix -> paths, highest priority first
        self._schemes: Dict[str, Dict[str, List[str]]] = {}

    def add_path(self, scheme: str, prefix: str, paths: Union[PathLike, Sequence[PathLike]],
                 override: bool = False):
        """
        Add one or more paths to a stream.

        Args:
            scheme: Stream name, e.g. ``"templates"``
            prefix: Sub-path of the stream the paths are mounted on; ``""``
                mounts them on the stream root
            paths: Path or list of paths, relative to ``base`` unless absolute
            override: Append with the lowest priority instead of the highest

        Duplicate paths are not collapsed: adding the same path twice lists it
        twice.
        """
        if isinstance(paths, (str, Path)):
            paths = [paths]
        new_paths = [str(p) for p in paths]

        prefixes = self._schemes.setdefault(scheme, {})
        current = prefixes.get(prefix.strip("/"), [])
        if override:
            prefixes[prefix.strip("/")] = current + new_paths
        else:
            prefixes[prefix.strip("/")] = new_paths + current

        for path in new_paths:
            logger.debug(f"Added path {path} to {scheme}://{prefix}")

    def find_resource(self, uri: str, absolute: bool = True, first: bool = False) -> Optional[str]:
        """
        Find the highest priority existing path for a URI.

        Args:
            uri: Stream URI, e.g. ``"templates://pages/home.html.twig"``
            absolute: Return an absolute path instead of the registered one
            first: Return the highest priority candidate even if it does
                not exist

        Returns:
            The path, or None when nothing matches
        """
        for path in self._candidates(uri, absolute):
            if first or Path(self._absolute(path)).exists():
                return path
        return None

    def find_resources(self, uri: str, absolute: bool = True, all: bool = False) -> List[str]:
        """
        Find every existing path for a URI, highest priority first.

        Args:
            uri: Stream URI
            absolute: Return absolute paths instead of the registered ones
            all: Include candidates that do not exist
        """
        return [
            path for path in self._candidates(uri, absolute)
            if all or Path(self._absolute(path)).exists()
        ]

    def get_paths(self, scheme: str = None) -> Dict:
        """Return the registered prefixes and paths of one stream or of all streams."""
        if scheme is None:
            return {s: {p: list(paths) for p, paths in prefixes.items()}
                    for s, prefixes in self._schemes.items()}
        return {p: list(paths) for p, paths in self._schemes.get(scheme, {}).items()}

    def schemes(self) -> List[str]:
        return list(self._schemes)

    def is_stream(self, uri: str) -> bool:
        """Whether ``uri`` uses a registered stream."""
        try:
            scheme, _ = self.parse_uri(uri)
        except InvalidUriError:
            return False
        return scheme in self._schemes

    def reset(self):
        """Forget every stream."""
        self._schemes = {}

    @staticmethod
    def parse_uri(uri: str) -> Tuple[str, str]:
        """Split a URI into its stream name and its normalized path."""
        match = _URI_PATTERN.match(uri)
        if not match:
            raise InvalidUriError(f"Invalid resource URI: {uri!r}")

        parts = []
        for part in match.group("path").replace("\\", "/").split("/"):
            if part in ("", "."):
                continue
            if part == "..":
                if not parts:
                    raise InvalidUriError(f"Resource URI escapes its stream: {uri!r}")
                parts.pop()
                continue
            parts.append(part)

        return match.group("scheme"), "/".join(parts)

    def _candidates(self, uri: str, absolute: bool) -> Iterator[str]:
        scheme, path = self.parse_uri(uri)
        if scheme not in self._schemes:
            raise InvalidUriError(f"Invalid resource {scheme}://")

        # Longest matching prefix first
        prefixes = sorted(self._schemes[scheme].items(), key=lambda item: -len(item[0]))
        for prefix, paths in prefixes:
            if prefix and path != prefix and not path.startswith(prefix + "/"):
                continue
            remainder = path[len(prefix):].lstrip("/")
            for base_path in paths:
                candidate = str(Path(base_path) / remainder) if remainder else base_path
                yield self._absolute(candidate) if absolute else candidate

    def _absolute(self, path: str) -> str:
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.base / candidate
        return str(candidate.absolute())

    def __repr__(self):
        return f"<UniformResourceLocator: {', '.join(self._schemes) or 'no streams'}>"
