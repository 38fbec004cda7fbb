"""Icon asset loaders.

Loaders provide SVG source to the icon renderer. They implement
`get_source(variant, name)` returning `(source, filename)` and raise
`IconNotFoundError` when no asset exists for the pair.

Built-in Loaders:
- `FileSystemIconLoader`: Load from an asset root laid out as ``<variant>/<name>.svg``
- `PackageIconLoader`: Load from icons shipped inside a Python package
- `DictIconLoader`: Load from an in-memory mapping (testing/embedded)
- `ChoiceIconLoader`: Try multiple loaders in order (custom icon sets)

Custom Loaders:
Implement the IconLoader protocol:
    ```python
    class BucketIconLoader:
        def get_source(self, variant: str, name: str) -> tuple[str, str | None]:
            blob = bucket.get(f"icons/{variant}/{name}.svg")
            if blob is None:
                raise IconNotFoundError(f"Icon '{name}' not found", name=name, variant=variant)
            return blob.decode(), f"s3://icons/{variant}/{name}.svg"
    ```

Lookup Rules:
Names are matched exactly (callers lower-case them first). Names that
could escape the asset root or break a filesystem call (containing a path
separator or a NUL byte, or starting with a dot) never match.

Thread-Safety:
Loaders are read-only after construction and safe for concurrent
`get_source()` calls.

"""

from __future__ import annotations

import importlib.resources
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from tabler_components.exceptions import IconNotFoundError
from tabler_components.utils.constants import ICON_FILE_EXTENSION

logger = logging.getLogger(__name__)


@runtime_checkable
class IconLoader(Protocol):
    """Anything that can fetch SVG source for a (variant, name) pair."""

    def get_source(self, variant: str, name: str) -> tuple[str, str | None]: ...


def _is_safe_name(name: str) -> bool:
    return (
        bool(name)
        and not name.startswith(".")
        and not any(char in name for char in ("/", "\\", "\x00"))
    )


def _not_found(variant: str, name: str, where: str) -> IconNotFoundError:
    return IconNotFoundError(
        f"Icon '{name}' ({variant}) not found in {where}",
        name=name,
        variant=variant,
    )


class FileSystemIconLoader:
    """Load icons from a directory tree.

    Expects one file per icon under ``<root>/<variant>/<name>.svg``.

    Example:
        >>> loader = FileSystemIconLoader("static/icons/")
        >>> source, filename = loader.get_source("outline", "home")
        >>> filename
        'static/icons/outline/home.svg'

    Raises:
        IconNotFoundError: If the file is missing or cannot be read
    """

    __slots__ = ("_encoding", "_root")

    def __init__(self, root: str | Path, encoding: str = "utf-8"):
        self._root = Path(root)
        self._encoding = encoding

    @property
    def root(self) -> Path:
        return self._root

    def get_source(self, variant: str, name: str) -> tuple[str, str]:
        """Read the asset for (variant, name) from disk."""
        if not _is_safe_name(name) or not _is_safe_name(variant):
            raise _not_found(variant, name, str(self._root))

        path = self._root / variant / f"{name}{ICON_FILE_EXTENSION}"
        if not path.is_file():
            raise _not_found(variant, name, str(self._root))
        try:
            return path.read_text(self._encoding), str(path)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read icon asset %s: %s", path, exc)
            raise _not_found(variant, name, str(self._root)) from exc

    def list_icons(self, variant: str) -> list[str]:
        """List icon names available for a variant."""
        directory = self._root / variant
        if not directory.is_dir():
            return []
        return sorted(p.stem for p in directory.glob(f"*{ICON_FILE_EXTENSION}") if p.is_file())


class PackageIconLoader:
    """Load icons shipped inside an installed Python package.

    Uses ``importlib.resources`` so icon sets can be distributed as
    ordinary wheels.

    Example:
        >>> loader = PackageIconLoader("tabler_components", "icons")
        >>> loader.get_source("outline", "home")[1]
        'tabler_components/icons/outline/home.svg'

    Raises:
        IconNotFoundError: If the resource is missing
        ModuleNotFoundError: If ``package_name`` is not installed
    """

    __slots__ = ("_encoding", "_package_name", "_package_path")

    def __init__(
        self,
        package_name: str,
        package_path: str = "icons",
        encoding: str = "utf-8",
    ):
        self._package_name = package_name
        self._package_path = package_path
        self._encoding = encoding

    def _get_root(self) -> importlib.resources.abc.Traversable:
        root = importlib.resources.files(self._package_name)
        for part in self._package_path.split("/"):
            if part:
                root = root.joinpath(part)
        return root

    def get_source(self, variant: str, name: str) -> tuple[str, str]:
        """Load icon source from package resources."""
        where = f"package '{self._package_name}/{self._package_path}'"
        if not _is_safe_name(name) or not _is_safe_name(variant):
            raise _not_found(variant, name, where)

        filename = f"{name}{ICON_FILE_EXTENSION}"
        resource = self._get_root().joinpath(variant).joinpath(filename)
        try:
            source = resource.read_text(self._encoding)
        except (OSError, TypeError, ValueError) as exc:
            raise _not_found(variant, name, where) from exc

        return source, f"{self._package_name}/{self._package_path}/{variant}/{filename}"

    def list_icons(self, variant: str) -> list[str]:
        """List icon names bundled for a variant."""
        directory = self._get_root().joinpath(variant)
        try:
            return sorted(
                item.name[: -len(ICON_FILE_EXTENSION)]
                for item in directory.iterdir()
                if item.is_file() and item.name.endswith(ICON_FILE_EXTENSION)
            )
        except (FileNotFoundError, NotADirectoryError, TypeError):
            return []


class DictIconLoader:
    """Load icons from an in-memory mapping.

    Keys are ``"<variant>/<name>"`` strings.

    Example:
        >>> loader = DictIconLoader({"outline/dot": '<svg xmlns="http://www.w3.org/2000/svg"/>'})
        >>> loader.get_source("outline", "dot")
        ('<svg xmlns="http://www.w3.org/2000/svg"/>', None)
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = mapping

    def get_source(self, variant: str, name: str) -> tuple[str, None]:
        key = f"{variant}/{name}"
        if key not in self._mapping:
            raise _not_found(variant, name, "mapping")
        return self._mapping[key], None

    def list_icons(self, variant: str) -> list[str]:
        prefix = f"{variant}/"
        return sorted(k[len(prefix) :] for k in self._mapping if k.startswith(prefix))


class ChoiceIconLoader:
    """Try multiple loaders in order, returning the first match.

    Lets an application override or extend the bundled icon set:

        ```python
        loader = ChoiceIconLoader([
            FileSystemIconLoader("app/icons/"),
            PackageIconLoader("tabler_components", "icons"),
        ])
        ```

    Raises:
        IconNotFoundError: If no loader has the icon
    """

    __slots__ = ("_loaders",)

    def __init__(self, loaders: Sequence[IconLoader]):
        self._loaders = list(loaders)

    @property
    def loaders(self) -> list[IconLoader]:
        return list(self._loaders)

    def get_source(self, variant: str, name: str) -> tuple[str, str | None]:
        """Try each loader in order, return first match."""
        for loader in self._loaders:
            try:
                return loader.get_source(variant, name)
            except IconNotFoundError:
                continue
        raise _not_found(variant, name, f"any of {len(self._loaders)} loaders")

    def list_icons(self, variant: str) -> list[str]:
        """Merge icon lists from all loaders (deduplicated, sorted)."""
        names: set[str] = set()
        for loader in self._loaders:
            if hasattr(loader, "list_icons"):
                names.update(loader.list_icons(variant))
        return sorted(names)
