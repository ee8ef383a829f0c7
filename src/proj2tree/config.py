"""Exclusion and run configuration.

The exclusion configuration is read once from the TOML document shipped inside the
package and then passed explicitly to every component. A missing or malformed
document never stops a run: the loader warns and falls back to an empty
configuration.
"""

import sys
import tomllib
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from proj2tree.exceptions import ConfigurationError
from proj2tree.exclusion_rules.composite_rules import CompositeExclusionRules
from proj2tree.exclusion_rules.extension_rules import ExtensionExclusionRules, normalize_extension
from proj2tree.exclusion_rules.size_rules import SizeExclusionRules, parse_file_size
from proj2tree.file_system_tree.permission_action import PermissionAction
from proj2tree.types import PathType

BUILTIN_CONFIG_RESOURCE = "default_config.toml"
CONFIG_TABLE = ("tool", "proj2tree")
DEFAULT_OUTPUT_NAME = "tree.md"
DEFAULT_LANGUAGE = "text"


@dataclass(frozen=True)
class ExclusionConfig:
    """Immutable exclusion policy shared by the tree and content renderers.

    Attributes:
        exclude_dirs: Directory names that are listed with an ellipsis and never read.
        exclude_files: File name patterns, either exact names or ``*.ext`` globs,
            in declaration order.
        exclude_extensions: Lowercased extensions (no dot) whose contents are skipped.
        max_file_size: Largest file, in bytes, whose contents are emitted. None means
            no limit.
        extension_mapping: Lowercased extension to code-fence language tag.
    """

    exclude_dirs: FrozenSet[str] = frozenset()
    exclude_files: Tuple[str, ...] = ()
    exclude_extensions: FrozenSet[str] = frozenset()
    max_file_size: Optional[int] = None
    extension_mapping: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ExclusionConfig":
        """Return a configuration that excludes nothing."""
        return cls()

    def language_for(self, path: PathType) -> str:
        """Look up the fence language for a file by its lowercased extension.

        Example:
            >>> ExclusionConfig(extension_mapping={"py": "python"}).language_for("src/App.PY")
            'python'
            >>> ExclusionConfig.empty().language_for("notes.txt")
            'text'
            >>> ExclusionConfig.empty().language_for("Makefile")
            'text'
        """
        suffix = Path(path).suffix
        if not suffix:
            return DEFAULT_LANGUAGE
        return self.extension_mapping.get(normalize_extension(suffix), DEFAULT_LANGUAGE)

    def content_rules(self) -> CompositeExclusionRules:
        """Build the filters that apply to the content section only."""
        rules = CompositeExclusionRules([ExtensionExclusionRules(self.exclude_extensions)])
        if self.max_file_size is not None:
            rules.add_rule_object(SizeExclusionRules(self.max_file_size))
        return rules


def _string_list(table: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(key, "expected a list of strings")
    return tuple(value)


def parse_exclusion_config(table: Mapping[str, Any]) -> ExclusionConfig:
    """Validate a configuration table and build an ExclusionConfig.

    Missing keys take their empty defaults. ``max_file_size`` accepts an integer
    number of bytes or a human-readable size such as ``"1 MiB"``.

    Args:
        table: The ``[tool.proj2tree]`` table.

    Returns:
        The parsed configuration.

    Raises:
        ConfigurationError: If any value has the wrong type or cannot be parsed.

    Example:
        >>> config = parse_exclusion_config({"exclude_extensions": ["PNG"], "max_file_size": "2KB"})
        >>> sorted(config.exclude_extensions), config.max_file_size
        (['png'], 2000)
    """
    if not isinstance(table, Mapping):
        raise ConfigurationError(".".join(CONFIG_TABLE), "expected a table")

    max_file_size = table.get("max_file_size")
    if max_file_size is not None:
        try:
            max_file_size = parse_file_size(max_file_size)
        except ValueError as e:
            raise ConfigurationError("max_file_size", str(e)) from e

    mapping = table.get("extension_mapping", {})
    if not isinstance(mapping, Mapping) or not all(isinstance(v, str) for v in mapping.values()):
        raise ConfigurationError("extension_mapping", "expected a table of strings")

    return ExclusionConfig(
        exclude_dirs=frozenset(_string_list(table, "exclude_dirs")),
        exclude_files=_string_list(table, "exclude_files"),
        exclude_extensions=frozenset(normalize_extension(e) for e in _string_list(table, "exclude_extensions")),
        max_file_size=max_file_size,
        extension_mapping={normalize_extension(k): v for k, v in mapping.items()},
    )


def parse_config_text(text: str) -> ExclusionConfig:
    """Parse a TOML document and extract its ``[tool.proj2tree]`` table.

    Raises:
        tomllib.TOMLDecodeError: If the document is not valid TOML.
        ConfigurationError: If the table is absent or malformed.
    """
    document: Any = tomllib.loads(text)
    for key in CONFIG_TABLE:
        if not isinstance(document, dict) or key not in document:
            raise ConfigurationError(".".join(CONFIG_TABLE), "table not found")
        document = document[key]
    return parse_exclusion_config(document)


def load_builtin_config() -> ExclusionConfig:
    """Load the exclusion configuration shipped with the package.

    Never raises: on any problem a single warning is printed to stderr and an empty
    configuration is returned.
    """
    try:
        text = resources.files("proj2tree").joinpath(BUILTIN_CONFIG_RESOURCE).read_text(encoding="utf-8")
        return parse_config_text(text)
    except (OSError, tomllib.TOMLDecodeError, ConfigurationError) as e:
        print(f"Warning: builtin configuration unavailable ({e}); no exclusions will be applied", file=sys.stderr)
        return ExclusionConfig.empty()


@dataclass(frozen=True)
class RunConfig:
    """Options for a single run, fixed once arguments are parsed.

    Attributes:
        target_directory: Directory to render.
        output_file: Explicit output path. None selects ``<target>/tree.md``.
        include_tree: Emit the file tree section.
        include_contents: Emit the file contents section.
        print_to_console: Write the document to stdout instead of a file.
        no_gitignore: Do not consult the target's ``.gitignore``.
        permission_action: What to do when a directory cannot be read.
    """

    target_directory: Path = Path(".")
    output_file: Optional[Path] = None
    include_tree: bool = True
    include_contents: bool = True
    print_to_console: bool = False
    no_gitignore: bool = False
    permission_action: PermissionAction = PermissionAction.RAISE

    @property
    def output_name(self) -> str:
        """Basename the self-output rule compares entries against.

        Example:
            >>> RunConfig().output_name
            'tree.md'
            >>> RunConfig(output_file=Path("docs/snapshot.md")).output_name
            'snapshot.md'
        """
        if self.output_file is not None:
            return Path(self.output_file).name
        return DEFAULT_OUTPUT_NAME

    @property
    def output_path(self) -> Path:
        """Where the document is written when not printing to the console."""
        if self.output_file is not None:
            return Path(self.output_file)
        return Path(self.target_directory) / DEFAULT_OUTPUT_NAME
