"""Directory to Markdown document assembly.

This module ties the tree and content renderers together into the final document.
Output is produced as a stream of chunks so it can be written as it is generated.
"""

from pathlib import Path
from typing import Iterator, Optional

from proj2tree.config import ExclusionConfig, RunConfig
from proj2tree.exclusion_policy import ExclusionPolicy
from proj2tree.exclusion_rules.base_rules import BaseExclusionRules
from proj2tree.file_content_printer import FileContentPrinter
from proj2tree.file_system_tree.file_system_tree import FileSystemTree
from proj2tree.output_strategies.markdown_strategy import MarkdownOutputStrategy
from proj2tree.types import PathType


class StreamingProj2Tree:
    """Streams the Markdown snapshot of a directory.

    The tree section and the contents section share one FileSystemTree and therefore
    one ExclusionPolicy, so they always agree about which entries were excluded.
    Which sections appear is controlled by the run configuration's include toggles.

    Attributes:
        directory (Path): Directory being processed.
        config (ExclusionConfig): The exclusion configuration.
        run_config (RunConfig): Options for this run.
        policy (ExclusionPolicy): The shared exclusion policy.
        fs_tree (FileSystemTree): The filtered tree of ``directory``.

    Example:
        >>> snapshot = StreamingProj2Tree("src", config=ExclusionConfig.empty())  # doctest: +SKIP
        >>> for chunk in snapshot.stream_document():  # doctest: +SKIP
        ...     print(chunk, end="")
        # Структура проекта: src
        ...

    Raises:
        ValueError: If directory is not an existing directory.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        config: ExclusionConfig,
        run_config: Optional[RunConfig] = None,
        ignore_rules: Optional[BaseExclusionRules] = None,
        output_strategy: Optional[MarkdownOutputStrategy] = None,
    ) -> None:
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise ValueError(f"'{directory}' is not a valid directory")

        self.config = config
        self.run_config = run_config or RunConfig(target_directory=self.directory)
        self.output_strategy = output_strategy or MarkdownOutputStrategy()
        self.policy = ExclusionPolicy(config, self.run_config.output_name, ignore_rules)
        self.fs_tree = FileSystemTree(self.directory, self.policy, self.run_config.permission_action)
        self.printer = FileContentPrinter(self.fs_tree, config, output_strategy=self.output_strategy)

    def stream_title(self) -> Iterator[str]:
        yield self.output_strategy.format_title(self.directory)

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree section: heading, opening fence, tree lines, closing fence."""
        yield self.output_strategy.format_tree_start()
        for line in self.fs_tree.stream_tree_representation():
            yield self.output_strategy.format_tree_line(line)
        yield self.output_strategy.format_tree_end()

    def stream_contents(self) -> Iterator[str]:
        """Stream the contents section: heading followed by one block per file."""
        yield self.output_strategy.format_contents_start()
        for _, _, chunks in self.printer.yield_file_contents():
            yield from chunks

    def stream_document(self) -> Iterator[str]:
        """Stream the whole document, honoring the include toggles."""
        yield from self.stream_title()
        if self.run_config.include_tree:
            yield from self.stream_tree()
        if self.run_config.include_contents:
            yield from self.stream_contents()

    @property
    def file_count(self) -> int:
        return self.fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        return self.fs_tree.get_directory_count()


class Proj2Tree(StreamingProj2Tree):
    """Convenience wrapper that renders the whole document at once.

    Example:
        >>> Proj2Tree("src", config=ExclusionConfig.empty()).document  # doctest: +SKIP
        '# Структура проекта: src\\n\\n## Дерево файлов\\n\\n```\\n...'
    """

    @property
    def document(self) -> str:
        return "".join(self.stream_document())
