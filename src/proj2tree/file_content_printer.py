"""File content printer.

This module turns the files of a FileSystemTree into the Markdown blocks of the
contents section. It visits exactly the files the tree shows, then applies the
content-only filters (excluded extensions and the maximum file size).
"""

from pathlib import Path
from typing import Iterator, Optional, Tuple

from .config import ExclusionConfig
from .exclusion_rules.base_rules import BaseExclusionRules
from .fence import make_fence
from .file_system_tree.file_system_tree import FileSystemTree
from .output_strategies.markdown_strategy import MarkdownOutputStrategy
from .types import PathType


class FileContentPrinter:
    """Produces the fenced Markdown block for every included file.

    A file is read whole, because the fence length depends on all of its content.
    Text is read with newline translation disabled, so line endings are reproduced
    as they are on disk. A file that cannot be decoded or read gets a placeholder
    block instead and processing moves on to the next file.

    Attributes:
        fs_tree (FileSystemTree): The filtered tree whose files are printed.
        config (ExclusionConfig): Supplies the extension to language mapping.
        content_rules (BaseExclusionRules): Filters applied to content only.
        output_strategy (MarkdownOutputStrategy): Formats the output.
        encoding (str): The encoding used to read files.

    Example:
        >>> tree = FileSystemTree("src", policy)  # doctest: +SKIP
        >>> printer = FileContentPrinter(tree, config)  # doctest: +SKIP
        >>> for path, rel_path, chunks in printer.yield_file_contents():  # doctest: +SKIP
        ...     print("".join(chunks), end="")
    """

    def __init__(
        self,
        fs_tree: FileSystemTree,
        config: ExclusionConfig,
        content_rules: Optional[BaseExclusionRules] = None,
        output_strategy: Optional[MarkdownOutputStrategy] = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the FileContentPrinter.

        Args:
            fs_tree: The filesystem tree to process.
            config: Exclusion configuration. Its extension and size filters are used
                when content_rules is not given.
            content_rules: Filters that remove a file from the contents section only.
            output_strategy: Formatter for the Markdown output.
            encoding: The encoding to use when reading files. Defaults to "utf-8".

        Raises:
            LookupError: If the specified encoding is not available.
        """
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.fs_tree = fs_tree
        self.config = config
        self.content_rules = content_rules if content_rules is not None else config.content_rules()
        self.output_strategy = output_strategy or MarkdownOutputStrategy()
        self.encoding = encoding

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Yield the (absolute, relative) paths of the files whose contents are printed."""
        for file_path, relative_path in self.fs_tree.iterate_files():
            if self.content_rules.exclude(file_path):
                continue
            yield file_path, relative_path or Path(file_path).name

    def read_text(self, file_path: PathType) -> Optional[str]:
        """Read a file as text, or return None if it cannot be read or decoded."""
        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as file:
                return file.read()
        except (OSError, UnicodeDecodeError):
            return None

    def _yield_wrapped_content(self, file_path: str, relative_path: str) -> Iterator[str]:
        """Yield the heading and fenced block for one file."""
        yield self.output_strategy.format_file_start(relative_path)

        content = self.read_text(file_path)
        if content is None:
            yield self.output_strategy.format_unreadable()
            return

        fence = make_fence(content)
        yield self.output_strategy.format_code_start(fence, self.config.language_for(file_path))
        yield self.output_strategy.format_content(content)
        yield self.output_strategy.format_code_end(fence)

    def yield_file_contents(self) -> Iterator[Tuple[str, str, Iterator[str]]]:
        """Yield one entry per printed file.

        Yields:
            Tuples of (absolute_path, relative_path, chunks) where chunks yields the
            formatted Markdown for that file.
        """
        for file_path, relative_path in self.iterate_files():
            yield file_path, relative_path, self._yield_wrapped_content(file_path, relative_path)
