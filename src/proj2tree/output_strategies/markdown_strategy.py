"""Markdown output strategy.

Every piece of text that ends up in the document is produced here, so the layout of
the output lives in one place:

    # Структура проекта: <display-dir>

    ## Дерево файлов

    ```
    <tree lines>
    ```

    ## Содержимое файлов


    ### `<relative/path>`

    <fence><language>
    <content>
    <fence>
"""

from pathlib import Path

from proj2tree.types import PathType

CURRENT_DIRECTORY_LABEL = "текущая директория"
TITLE = "Структура проекта"
TREE_HEADING = "Дерево файлов"
CONTENTS_HEADING = "Содержимое файлов"
UNREADABLE_PLACEHOLDER = "[Не удалось прочитать файл]"
PLAIN_FENCE = "```"


class MarkdownOutputStrategy:
    """Formats the document title, sections and per-file code blocks as Markdown.

    Each method returns a complete chunk including its trailing newlines, so the
    chunks can be written one after another without extra glue.

    Example:
        >>> strategy = MarkdownOutputStrategy()
        >>> strategy.format_title(".")
        '# Структура проекта: текущая директория\\n\\n'
        >>> strategy.format_file_start("src/main.rs")
        '\\n### `src/main.rs`\\n\\n'
        >>> strategy.format_content("fn main() {}")
        'fn main() {}\\n'
    """

    def display_name(self, directory: PathType) -> str:
        """Name shown in the title for the target directory."""
        if Path(directory) == Path("."):
            return CURRENT_DIRECTORY_LABEL
        return str(directory)

    def format_title(self, directory: PathType) -> str:
        return f"# {TITLE}: {self.display_name(directory)}\n\n"

    def format_tree_start(self) -> str:
        return f"## {TREE_HEADING}\n\n{PLAIN_FENCE}\n"

    def format_tree_line(self, line: str) -> str:
        return f"{line}\n"

    def format_tree_end(self) -> str:
        return f"{PLAIN_FENCE}\n\n"

    def format_contents_start(self) -> str:
        return f"## {CONTENTS_HEADING}\n\n"

    def format_file_start(self, relative_path: str) -> str:
        """Heading that introduces a single file's block."""
        return f"\n### `{relative_path}`\n\n"

    def format_code_start(self, fence: str, language: str) -> str:
        return f"{fence}{language}\n"

    def format_content(self, content: str) -> str:
        """Return the content terminated by exactly one added newline, if it lacked one."""
        if content.endswith("\n"):
            return content
        return content + "\n"

    def format_code_end(self, fence: str) -> str:
        return f"{fence}\n"

    def format_unreadable(self) -> str:
        """Block emitted in place of a file that could not be read as text."""
        return f"{PLAIN_FENCE}\n{UNREADABLE_PLACEHOLDER}\n{PLAIN_FENCE}\n"
