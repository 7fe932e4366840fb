"""File tools: read_file, write_file and list_dir.

Paths are taken as given, relative to the process working directory.
OSError from the filesystem propagates and is reported to the model as a
tool failure by the executor.
"""

from pathlib import Path

from pydantic import BaseModel

from tool_agent.tools.domain.schema import array, integer, object_schema, string
from tool_agent.tools.domain.spec import ToolArguments, ToolSpec

READ_FILE = "read_file"
WRITE_FILE = "write_file"
LIST_DIR = "list_dir"

_PROMPT_PREVIEW_CHARS = 500


class ReadFileOutput(BaseModel, frozen=True):
    content: str


class WriteFileOutput(BaseModel, frozen=True):
    path: str
    bytes_written: int


class ListDirOutput(BaseModel, frozen=True):
    entries: list[str]


def read_file(arguments: ToolArguments) -> ReadFileOutput:
    path = Path(str(arguments["path"]))
    return ReadFileOutput(content=path.read_text(encoding="utf-8"))


def write_file(arguments: ToolArguments) -> WriteFileOutput:
    path = Path(str(arguments["path"]))
    data = str(arguments["content"]).encode("utf-8")
    path.write_bytes(data)
    return WriteFileOutput(path=str(path), bytes_written=len(data))


def list_dir(arguments: ToolArguments) -> ListDirOutput:
    path = Path(str(arguments["path"]))
    entries = sorted(
        f"{child.name}/" if child.is_dir() else child.name for child in path.iterdir()
    )
    return ListDirOutput(entries=entries)


def _render_read(arguments: ToolArguments) -> str:
    return f"Read file {arguments['path']}."


def _render_write(arguments: ToolArguments) -> str:
    content = str(arguments["content"])
    if len(content) > _PROMPT_PREVIEW_CHARS:
        content = content[:_PROMPT_PREVIEW_CHARS] + "..."
    return f"Write file to {arguments['path']} with content:\n{content}"


def _render_list(arguments: ToolArguments) -> str:
    return f"List directory {arguments['path']}."


def read_file_spec() -> ToolSpec:
    return ToolSpec(
        name=READ_FILE,
        description="Read a UTF-8 text file and return its whole content.",
        input_schema=object_schema(
            {"path": string("Path of the file to read.")}, required=["path"]
        ),
        output_schema=object_schema(
            {"content": string("The file content.")}, required=["content"]
        ),
        handler=read_file,
        render_prompt=_render_read,
    )


def write_file_spec() -> ToolSpec:
    return ToolSpec(
        name=WRITE_FILE,
        description=(
            "Write text to a file, creating it or replacing its previous content."
        ),
        input_schema=object_schema(
            {
                "path": string("Path of the file to write."),
                "content": string("The complete new content of the file."),
            },
            required=["path", "content"],
        ),
        output_schema=object_schema(
            {
                "path": string("The path that was written."),
                "bytes_written": integer("Number of UTF-8 bytes written."),
            },
            required=["path", "bytes_written"],
        ),
        handler=write_file,
        render_prompt=_render_write,
    )


def list_dir_spec() -> ToolSpec:
    return ToolSpec(
        name=LIST_DIR,
        description=(
            "List the entries of a directory, sorted by name. "
            "Subdirectories end with '/'."
        ),
        input_schema=object_schema(
            {"path": string("Path of the directory to list.")}, required=["path"]
        ),
        output_schema=object_schema(
            {"entries": array(string(), "Entry names.")}, required=["entries"]
        ),
        handler=list_dir,
        render_prompt=_render_list,
    )
