# cadence/cadence_io/generics.py
# Generic JSON & filesystem helpers shared by settings, plan store & report export

from pathlib import Path
from typing import Any, Union
import json

from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: Any, path: Path) -> None:
    from ..core.exceptions import FileWriteError

    content = json.dumps(obj, indent=2)
    try:
        ensure_parent(path)
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e}", path)
    vlog_file_write(Path(path), len(content))


# read JSON w/ UTF-8 encoding
def read_json_safe(path: Path) -> Any:
    from ..core.exceptions import JSONParsingError, FileReadError

    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise JSONParsingError(f"{path} is not valid UTF-8: {e}")
    except OSError as e:
        raise FileReadError(f"Could not read {path}: {e}", path)
    vlog_file_read(Path(path), len(text))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        # trimmed snippet of the offending JSON for the error message
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)
        snippet_lines = lines[snippet_start:snippet_end]

        numbered_lines = []
        for i, line in enumerate(snippet_lines, start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")
