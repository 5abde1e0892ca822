"""Serialise the index to the output artifact."""

import json
import os
import stat
import tempfile
from pathlib import Path

from ..models import ArticleIndex

JS_TEMPLATE = """const {name} = {data};

export default {name};
"""


def render_index(index: ArticleIndex, fmt: str = "js", variable_name: str = "allArticles") -> str:
    """Render the index as a js module or a bare json array."""
    data = json.dumps(index.to_output(), ensure_ascii=False, indent=4)
    if fmt == "json":
        return data + "\n"
    if fmt == "js":
        return JS_TEMPLATE.format(name=variable_name, data=data)
    raise ValueError(f"Unknown output format: {fmt}")


def _target_mode(output_path: Path) -> int:
    """Mode for the artifact: keep an existing file's mode, else follow the umask."""
    if output_path.exists():
        return stat.S_IMODE(output_path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_index(
    index: ArticleIndex,
    output_path: Path,
    fmt: str = "js",
    variable_name: str = "allArticles",
) -> None:
    """Write the artifact in one step so readers never see a partial file."""
    content = render_index(index, fmt, variable_name)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(output_path)
    # mkstemp creates the file as 0600
    fd, tmp_name = tempfile.mkstemp(dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, output_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
