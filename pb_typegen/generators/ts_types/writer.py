"""File writer for generated type declarations."""
import os
import stat
import tempfile
from pathlib import Path


def _target_mode(out_path: Path) -> int:
    """Mode of the existing target, or the umask default for a new file."""
    if out_path.exists():
        return stat.S_IMODE(out_path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_types(content: str, out_path: Path) -> None:
    """
    Write the generated declarations to out_path in a single atomic replace.

    Args:
        content: Full file contents
        out_path: Target file path
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{out_path.name}.", suffix=".tmp", dir=out_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        # mkstemp creates the file 0600
        os.chmod(tmp_name, _target_mode(out_path))
        os.replace(tmp_name, out_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
