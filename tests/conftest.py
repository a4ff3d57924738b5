import io
import os
import shutil
import stat
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PIL import Image  # noqa: E402

requires_posix = pytest.mark.skipif(sys.platform == "win32", reason="fake engines are shell scripts")
requires_graphviz = pytest.mark.skipif(shutil.which("dot") is None, reason="Graphviz 'dot' not on PATH")


def png_bytes(width: int = 40, height: int = 30, color: str = "red") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def sample_png(tmp_path):
    path = tmp_path / "sample.png"
    path.write_bytes(png_bytes())
    return path


@pytest.fixture
def fake_engine(tmp_path, monkeypatch):
    """
    Writes an executable shell script that mimics a layout engine and puts it on PATH.

    The script stores its stdin in `<name>.stdin` and its arguments in `<name>.args`.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def make(name="fake-dot", stdout_file=None, stderr_text="", exit_code=0):
        script = bin_dir / name
        lines = [
            "#!/bin/sh",
            f'echo "$@" > "{bin_dir / name}.args"',
            f'cat > "{bin_dir / name}.stdin"',
        ]
        if stdout_file is not None:
            lines.append(f'cat "{stdout_file}"')
        if stderr_text:
            lines.append(f"printf '%s' '{stderr_text}' >&2")
        lines.append(f"exit {exit_code}")
        script.write_text("\n".join(lines) + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return name

    make.bin_dir = bin_dir
    return make


@pytest.fixture(scope="session")
def qapp():
    from graphlens.viewer.application import ensure_application

    return ensure_application()


@pytest.fixture
def process_events(qapp):
    def run():
        for _ in range(5):
            qapp.processEvents()

    return run
