"""Top-level package for the CAH deck builder.

Generates Cards Against Humanity card images and 10x7 deck sheets for
Tabletop Simulator from plain-text pack files.

Provides subpackages:
- cah_toolkit.core – card, pack, batch and tally models
- cah_toolkit.builder – parsing, batching, rendering and orchestration
- cah_toolkit.utils – logging helpers
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("cah-toolkit")
    except PackageNotFoundError:
        pass

    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
