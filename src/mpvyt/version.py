"""Version management for mpvyt."""

from importlib import metadata
from pathlib import Path

try:
    import tomllib
except ImportError:
    tomllib = None


def get_version() -> str:
    """Installed distribution version, else the one in pyproject.toml."""
    try:
        return metadata.version("mpvyt")
    except metadata.PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if tomllib is None or not pyproject_path.exists():
        return "0.0.0"
    try:
        with open(pyproject_path, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "0.0.0"


__version__ = get_version()
