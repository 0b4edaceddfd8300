"""Version information for enum-helper."""
import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def get_version():
    """Get the installed version, or read it from pyproject.toml in a source checkout."""
    try:
        return version("enum-helper")
    except PackageNotFoundError:
        pass
    try:
        # src/enum_helper -> project root
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "0.0.0"


__version__ = get_version()
