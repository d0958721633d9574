import os
from pathlib import Path

ENV_FILE_VAR = "TABSENSE_ENV_FILE"

# Checked in order when ENV_FILE_VAR is not set
_ENV_CANDIDATES = ("config/.env.dev", "config/.env")
_ROOT_MARKERS = (".git", "pyproject.toml")


def project_root() -> Path:
    """Nearest ancestor of this package holding a VCS or packaging marker."""
    here = Path(__file__).resolve()
    for directory in here.parents:
        if any((directory / marker).exists() for marker in _ROOT_MARKERS):
            return directory
    return here.parents[2]


def resolve_env_file_path() -> Path | None:
    """Pick the .env file for Settings, or None to rely on the environment.

    An explicit ``TABSENSE_ENV_FILE`` wins (absolute, or relative to the
    project root) if it exists. Otherwise the first existing candidate
    under ``config/`` is used, development file first.
    """
    root = project_root()

    explicit = os.environ.get(ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        path = path if path.is_absolute() else root / path
        if path.is_file():
            return path

    return next(
        (root / candidate for candidate in _ENV_CANDIDATES if (root / candidate).is_file()),
        None,
    )
