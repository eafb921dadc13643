"""
Versioning for Octasphere. The version number is hard-coded; when running
from a git checkout, the number of commits since the last tag and the commit
hash are appended.
"""

import logging
import subprocess
from pathlib import Path


# The reference version number, bumped before each release.
__version__ = "0.1.0"


logger = logging.getLogger("octasphere")

# The repo dir when running from a git checkout, otherwise None.
repo_dir = Path(__file__).parents[1]
repo_dir = repo_dir if repo_dir.joinpath(".git").is_dir() else None


def get_version():
    """Get the version string, extended with git info for dev installs."""
    if not repo_dir:
        return __version__

    release, post, labels = get_version_info_from_git()
    if not release:
        release = __version__
    elif release != __version__:
        logger.warning("Octasphere version from git and __version__ don't match.")

    version = release
    if post and post != "0":
        version += f".post{post}"
    if labels:
        version += "+" + ".".join(labels)
    return version


def get_version_info_from_git():
    """Get (release, post, labels) from ``git describe``.

    Any failure to run git results in a warning and ``(None, None, ["unknown"])``.
    """
    command = ["git", "describe", "--long", "--always", "--tags", "--dirty"]
    try:
        p = subprocess.run(command, cwd=repo_dir, capture_output=True)
    except OSError as err:
        logger.warning(f"Could not get octasphere version: {err}")
        return None, None, ["unknown"]

    output = p.stdout.decode(errors="ignore").strip()
    if p.returncode:
        stderr = p.stderr.decode(errors="ignore")
        logger.warning(f"Could not get octasphere version:\n{stderr}")
        return None, None, ["unknown"]

    parts = output.lstrip("v").split("-")
    if len(parts) <= 2:
        # No tags: only the hash and maybe 'dirty'
        return None, None, parts
    release, post, *labels = parts
    return release, post, labels


__version__ = get_version()
version_info = tuple(
    int(i) if i.isnumeric() else i for i in __version__.split("+")[0].split(".")
)
