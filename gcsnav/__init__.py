"""
gcsnav - Browse and manage a Google Cloud Storage bucket from the terminal.

The bucket's slash-delimited keys are presented as folders; the navigator
lets you enter/leave folders, download, upload, create folders and delete.

Import from submodules directly:
    from gcsnav.config import GcpConfiguration, NavigatorSettings
    from gcsnav.storage import StorageClient
    from gcsnav.nav import NavigationController
    from gcsnav.ui import KeyEventPrompt
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
