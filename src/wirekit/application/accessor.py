"""Process-level access to the container installed by startup code.

Startup code constructs the container and installs it before importing the
generated registration module, which obtains it through ``current_container``.
"""

import threading
from typing import Optional

from wirekit.domain import ContainerNotInstalledError, IContainer

_lock = threading.Lock()
_installed: Optional[IContainer] = None


def install_container(container: IContainer) -> None:
    """Make ``container`` the process container.

    Example:
        >>> container = DIContainer()
        >>> install_container(container)
        >>> import app.injection  # registers and resolves everything
    """
    global _installed
    with _lock:
        _installed = container


def current_container() -> IContainer:
    """Return the process container.

    Raises:
        ContainerNotInstalledError: If startup code has not installed one.
    """
    container = _installed
    if container is None:
        raise ContainerNotInstalledError(
            "No DI container installed. Call install_container() before importing the registration module."
        )
    return container


def uninstall_container() -> None:
    global _installed
    with _lock:
        _installed = None
