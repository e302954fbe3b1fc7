from enum import Enum


class ClassKind(str, Enum):
    """Defines what role a discovered class plays in the application.

    Attributes:
        INJECTABLE: Plain service registered with the container.
        CONTROLLER: HTTP controller, injectable with a route prefix.
        GUARD: Guard class attached to controllers or handlers.
        SOCKET_CONTROLLER: Socket gateway class.
    """

    INJECTABLE = "injectable"
    CONTROLLER = "controller"
    GUARD = "guard"
    SOCKET_CONTROLLER = "socket-controller"

    def __str__(self) -> str:
        return self.value


class EntryState(str, Enum):
    """Lifecycle of a container entry.

    An identity that has no entry at all is unregistered.

    Attributes:
        REGISTERED: Definition recorded, no instance built yet.
        RESOLVED: Singleton instance built and cached.
    """

    REGISTERED = "registered"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value
