"""Connection liveness tracking shared by the store clients."""

from files_manager_lib.log import get_logger
from files_manager_lib.types import ConnectionState

LOGGER = get_logger("files_manager_lib.clients.status")


class ConnectionStatus:
    """
    Two-state liveness flag driven by driver events.

    ``on_connect`` moves to CONNECTED, ``on_error`` moves to DISCONNECTED and logs.
    There is no terminal state: the last event wins. Handlers are called from
    driver callbacks and monitor threads, so they never raise.
    """

    def __init__(self, name: str, initial: ConnectionState = ConnectionState.CONNECTED) -> None:
        self.name = name
        self._state = initial

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_alive(self) -> bool:
        return self._state.is_alive

    def on_connect(self) -> None:
        """Handle a connect event."""
        if self._state is not ConnectionState.CONNECTED:
            LOGGER.debug(f"{self.name} connection established")
        self._state = ConnectionState.CONNECTED

    def on_error(self, error: BaseException | str) -> None:
        """Handle an error event: mark disconnected and log the error."""
        message = str(error) or error.__class__.__name__
        LOGGER.error(f"{self.name} client connection error: {message}")
        self._state = ConnectionState.DISCONNECTED

    def on_close(self) -> None:
        """Handle an explicit close by the owner (not an error)."""
        LOGGER.debug(f"{self.name} connection closed")
        self._state = ConnectionState.DISCONNECTED

    def __repr__(self) -> str:
        return f"ConnectionStatus(name={self.name!r}, state={self._state.value!r})"
