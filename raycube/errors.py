"""Error reporting for map loading and the game."""

RED = "\033[1;31m"
YELLOW = "\033[1;33m"
GREEN = "\033[1;32m"
RESET = "\033[0m"


class MapError(Exception):
    """Raised when a map file or the game setup is invalid.

    ``status`` is the exit status the command should end with.
    """

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def format_error(message: str, status: int) -> str:
    """Return the coloured text printed when the program stops.

    A failing status (1) is preceded by a red ``Error`` line; the message
    itself is always printed in yellow.
    """
    header = f"{RED}Error{RESET}\n" if status == 1 else ""
    return f"{header}{YELLOW}{message}{RESET}\n"