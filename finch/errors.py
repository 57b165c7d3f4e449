class FinchError(Exception):
    """Base class for errors reported to the user before generation starts."""

    message = "Error."

    def __init__(self, path):
        super().__init__(f"{self.message} ({path})")
        self.path = path


class InvalidDirectory(FinchError):
    message = "Invalid directory path."


class NotADirectory(FinchError):
    message = "Path is not a directory."


class OutputCreateError(FinchError):
    message = "Invalid output path."
