"""Qt worker running one image command in a background thread."""

from PySide6.QtCore import QObject, Signal

from commands.boundary import CommandError, CommandRequest, CommandResponse, ImageCommandService


class CommandWorker(QObject):
    """Runs a command request; move it onto a QThread and connect ``run``.

    ``finished`` carries the successful CommandResponse, ``error`` carries the
    failed one (its ``error`` field holds the kind and message).
    """

    finished = Signal(object)
    error = Signal(object)
    progress = Signal(str)

    def __init__(self, request: CommandRequest, service: ImageCommandService = None):
        super().__init__()
        self.request = request
        self.service = service or ImageCommandService()

    def run(self):
        try:
            self.progress.emit(f"Running {self.request.command.value}...")
            response = self.service.execute(self.request)
        except Exception as e:
            response = CommandResponse(command=self.request.command, error=CommandError.from_exception(e))

        if response.ok:
            self.progress.emit("Done")
            self.finished.emit(response)
        else:
            self.progress.emit(response.error.message)
            self.error.emit(response)
