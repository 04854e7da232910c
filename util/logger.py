import sys


class Logger(object):
    """
    Text stream that writes every message to a console stream and appends it to a log file.
    Used as ``file=`` argument of print.
    """
    def __init__(self, path=None, stream=None):
        self.stdout = stream if stream is not None else sys.stdout
        self.path = path
        self.log = open(path, "a") if path is not None else None

    def write(self, message):
        self.stdout.write(message)
        if self.log is not None:
            self.log.write(message)

    def flush(self):
        self.stdout.flush()
        if self.log is not None:
            self.log.flush()

    def close(self):
        if self.log is not None:
            self.log.close()
            self.log = None


__all__ = ["Logger"]
