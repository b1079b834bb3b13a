import sys


class Report:
    def __init__(self, text: str, raw_text: str):
        self.text: str = text
        self.raw_text: str = raw_text

    def __call__(self, *args, **kwargs):
        emit_report(self, *args, **kwargs)

    def __repr__(self):
        return f"<Report {self.raw_text}>"

warning = Report("\x1b[33mWarning\x1b[0m", "Warning")


class handle_reports:
    handlers_stack = []

    def __init__(self, fn):
        self.fn = fn
        self.obj = None

    def __enter__(self):
        if hasattr(self.fn, "__enter__"):
            self.obj = self.fn.__enter__()
        else:
            self.obj = self.fn

        self.handlers_stack.append(self)

        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        assert self.handlers_stack.pop() is self

        if hasattr(self.obj, "__exit__"):
            return self.obj.__exit__(exc_type, exc_value, exc_tb)
        return False


class BareHandler:
    def __init__(self, stream=None):
        self.stream = stream

    def __call__(self, priority, identifier, *messages):
        stream = self.stream or sys.stderr
        for text in messages:
            text = text.replace("\n", " ")
            print(f"objcontainer: {priority.raw_text}: {text} [-W{identifier}]", file=stream)


default_handler = BareHandler()


def emit_report(priority, identifier, *messages):
    if handle_reports.handlers_stack:
        handle_reports.handlers_stack[-1].obj(priority, identifier, *messages)
    else:
        default_handler(priority, identifier, *messages)


class ContainerError(Exception):
    pass

class InvalidKeyError(ContainerError, TypeError):
    def __init__(self, key):
        super().__init__(f"Container keys must be strings, got {type(key).__name__}: {key!r}")
        self.key = key
