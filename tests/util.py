from contextlib import contextmanager

from objcontainer import reports


@contextmanager
def expect_warning(*warnings):
    matched_warnings = []

    def report_handler(priority, identifier, *messages):
        if priority is not reports.warning:
            raise Exception(identifier)  # pragma: no cover
        matched_warnings.append(identifier)

    with reports.handle_reports(report_handler):
        yield

    matched_warnings = sorted(matched_warnings)
    warnings = sorted(warnings)
    assert matched_warnings == warnings, f"{matched_warnings} != {warnings}"


def expect_no_warnings():
    return expect_warning()  # I know, semantics kinda suck
