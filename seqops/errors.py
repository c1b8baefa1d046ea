import inspect
import os
import threading


library_dir = os.path.dirname(os.path.abspath(__file__)) + os.sep


class EvaluationError(Exception):
    """Raised when a user supplied function fails on an element."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors raised by user functions (predicates,
            mapping functions, comparators...) are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause, the message tells which item failed and where the
              operation was called from.
            - `'passthrough'`: let the error propagate through SeqOps code
              unchanged (default).
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = True


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        if os.path.abspath(filename).startswith(library_dir):
            continue

        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out


class Callback(object):
    """Wrap a user function so that its failures honor :func:`seterr`.

    Calls take the index of the element being processed as first
    argument, followed by the arguments of the wrapped function. Pass
    `None` as index for functions that compare two items.
    """
    def __init__(self, f, operation):
        if not callable(f):
            raise TypeError(operation + ": f must be callable")

        self.f = f
        self.operation = operation

    def __call__(self, index, *args):
        try:
            return self.f(*args)

        except Exception as cause:
            if seterr() == 'passthrough' or isinstance(cause, EvaluationError):
                raise
            else:
                if index is None:
                    target = "comparison"
                else:
                    target = "item {}".format(index)
                msg = "Failed to evaluate {} in {} called at:\n{}".format(
                    target, self.operation, format_stack(2))
                raise EvaluationError(msg) from cause
