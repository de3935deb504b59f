from .response import ok, not_found, error, unexpect_error
