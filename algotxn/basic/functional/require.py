def require(statement: bool, or_error: Exception = None):
    if not statement:
        raise or_error or AssertionError()
