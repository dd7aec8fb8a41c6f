""" Exceptions raised by the shell. """


class ShellExit(Exception):
    """ Raised to leave the interpreter loop with the given status. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors while servicing a statement. """


class ShellSyntaxError(ShellError):
    """ A keyword or separator is invalid where it appears. """


class ResourceError(ShellError):
    """ A pipe or a process could not be created. Fatal for the session. """
