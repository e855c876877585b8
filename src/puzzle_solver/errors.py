class PuzzleSolverError(Exception):
    pass


class MalformedInput(PuzzleSolverError, ValueError):
    """A codec could not parse its input."""
    pass


class InvalidConfiguration(PuzzleSolverError, ValueError):
    """A strategy or the solver settings were misconfigured."""
    pass


class UnrecognizedCategory(PuzzleSolverError, ValueError):
    pass


class KeyspaceOverflow(PuzzleSolverError, OverflowError):
    """The declared bit width is too large to even describe a keyspace for."""
    pass


class SolveInProgress(PuzzleSolverError, RuntimeError):
    pass


class PuzzleInfeasible(PuzzleSolverError, RuntimeError):
    pass
