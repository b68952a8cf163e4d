__all__ = [
    "QuadratureError",
    "InvalidOrderError",
    "InvalidParameterError",
    "ConvergenceError",
    "EigensolverConvergenceError",
    "NewtonConvergenceError",
    "NewtonConvergenceWarning",
]


class QuadratureError(Exception):
    pass


class InvalidOrderError(QuadratureError, ValueError):
    pass


class InvalidParameterError(QuadratureError, ValueError):
    pass


class ConvergenceError(QuadratureError, ArithmeticError):
    """An iterative kernel ran out of iterations.

    Attributes
    ----------
    iterations : int
        The number of iterations that were performed.
    correction : float
        The size of the last update (off-diagonal entry for the
        eigensolver, Newton step for the root finders).
    """

    def __init__(self, message, iterations, correction):
        super().__init__(message)
        self.iterations = iterations
        self.correction = correction


class EigensolverConvergenceError(ConvergenceError):
    pass


class NewtonConvergenceError(ConvergenceError):
    pass


class NewtonConvergenceWarning(RuntimeWarning):
    pass
