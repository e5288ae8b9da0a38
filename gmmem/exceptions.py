"""Errors raised while evaluating or fitting a Gaussian mixture."""


class EMError(Exception):
    """Base class for all gmmem errors."""


class InvalidParameters(EMError, ValueError):
    """Caller supplied malformed model parameters, sample or responsibilities."""


class DegenerateModel(EMError, ArithmeticError):
    """A density that has to be positive is zero, negative or undefined."""


class ResponsibilityUnderflow(DegenerateModel):
    """Every component assigns zero density to some points, so responsibilities are undefined."""

    def __init__(self, indices):
        self.indices = list(indices)
        super().__init__("mixture density underflows to zero for %d point(s), first at index %d"
                         % (len(self.indices), self.indices[0]))


class ZeroResponsibilityMass(EMError, ZeroDivisionError):
    """A component received no posterior mass, so its mean and variance cannot be updated."""

    def __init__(self, component):
        self.component = component
        super().__init__("component %d received zero responsibility mass" % component)


class EMStateError(EMError, RuntimeError):
    """An EM step was requested from a state that does not allow it."""
