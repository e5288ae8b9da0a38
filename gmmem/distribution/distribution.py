import abc


class Distribution(metaclass=abc.ABCMeta):
    """
    Base class for a mixture component.

    Components are immutable: parameter estimation returns a new instance instead of
    updating the receiver.
    """

    @abc.abstractmethod
    def log_density(self, data):
        """Compute the log-probability density :math:`\\log P(x|\\phi)`

        :param data: The data :math:`x` to compute a probability density for. A N-element :class:`numpy.ndarray`
        :type data: numpy.ndarray

        :returns: The log-density of every point, given the distribution's parameters
        :rtype: numpy.ndarray
        """
        raise NotImplementedError("Need to implement density calculation!")

    @abc.abstractmethod
    def density(self, data):
        """Compute the probability density :math:`P(x|\\phi)` of every point in data."""
        raise NotImplementedError("Need to implement density calculation!")

    @classmethod
    @abc.abstractmethod
    def estimate_parameters(cls, data, weights):
        """Estimate parameters by weighted maximum-likelihood and return them as a new distribution.

        :param data: The data :math:`x` to estimate parameters for. A N-element :class:`numpy.ndarray`
        :type data: numpy.ndarray

        :param weights: The weights :math:`\\gamma` for individual data points. A N-element :class:`numpy.ndarray`.

        Choose those parameters :math:`\\phi` that maximize the weighted log-likelihood function:

        .. math::
            ll_\\gamma(x|\\phi) = \\sum_{n=1}^N \\gamma_{n} \\log [P(x|\\phi)]

        The caller guarantees that the weights have a positive sum.
        """
        raise NotImplementedError("Need to implement parameter estimation!")

    @abc.abstractmethod
    def __repr__(self):
        """Create a string representation of the probability distribution"""
        raise NotImplementedError("Need to implement string representation!")
