from .distribution import Distribution
from .normal import NormalDistribution
