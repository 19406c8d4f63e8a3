from .distribution import Prober, Meaner, Cover, Rander, Distribution
from .multivariate import MvNormal, Uniform
