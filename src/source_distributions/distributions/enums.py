from enum import Enum


class Interpolation(str, Enum):
    HISTOGRAM = "histogram"
    LINEAR_LINEAR = "linear-linear"
