# core/utils.py
import config


def float_equal(a: float, b: float, epsilon: float = None) -> bool:
    """
    Returns True when a and b differ by less than the shared tolerance.
    """
    if epsilon is None:
        epsilon = config.EPSILON
    return abs(a - b) < epsilon


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
