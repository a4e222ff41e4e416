"""
Helper functions for the Aim & Range alignment command
"""


def input_modulus(value, minimum, maximum):
    """
    Wrap value into [minimum, maximum] by whole multiples of the interval width.

    Multiples are counted with truncation toward zero, so values already inside
    the interval are returned unchanged and a value just past one edge comes
    back just inside the opposite edge.
    """
    modulus = maximum - minimum

    num_max = int((value - minimum) / modulus)
    value -= num_max * modulus

    num_min = int((value - maximum) / modulus)
    value -= num_min * modulus

    return value
