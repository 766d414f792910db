r"""
Elementary arithmetic on 3 element cartesian vectors.

Vectors are numpy arrays whose first axis has length 3.  Every routine here is vectorized, so a :math:`3\times n`
array is treated as :math:`n` independent column vectors.
"""

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY

from orbrot.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["vector_scale", "vector_add", "vector_cross", "vector_dot", "vector_length_squared", "vector_normalize"]


def vector_scale(vector: ARRAY_LIKE, scale: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    Multiplies the vector(s) by a scalar.

    :param vector: The vector(s) to scale
    :param scale: The scale factor, or one scale factor per column
    :return: The scaled vector(s)
    """

    return _check_vector_array_and_shape(vector) * np.asanyarray(scale, dtype=np.float64)


def vector_add(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the element-wise sum of two vectors.
    """

    return _check_vector_array_and_shape(vector_1) + _check_vector_array_and_shape(vector_2)


def vector_cross(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the right handed cross product :math:`\mathbf{a}\times\mathbf{b}`.

    :param vector_1: The left operand
    :param vector_2: The right operand
    :return: The cross product(s)
    """

    return np.cross(_check_vector_array_and_shape(vector_1), _check_vector_array_and_shape(vector_2), axis=0)


def vector_dot(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> SCALAR_OR_ARRAY:
    """
    Computes the dot product of two vectors (column by column for 3xn inputs).
    """

    return (_check_vector_array_and_shape(vector_1) * _check_vector_array_and_shape(vector_2)).sum(axis=0)


def vector_length_squared(vector: ARRAY_LIKE) -> SCALAR_OR_ARRAY:

    return vector_dot(vector, vector)


def vector_normalize(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the vector(s) to unit length.

    The vector must not be zero.  A zero vector is not reported as an error, instead the division produces non-finite
    values (``nan``) which propagate into anything computed from the result.

    :param vector: The vector(s) to normalize
    :return: The unit vector(s)
    """

    with np.errstate(divide='ignore', invalid='ignore'):
        return vector_scale(vector, 1. / np.sqrt(vector_length_squared(vector)))
