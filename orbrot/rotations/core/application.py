r"""
Routines for applying a rotation quaternion to vectors.

The rotation of a vector :math:`\mathbf{v}` by the quaternion :math:`\mathbf{q}` is the sandwich product
:math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}`.  Expanded for a unit quaternion with vector part
:math:`\mathbf{u}` and scalar part :math:`r` this becomes

.. math::
    \mathbf{t} = 2\mathbf{u}\times\mathbf{v}\\
    \mathbf{v}' = \mathbf{v} + r\mathbf{t} + \mathbf{u}\times\mathbf{t}

which needs two cross products instead of forming and applying a rotation matrix.
"""

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orbrot.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape
from orbrot.rotations.core.vector_math import vector_add, vector_cross, vector_scale


__all__ = ["vector_rotate", "vector_irotate"]


def vector_rotate(vector: ARRAY_LIKE, quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns a rotated copy of the vector(s).

    ``vector`` may be a single 3 element vector or a 3xn array of column vectors, all of which are rotated by the same
    quaternion.  A 4xn array of quaternions rotates column ``i`` of a 3xn vector array by quaternion column ``i``, or
    a single 3 element vector by every quaternion, giving a 3xn result.

    :param vector: The vector(s) to rotate
    :param quaternion: The rotation quaternion, scalar last
    :return: The rotated vector(s) as a new array
    """

    vector = _check_vector_array_and_shape(vector)
    quaternion = _check_quaternion_array_and_shape(quaternion)

    imag = quaternion[:3]
    if quaternion.ndim == 1 and vector.ndim > 1:
        # broadcast the single rotation across the columns
        imag = imag.reshape(3, *([1] * (vector.ndim - 1)))
    elif vector.ndim == 1 and quaternion.ndim > 1:
        # broadcast the single vector across the quaternions
        vector = vector.reshape(3, *([1] * (quaternion.ndim - 1)))

    t = vector_scale(vector_cross(imag, vector), 2)

    return vector_add(vector, vector_add(vector_scale(t, quaternion[-1]), vector_cross(imag, t)))


def vector_irotate(vector: DOUBLE_ARRAY, quaternion: ARRAY_LIKE) -> None:
    """
    Rotates the vector(s) in place.

    The caller's array is overwritten with the rotated values so it must be a writeable floating point numpy array.

    :param vector: The array holding the vector(s) to rotate
    :param quaternion: The rotation quaternion, scalar last
    :raises TypeError: if ``vector`` is not a floating point numpy array
    """

    if not isinstance(vector, np.ndarray):
        raise TypeError('vectors can only be rotated in place when they are stored in a numpy array')

    if not np.issubdtype(vector.dtype, np.floating):
        raise TypeError('vectors can only be rotated in place when they are stored in a floating point array, '
                        'got dtype {}'.format(vector.dtype))

    vector[...] = vector_rotate(vector, quaternion)
