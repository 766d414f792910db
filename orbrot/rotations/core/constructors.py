"""
Builders producing rotation quaternions from geometric descriptions.

Each routine returns a 4 element quaternion (scalar last) for a single rotation.
"""

import logging

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orbrot.rotations.core.application import vector_rotate
from orbrot.rotations.core.quaternion_math import quaternion_identity, quaternion_multiplication
from orbrot.rotations.core.vector_math import (vector_add, vector_cross, vector_dot, vector_length_squared,
                                               vector_normalize, vector_scale)


__all__ = ["rotation_identity", "rotation_from_to", "rotation_angle_axis", "rotation_to_new_axes"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate geometry.
"""


X_AXIS: DOUBLE_ARRAY = np.array([1.0, 0.0, 0.0])
Y_AXIS: DOUBLE_ARRAY = np.array([0.0, 1.0, 0.0])
Z_AXIS: DOUBLE_ARRAY = np.array([0.0, 0.0, 1.0])


def rotation_identity() -> DOUBLE_ARRAY:
    """
    Returns the rotation that leaves every vector unchanged.
    """

    return quaternion_identity()


def _from_to_reduced(from_vector: DOUBLE_ARRAY, to_vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # both inputs must be unit vectors no more than 90 degrees apart
    half = vector_normalize(vector_add(from_vector, to_vector))

    return np.concatenate([vector_cross(from_vector, half), [vector_dot(from_vector, half)]])


def rotation_from_to(from_vector: ARRAY_LIKE, to_vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the smallest rotation which carries the direction of ``from_vector`` onto the direction of ``to_vector``.

    The inputs need not be of unit length but they must not be zero.  For directions up to 90 degrees apart the
    quaternion is built directly from the normalized half vector
    :math:`\hat{\mathbf{h}}=\frac{\hat{\mathbf{f}}+\hat{\mathbf{t}}}{\left\|\hat{\mathbf{f}}+\hat{\mathbf{t}}\right\|}`
    as :math:`[\hat{\mathbf{f}}\times\hat{\mathbf{h}}, \hat{\mathbf{f}}^T\hat{\mathbf{h}}]`, which is exactly the
    half angle rotation without any trigonometric calls.  Wider angles are split into a rotation from ``from_vector``
    to the half vector followed by a rotation from the half vector to ``to_vector``.

    When the directions are exactly opposite the rotation axis is undefined.  In that case the axis is taken as the
    cross product of ``from_vector`` with whichever of the x, y, or z axes has the smallest absolute component in
    ``from_vector`` and the returned quaternion is :math:`[\mathbf{a}, 0]` (a rotation by 180 degrees).  The axis
    :math:`\mathbf{a}` is not normalized, so the resulting quaternion is only of unit length when ``from_vector`` is
    perpendicular to the chosen world axis.

    :param from_vector: The direction to rotate from
    :param to_vector: The direction to rotate to
    :return: The rotation quaternion
    """

    from_vector = vector_normalize(from_vector)
    to_vector = vector_normalize(to_vector)

    if vector_dot(from_vector, to_vector) >= 0:
        return _from_to_reduced(from_vector, to_vector)

    # more than 90 degrees apart
    half = vector_add(from_vector, to_vector)

    if vector_length_squared(half) == 0:
        abs_from = np.abs(from_vector)

        if abs_from[0] <= abs_from[1] and abs_from[0] <= abs_from[2]:
            world_axis = X_AXIS
        elif abs_from[1] <= abs_from[2]:
            world_axis = Y_AXIS
        else:
            world_axis = Z_AXIS

        axis = vector_cross(from_vector, world_axis)

        _LOGGER.debug(f'antipodal vectors, rotating by pi about {axis}')

        return np.concatenate([axis, [0.0]])

    half = vector_normalize(half)

    return quaternion_multiplication(_from_to_reduced(half, to_vector), _from_to_reduced(from_vector, half))


def rotation_angle_axis(angle: float, axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the right handed rotation by ``angle`` radians about ``axis``.

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    :param angle: The rotation angle in radians
    :param axis: The rotation axis.  It is normalized internally and must not be zero
    :return: The rotation quaternion
    """

    axis = vector_normalize(axis)

    return np.concatenate([vector_scale(axis, np.sin(angle / 2.0)), [np.cos(angle / 2.0)]])


def rotation_to_new_axes(new_z: ARRAY_LIKE, new_x: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Computes the rotation which carries ``new_z`` onto the z axis and ``new_x`` onto the x axis.

    The first stage rotates ``new_z`` onto the z axis.  ``new_x`` is then carried along with that first stage and the
    second stage rotates the result onto the x axis.  Applying the combined rotation to a vector therefore expresses it
    in the frame spanned by the two new axes.  The two directions should be perpendicular, otherwise the second stage
    also tilts the z axis away from ``new_z``.

    :param new_z: The direction which becomes the new z axis
    :param new_x: The direction which becomes the new x axis
    :return: The rotation quaternion
    """

    first = rotation_from_to(new_z, Z_AXIS)

    # where new_x ends up after the first stage
    new_x = vector_rotate(new_x, first)

    second = rotation_from_to(new_x, X_AXIS)

    return quaternion_multiplication(second, first)
