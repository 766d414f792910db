r"""
The quaternion algebra underlying rotations.

Quaternions are stored scalar last as :math:`\mathbf{q}=[i_x, i_y, i_z, r]^T`, where for a rotation by angle
:math:`\theta` about the unit axis :math:`\hat{\mathbf{x}}` the vector part is
:math:`\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}` and the scalar part is :math:`\text{cos}(\frac{\theta}{2})`.
All routines accept a :math:`4\times n` array to operate on :math:`n` quaternions at once.
"""

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY

from orbrot.rotations.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_identity", "quaternion_imag", "quaternion_multiplication", "quaternion_length_squared",
           "quaternion_conjugate", "quaternion_inverse"]


def quaternion_identity() -> DOUBLE_ARRAY:
    """
    Returns the identity quaternion (no rotation), ``[0, 0, 0, 1]``.
    """

    return np.array([0.0, 0.0, 0.0, 1.0])


def quaternion_imag(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns a copy of the vector (imaginary) part of the quaternion(s).

    :param quaternion: The quaternion(s) to extract the vector part from
    :return: The ``[ix, iy, iz]`` vector(s)
    """

    return _check_quaternion_array_and_shape(quaternion)[:3].copy()


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    The product composes two rotations such that ``quaternion_2_in`` is applied first and ``quaternion_1_in`` second,
    that is `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`.  Rotating a vector by the
    product is the same as rotating it by the second quaternion and then rotating the result by the first.  The
    operation is not commutative.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The quaternion applied second
    :param quaternion_2_in: The quaternion applied first
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    qout = np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)

    return qout


def quaternion_length_squared(quaternion: ARRAY_LIKE) -> SCALAR_OR_ARRAY:
    """
    Returns the squared norm :math:`r^2+i_x^2+i_y^2+i_z^2` of the quaternion(s).
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return (quaternion * quaternion).sum(axis=0)


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Negates the vector portion of the quaternion(s), leaving the scalar portion untouched.

    :param quaternion: The quaternion(s) to conjugate
    :return: The conjugate quaternion(s) as a new array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # negate the vector portion into a new array so the caller's data is untouched
    return np.concatenate([-quaternion[:3], quaternion[3:]], axis=0)


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion.  It is
    computed as the conjugate divided by the squared norm

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    which reduces to the conjugate for a unit quaternion but stays correct when the input is not of unit length.

    The zero quaternion has no inverse.  It is not reported as an error, the result is simply non-finite.

    This function is also vectorized, meaning that you can specify multiple quaternions to be inverted by
    specifying each quaternion as a column.

    :param quaternion: The quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion(s) corresponding to the input
    """

    conjugate = quaternion_conjugate(quaternion)

    with np.errstate(divide='ignore', invalid='ignore'):
        return conjugate * (1. / quaternion_length_squared(conjugate))
