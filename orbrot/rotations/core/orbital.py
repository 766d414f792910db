r"""
Conversions between rotations and the classical orbital orientation angles.

The orientation of an orbit is described by the longitude of the ascending node :math:`\Omega`, the inclination
:math:`i`, and the argument of periapsis :math:`\omega`.  The rotation taking the reference (periapsis) frame to the
orbit's orientation is the 3-1-3 sequence

.. math::
    \mathbf{q} = \mathbf{R}_z(\Omega)\otimes\mathbf{R}_x(i)\otimes\mathbf{R}_z(\omega)

where :math:`\mathbf{R}_z(\omega)` is applied first (Murray and Dermott Eq. 2.121).
"""

import logging

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orbrot.rotations.core._helpers import _check_quaternion_array_and_shape
from orbrot.rotations.core.constructors import X_AXIS, Z_AXIS, rotation_angle_axis
from orbrot.rotations.core.quaternion_math import quaternion_multiplication


__all__ = ["MIN_INC", "rotation_orbital", "rotation_to_orbital"]


_LOGGER: logging.Logger = logging.getLogger(__name__)


MIN_INC: float = 1.e-8
"""
Inclinations within this many radians of 0 or pi are treated as singular when extracting orbital angles.
"""


def rotation_orbital(long_ascending_node: float, inclination: float, arg_periapsis: float) -> DOUBLE_ARRAY:
    """
    Builds the rotation for the orbital angles :math:`(\\Omega, i, \\omega)`.

    The rotation about z by the argument of periapsis is applied first, then the rotation about x by the inclination,
    then the rotation about z by the longitude of the ascending node.  All angles are in radians.

    :param long_ascending_node: The longitude of the ascending node :math:`\\Omega`
    :param inclination: The inclination :math:`i`
    :param arg_periapsis: The argument of periapsis :math:`\\omega`
    :return: The rotation quaternion
    """

    periapsis_rotation = rotation_angle_axis(arg_periapsis, Z_AXIS)
    inclination_rotation = rotation_angle_axis(inclination, X_AXIS)
    node_rotation = rotation_angle_axis(long_ascending_node, Z_AXIS)

    return quaternion_multiplication(node_rotation, quaternion_multiplication(inclination_rotation,
                                                                              periapsis_rotation))


def rotation_to_orbital(quaternion: ARRAY_LIKE, min_inclination: float = MIN_INC) -> tuple[float, float, float]:
    r"""
    Extracts the orbital angles :math:`(\Omega, i, \omega)` from a rotation quaternion.

    This is the inverse of :func:`rotation_orbital` using the closed form 3-1-3 quaternion to euler angle formulas
    (Bernardes and Viollet, PLOS ONE 17(11), 2022).  With :math:`a=r`, :math:`b=i_z`, :math:`c=i_x` and :math:`d=i_y`

    .. math::
        i = \text{cos}^{-1}\left(2(a^2+b^2)-1\right)\\
        \omega = \text{atan2}(b, a) - \text{atan2}(d, c)\\
        \Omega = \text{atan2}(b, a) + \text{atan2}(d, c)

    When the inclination is within ``min_inclination`` of 0 or :math:`\pi` only the sum (or difference) of the node
    and periapsis angles is defined.  In that case :math:`\Omega` is set to 0 and the whole angle is assigned to
    :math:`\omega`.

    Negative angles are shifted by :math:`2\pi` so that :math:`\Omega` and :math:`\omega` are returned in
    :math:`[0, 2\pi)`.

    .. warning::
        The extracted angles do not always land in the geometrically expected quadrant.  Round tripping through
        :func:`rotation_orbital` is consistent modulo :math:`2\pi` for non-singular inclinations, but other
        quaternions representing the same orientation may produce a different set of angles.

    :param quaternion: The rotation quaternion (scalar last)
    :param min_inclination: The tolerance in radians used to detect the singular inclinations
    :return: The longitude of the ascending node, the inclination, and the argument of periapsis in radians
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    ap = quaternion[3]
    bp = quaternion[2]
    cp = quaternion[0]
    dp = quaternion[1]

    # round off can push a unit quaternion slightly outside the domain of acos
    inclination = float(np.arccos(np.clip(2.0 * (ap * ap + bp * bp) - 1.0, -1.0, 1.0)))

    not_equatorial = abs(inclination) > min_inclination
    not_retrograde_equatorial = abs(inclination - np.pi) > min_inclination

    if not_equatorial and not_retrograde_equatorial:
        half_sum = np.arctan2(bp, ap)
        half_diff = np.arctan2(dp, cp)
        arg_periapsis = float(half_sum - half_diff)
        long_ascending_node = float(half_sum + half_diff)

    else:
        _LOGGER.debug(f'singular inclination {inclination}, setting the longitude of the ascending node to 0')

        long_ascending_node = 0.0

        if not not_equatorial:
            arg_periapsis = float(2.0 * np.arctan2(bp, ap))
        else:
            arg_periapsis = float(2.0 * np.arctan2(dp, cp))

    if arg_periapsis < 0:
        arg_periapsis += 2.0 * np.pi

    if long_ascending_node < 0:
        long_ascending_node += 2.0 * np.pi

    return long_ascending_node, inclination, arg_periapsis
