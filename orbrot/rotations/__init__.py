import orbrot.rotations.core
import orbrot.rotations.particles
import orbrot.rotations.rotation

from orbrot.rotations.core import *
from orbrot.rotations.particles import particle_irotate, particles_irotate
from orbrot.rotations.rotation import Rotation

__all__ = ['vector_scale', 'vector_add', 'vector_cross', 'vector_dot', 'vector_length_squared', 'vector_normalize',
           'quaternion_identity', 'quaternion_imag', 'quaternion_multiplication', 'quaternion_length_squared',
           'quaternion_conjugate', 'quaternion_inverse',
           'vector_rotate', 'vector_irotate',
           'rotation_identity', 'rotation_from_to', 'rotation_angle_axis', 'rotation_to_new_axes',
           'MIN_INC', 'rotation_orbital', 'rotation_to_orbital',
           'particle_irotate', 'particles_irotate', 'Rotation']


r"""
This package defines the rotation primitives used to reorient bodies and whole particle collections of an N-body
simulation, and to convert between a rotation and the classical orbital orientation angles.

The following representations are used throughout the package:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
vector             A 3 element cartesian vector stored as a numpy array.  Routines accept :math:`3\times n` arrays to
                   operate on :math:`n` column vectors at once.
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} i_x \\ i_y \\ i_z \\ r\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
rotation vector    A 3 element rotation vector of the form :math:`\mathbf{v}=\theta\hat{\mathbf{x}}`, accepted by the
                   :class:`.Rotation` constructor.
orbital angles     The longitude of the ascending node :math:`\Omega`, the inclination :math:`i`, and the argument of
                   periapsis :math:`\omega`, related to the rotation by the 3-1-3 sequence
                   :math:`\mathbf{R}_z(\Omega)\otimes\mathbf{R}_x(i)\otimes\mathbf{R}_z(\omega)`.
=================  =====================================================================================================

Rotations are active: rotating a vector turns the vector itself in a right handed sense about the rotation axis.

The :class:`.Rotation` object is the primary tool that will be used by users.  It offers alternate constructors for
each way of describing a rotation, operator overloading to compose rotations with ``*``, and methods to apply the
rotation to vectors, particles, and particle collections.  The functions in :mod:`.core` implement the same operations
directly on numpy arrays.
"""
