from typing import Self

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, ParticleLike, ParticleCollection

from orbrot.rotations.core.application import vector_irotate, vector_rotate
from orbrot.rotations.core.constructors import (rotation_angle_axis, rotation_from_to, rotation_identity,
                                                rotation_to_new_axes)
from orbrot.rotations.core.orbital import MIN_INC, rotation_orbital, rotation_to_orbital
from orbrot.rotations.core.quaternion_math import (quaternion_conjugate, quaternion_inverse,
                                                   quaternion_length_squared, quaternion_multiplication)
from orbrot.rotations.particles import particle_irotate, particles_irotate


class Rotation:
    """
    A class to represent and apply rotations.

    The :class:`Rotation` class wraps a single quaternion (stored scalar last as ``[ix, iy, iz, r]``) and is the main
    way rotations are passed around.  It can be initialized with a rotation quaternion or with a rotation vector (the
    rotation axis scaled by the rotation angle in radians), or through one of the alternate constructors
    :meth:`identity`, :meth:`from_to`, :meth:`angle_axis`, :meth:`to_new_axes`, and :meth:`orbital`.

    Rotations are values.  No method changes the quaternion of an existing instance, and the quaternion array itself
    is read only.  Quaternions are stored exactly as given and are not normalized, so a non-unit quaternion keeps its
    length through :attr:`length_squared` and :meth:`inv`.

    The multiplication operator composes rotations, applying the right operand first::

        >>> from orbrot.rotations import Rotation
        >>> from numpy import pi
        >>> rotation_a2b = Rotation.angle_axis(pi/2, [0, 0, 1])
        >>> rotation_b2c = Rotation.angle_axis(pi/2, [1, 0, 0])
        >>> rotation_a2c = rotation_b2c*rotation_a2b
        >>> rotation_a2c.apply([1, 0, 0]).round(12)
        array([0., 0., 1.])

    In addition to the multiplication operator, the equality operator is also overloaded to check that the
    quaternion representation of two objects is the same.
    """

    def __new__(cls, data: ARRAY_LIKE | Self | None = None) -> Self:
        """
        Create a new Rotation instance or return the existing one.
        """

        if isinstance(data, Rotation):
            return data
        else:
            return super().__new__(cls)

    def __init__(self, data: ARRAY_LIKE | Self | None = None):
        """
        Initialize the Rotation object.

        :param data: The rotation data to initialize the class with
        """

        if isinstance(data, Rotation):
            # do nothing
            return

        # check to see if rotation data was supplied
        if data is None:
            data = rotation_identity()

        # interpret the rotation data.
        self._quaternion = self._interp_rotation(data)
        self._quaternion.setflags(write=False)

    @staticmethod
    def _interp_rotation(data: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        This method interprets rotation data based on its size.

        If the total size of the data is 4 then it is presumed to be a quaternion.  If the total size is 3 then it is
        presumed to be a rotation vector.

        :raises ValueError: If the size of the input data is not 3 or 4
        :param data: The rotation data to be interpreted
        :return: The quaternion as a new array
        """

        # copy so that the caller's array is never shared
        numpy_data = np.array(data, dtype=np.float64).ravel()

        if numpy_data.size == 4:
            return numpy_data

        elif numpy_data.size == 3:
            angle = np.linalg.norm(numpy_data)

            if angle == 0:
                return rotation_identity()

            return rotation_angle_axis(angle, numpy_data)

        else:
            raise ValueError('The specified rotation data cannot be interpreted.')

    @classmethod
    def identity(cls) -> 'Rotation':
        """
        Returns the rotation which leaves every vector unchanged.
        """

        return cls(rotation_identity())

    @classmethod
    def from_to(cls, from_vector: ARRAY_LIKE, to_vector: ARRAY_LIKE) -> 'Rotation':
        """
        Returns the smallest rotation carrying the direction of ``from_vector`` onto the direction of ``to_vector``.

        See :func:`.rotation_from_to` for details, including the handling of opposite directions.
        """

        return cls(rotation_from_to(from_vector, to_vector))

    @classmethod
    def angle_axis(cls, angle: float, axis: ARRAY_LIKE) -> 'Rotation':
        """
        Returns the right handed rotation by ``angle`` radians about ``axis``.
        """

        return cls(rotation_angle_axis(angle, axis))

    @classmethod
    def to_new_axes(cls, new_z: ARRAY_LIKE, new_x: ARRAY_LIKE) -> 'Rotation':
        """
        Returns the rotation which carries ``new_z`` onto the z axis and ``new_x`` onto the x axis.

        See :func:`.rotation_to_new_axes`.
        """

        return cls(rotation_to_new_axes(new_z, new_x))

    @classmethod
    def orbital(cls, long_ascending_node: float = 0.0, inclination: float = 0.0,
                arg_periapsis: float = 0.0) -> 'Rotation':
        """
        Returns the rotation defined by the orbital angles :math:`(\\Omega, i, \\omega)` in radians.

        See :func:`.rotation_orbital`.
        """

        return cls(rotation_orbital(long_ascending_node, inclination, arg_periapsis))

    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        The quaternion representation of the rotation as a read only numpy array ``[ix, iy, iz, r]``.
        """

        return self._quaternion

    @property
    def q(self) -> DOUBLE_ARRAY:
        """
        This is an alias to the :attr:`.quaternion` property.
        """
        return self._quaternion

    @property
    def q_vector(self) -> DOUBLE_ARRAY:
        """
        This is an alias to the first three elements of the quaternion array (the vector portion of the quaternion)
        """

        return self._quaternion[:3]

    @property
    def q_scalar(self) -> float:
        """
        This is an alias to the last element of the quaternion array (the scalar portion of the quaternion)
        """

        return float(self._quaternion[-1])

    @property
    def r(self) -> float:
        return float(self._quaternion[3])

    @property
    def ix(self) -> float:
        return float(self._quaternion[0])

    @property
    def iy(self) -> float:
        return float(self._quaternion[1])

    @property
    def iz(self) -> float:
        return float(self._quaternion[2])

    @property
    def length_squared(self) -> float:
        """
        The squared norm of the quaternion.  This is 1 for a proper rotation quaternion.
        """

        return float(quaternion_length_squared(self._quaternion))

    def conjugate(self) -> 'Rotation':
        """
        Returns the rotation with the vector portion of the quaternion negated.
        """

        return Rotation(quaternion_conjugate(self._quaternion))

    def inv(self) -> 'Rotation':
        """
        This method returns the inverse rotation of the current instance as a new ``Rotation`` object.

        The inverse is the conjugate divided by the squared norm, which equals the conjugate for a unit quaternion.

        See :func:`.quaternion_inverse` for more information.

        :return: The inverse rotation
        """

        return Rotation(quaternion_inverse(self._quaternion))

    def __invert__(self) -> 'Rotation':
        return self.inv()

    def apply(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Returns a rotated copy of the vector (or 3xn array of column vectors).

        :param vector: The vector(s) to rotate
        :return: The rotated vector(s)
        """

        return vector_rotate(vector, self._quaternion)

    def apply_inplace(self, vector: DOUBLE_ARRAY):
        """
        Rotates the vector (or 3xn array of column vectors) stored in a numpy array in place.

        :param vector: The array to overwrite with its rotated values
        """

        vector_irotate(vector, self._quaternion)

    def apply_to_particle(self, particle: ParticleLike):
        """
        Rotates the position and velocity of the particle in place.

        See :func:`.particle_irotate`.
        """

        particle_irotate(particle, self._quaternion)

    def apply_to_particles(self, particles: ParticleCollection):
        """
        Rotates the position and velocity of every particle in the collection in place.

        See :func:`.particles_irotate`.
        """

        particles_irotate(particles, self._quaternion)

    def to_orbital(self, min_inclination: float = MIN_INC) -> tuple[float, float, float]:
        """
        Returns the orbital angles :math:`(\\Omega, i, \\omega)` in radians which produce this rotation.

        See :func:`.rotation_to_orbital` for the handling of singular inclinations and known limitations.
        """

        return rotation_to_orbital(self._quaternion, min_inclination=min_inclination)

    def __eq__(self, other) -> bool:

        # check that other is a rotation object, if not make it into one
        if not isinstance(other, Rotation):
            try:
                other = Rotation(other)
            except (ValueError, TypeError):
                # if we're here then other isn't a representation of rotation that we understand
                return False

        # check that the quaternions are the same
        return bool((self._quaternion == other.quaternion).all())

    def __mul__(self, other: 'Rotation') -> 'Rotation':

        # use quaternion multiplication
        if isinstance(other, Rotation):

            return Rotation(quaternion_multiplication(self._quaternion, other.quaternion))

        else:

            return NotImplemented

    def __repr__(self) -> str:
        return 'Rotation({0!r})'.format(self._quaternion)

    def __str__(self) -> str:
        return str(self._quaternion)

    def copy(self) -> 'Rotation':
        """
        Returns a copy of self with its own read only quaternion array.

        :return: A copy of self
        """

        return Rotation(self._quaternion)
