
"""
This module contains the fundamental mathematical operations for rotation calculations.  It has no dependencies on
other rotation modules to avoid circular imports.  All functions here are pure operations on numpy arrays (or array
like objects) that serve as the building blocks for the :class:`.Rotation` class.
"""

import orbrot.rotations.core.application
import orbrot.rotations.core.constructors
import orbrot.rotations.core.orbital
import orbrot.rotations.core.quaternion_math
import orbrot.rotations.core.vector_math

from orbrot.rotations.core.vector_math import (vector_scale, vector_add, vector_cross, vector_dot,
                                               vector_length_squared, vector_normalize)

from orbrot.rotations.core.quaternion_math import (quaternion_identity, quaternion_imag, quaternion_multiplication,
                                                   quaternion_length_squared, quaternion_conjugate,
                                                   quaternion_inverse)

from orbrot.rotations.core.application import vector_rotate, vector_irotate

from orbrot.rotations.core.constructors import (rotation_identity, rotation_from_to, rotation_angle_axis,
                                                rotation_to_new_axes)

from orbrot.rotations.core.orbital import MIN_INC, rotation_orbital, rotation_to_orbital

__all__ = ['vector_scale', 'vector_add', 'vector_cross', 'vector_dot', 'vector_length_squared', 'vector_normalize',
           'quaternion_identity', 'quaternion_imag', 'quaternion_multiplication', 'quaternion_length_squared',
           'quaternion_conjugate', 'quaternion_inverse',
           'vector_rotate', 'vector_irotate',
           'rotation_identity', 'rotation_from_to', 'rotation_angle_axis', 'rotation_to_new_axes',
           'MIN_INC', 'rotation_orbital', 'rotation_to_orbital']
