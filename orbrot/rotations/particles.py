"""
Applies rotations to the particles of an N-body simulation.

The particles themselves are owned by the caller.  Anything exposing mutable ``x``, ``y``, ``z``, ``vx``, ``vy`` and
``vz`` attributes can be rotated (see :class:`.ParticleLike`), and any indexable sized container of such particles
(see :class:`.ParticleCollection`) can be rotated as a whole.
"""

import logging

import numpy as np

from orbrot._typing import ARRAY_LIKE, ParticleLike, ParticleCollection

from orbrot.rotations.core.application import vector_irotate


__all__ = ["particle_irotate", "particles_irotate"]


_LOGGER: logging.Logger = logging.getLogger(__name__)


def particle_irotate(particle: ParticleLike, quaternion: ARRAY_LIKE) -> None:
    """
    Rotates the position and the velocity of a single particle in place.

    A rotation has no translational part, so the position and velocity are rotated independently by the same
    quaternion.

    :param particle: The particle to rotate.  Its six cartesian attributes are overwritten
    :param quaternion: The rotation quaternion, scalar last
    """

    # rotate position and velocity as the two columns of one array
    state = np.array([[particle.x, particle.vx],
                      [particle.y, particle.vy],
                      [particle.z, particle.vz]], dtype=np.float64)

    vector_irotate(state, quaternion)

    particle.x, particle.y, particle.z = (float(value) for value in state[:, 0])
    particle.vx, particle.vy, particle.vz = (float(value) for value in state[:, 1])


def particles_irotate(particles: ParticleCollection, quaternion: ARRAY_LIKE) -> None:
    """
    Rotates every particle of a collection in place, in index order.

    :param particles: The particles to rotate
    :param quaternion: The rotation quaternion, scalar last
    """

    number_of_particles = len(particles)

    _LOGGER.debug(f'rotating {number_of_particles} particles')

    for index in range(number_of_particles):
        particle_irotate(particles[index], quaternion)
