from dataclasses import dataclass

from unittest import TestCase

import numpy as np

from orbrot import rotations as rot
from orbrot._typing import ParticleLike


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    @property
    def velocity(self) -> np.ndarray:
        return np.array([self.vx, self.vy, self.vz])


class RecordingCollection:

    def __init__(self, particles):
        self.particles = particles
        self.accessed = []

    def __len__(self):
        return len(self.particles)

    def __getitem__(self, index):
        self.accessed.append(index)
        return self.particles[index]


class TestParticleIRotate(TestCase):

    def test_particle_irotate(self):

        particle = Particle(x=1, vy=1)

        self.assertIsInstance(particle, ParticleLike)

        rot.particle_irotate(particle, rot.rotation_angle_axis(np.pi / 2, [0, 0, 1]))

        np.testing.assert_array_almost_equal(particle.position, [0, 1, 0])
        np.testing.assert_array_almost_equal(particle.velocity, [-1, 0, 0])

        for value in [particle.x, particle.y, particle.z, particle.vx, particle.vy, particle.vz]:
            self.assertIs(type(value), float)

    def test_identity(self):

        particle = Particle(1.5, -2.25, 3, 0.5, 0.125, -4)

        rot.particle_irotate(particle, rot.rotation_identity())

        self.assertEqual(particle, Particle(1.5, -2.25, 3, 0.5, 0.125, -4))

    def test_position_and_velocity_independent(self):

        quaternion = rot.rotation_angle_axis(2.1, [1, 2, -0.5])

        particle = Particle(1, 2, 3, -4, 5, 0.5)
        position = particle.position
        velocity = particle.velocity

        rot.particle_irotate(particle, quaternion)

        np.testing.assert_array_almost_equal(particle.position, rot.vector_rotate(position, quaternion))
        np.testing.assert_array_almost_equal(particle.velocity, rot.vector_rotate(velocity, quaternion))

        # a rigid rotation keeps the lengths and the angle between position and velocity
        self.assertAlmostEqual(np.linalg.norm(particle.position), np.linalg.norm(position))
        self.assertAlmostEqual(np.linalg.norm(particle.velocity), np.linalg.norm(velocity))
        self.assertAlmostEqual(particle.position @ particle.velocity, position @ velocity)

    def test_missing_attributes(self):

        class PositionOnly:
            x = y = z = 0.0

        with self.assertRaises(AttributeError):
            rot.particle_irotate(PositionOnly(), rot.rotation_identity())


class TestParticlesIRotate(TestCase):

    def test_particles_irotate(self):

        quaternion = rot.rotation_orbital(0.3, 1.2, 2.0)

        particles = [Particle(1, 0, 0, 0, 1, 0), Particle(0, 2, 0, -1, 0, 0), Particle(0, 0, 3, 0, 0, 1)]
        expected = [(rot.vector_rotate(particle.position, quaternion), rot.vector_rotate(particle.velocity, quaternion))
                    for particle in particles]

        rot.particles_irotate(particles, quaternion)

        for particle, (position, velocity) in zip(particles, expected):
            np.testing.assert_array_almost_equal(particle.position, position)
            np.testing.assert_array_almost_equal(particle.velocity, velocity)

    def test_index_order(self):

        collection = RecordingCollection([Particle(x=i) for i in range(5)])

        rot.particles_irotate(collection, rot.rotation_angle_axis(np.pi, [0, 0, 1]))

        self.assertEqual(collection.accessed, [0, 1, 2, 3, 4])

        np.testing.assert_array_almost_equal([particle.x for particle in collection.particles], [0, -1, -2, -3, -4])

    def test_empty(self):

        collection = RecordingCollection([])

        rot.particles_irotate(collection, rot.rotation_identity())

        self.assertEqual(collection.accessed, [])

    def test_logging(self):

        with self.assertLogs('orbrot.rotations.particles', level='DEBUG') as logs:
            rot.particles_irotate([Particle(), Particle(), Particle()], rot.rotation_identity())

        self.assertIn('rotating 3 particles', logs.output[0])
