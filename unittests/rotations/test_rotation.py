from unittest import TestCase

import numpy as np

from orbrot import rotations as rot


class Body:

    def __init__(self, x=0.0, y=0.0, z=0.0, vx=0.0, vy=0.0, vz=0.0):
        self.x, self.y, self.z = x, y, z
        self.vx, self.vy, self.vz = vx, vy, vz


class TestRotation(TestCase):

    def check_rotation(self, rotation, quaternion):

        np.testing.assert_array_almost_equal(quaternion, rotation.q)
        np.testing.assert_array_almost_equal(quaternion[:3], rotation.q_vector)
        self.assertAlmostEqual(quaternion[-1], rotation.q_scalar)

    def test_init(self):

        rotation = rot.Rotation()

        self.check_rotation(rotation, [0, 0, 0, 1])

        rotation = rot.Rotation([0, 0, 0, 1])

        self.check_rotation(rotation, [0, 0, 0, 1])

        rotation = rot.Rotation(data=[0, 0, 0, 1])

        self.check_rotation(rotation, [0, 0, 0, 1])

        rotation = rot.Rotation([0, 0, 0])

        self.check_rotation(rotation, [0, 0, 0, 1])

        rotation = rot.Rotation([np.pi / 2, 0, 0])

        self.check_rotation(rotation, [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

        rotation = rot.Rotation([[0], [0], [-np.sqrt(2) / 2], [np.sqrt(2) / 2]])

        self.check_rotation(rotation, [0, 0, -np.sqrt(2) / 2, np.sqrt(2) / 2])

        rotation2 = rotation
        rotation = rot.Rotation(rotation2)

        self.assertIs(rotation, rotation2)

        with self.assertRaises(ValueError):
            rot.Rotation([1, 2])

        with self.assertRaises(ValueError):
            rot.Rotation(np.eye(3))

    def test_not_normalized(self):

        rotation = rot.Rotation([1, 2, 3, 4])

        np.testing.assert_array_equal(rotation.q, [1, 2, 3, 4])
        self.assertEqual(rotation.length_squared, 30)

        rotation = rot.Rotation([0, 0, 1, -1])

        # the sign of the scalar is kept as given
        np.testing.assert_array_equal(rotation.q, [0, 0, 1, -1])

    def test_components(self):

        rotation = rot.Rotation([1, 2, 3, 4])

        self.assertEqual(rotation.ix, 1)
        self.assertEqual(rotation.iy, 2)
        self.assertEqual(rotation.iz, 3)
        self.assertEqual(rotation.r, 4)

    def test_value_semantics(self):

        data = np.array([0, 0, 0, 1.0])

        rotation = rot.Rotation(data)

        data[0] = 5

        np.testing.assert_array_equal(rotation.quaternion, [0, 0, 0, 1])

        with self.assertRaises(ValueError):
            rotation.quaternion[0] = 1

    def test_alternate_constructors(self):

        self.assertEqual(rot.Rotation.identity(), rot.Rotation())

        np.testing.assert_array_equal(rot.Rotation.from_to([1, 0, 0], [0, 1, 0]).q,
                                      rot.rotation_from_to([1, 0, 0], [0, 1, 0]))

        np.testing.assert_array_equal(rot.Rotation.angle_axis(0.5, [1, 1, 0]).q,
                                      rot.rotation_angle_axis(0.5, [1, 1, 0]))

        np.testing.assert_array_equal(rot.Rotation.to_new_axes([1, 0, 0], [0, 1, 0]).q,
                                      rot.rotation_to_new_axes([1, 0, 0], [0, 1, 0]))

        np.testing.assert_array_equal(rot.Rotation.orbital(1, 2, 3).q, rot.rotation_orbital(1, 2, 3))

        self.assertEqual(rot.Rotation.orbital(), rot.Rotation.identity())

        self.assertIsInstance(rot.Rotation.identity(), rot.Rotation)

    def test_antipodal_from_to(self):

        rotation = rot.Rotation.from_to([1, 0, 0], [-1, 0, 0])

        self.assertEqual(rotation.r, 0)
        self.assertAlmostEqual(rotation.length_squared, 1)

        np.testing.assert_array_almost_equal(rotation.apply([1, 0, 0]), [-1, 0, 0])

    def test_inv(self):

        rotation = rot.Rotation([np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

        inverse = rotation.inv()

        self.check_rotation(inverse, [-np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])
        self.check_rotation(rotation, [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

        self.check_rotation(rot.Rotation([1, 2, 3, 4]).inv(), np.array([-1, -2, -3, 4]) / 30)

        self.assertEqual(~rotation, rotation.inv())

    def test_conjugate(self):

        self.check_rotation(rot.Rotation([1, 2, 3, 4]).conjugate(), [-1, -2, -3, 4])

    def test_eq(self):

        rotation = rot.Rotation()

        self.assertTrue(rotation == rot.Rotation())
        self.assertTrue(rotation == [0, 0, 0, 1])
        self.assertTrue(rotation == [0, 0, 0])
        self.assertFalse(rotation == [1, 0, 0, 0])
        self.assertFalse(rotation == [1, 2])
        self.assertFalse(rotation == 'identity')

    def test_mul(self):

        rotation = rot.Rotation([1, 2, 3])

        inverse = rotation.inv()

        self.check_rotation(rotation * inverse, [0, 0, 0, 1])

        first = rot.Rotation.angle_axis(np.pi / 2, [1, 0, 0])
        second = rot.Rotation.angle_axis(np.pi / 2, [0, 0, 1])

        np.testing.assert_array_almost_equal((second * first).apply([0, 1, 0]),
                                             second.apply(first.apply([0, 1, 0])))

        with self.assertRaises(TypeError):

            _ = rotation * [0, 0, 0, 1]

        with self.assertRaises(TypeError):

            _ = [0, 0, 0, 1] * rotation

    def test_apply(self):

        rotation = rot.Rotation.angle_axis(np.pi / 2, [0, 0, 1])

        np.testing.assert_allclose(rotation.apply([1, 0, 0]), [0, 1, 0], atol=1e-9)

        np.testing.assert_array_almost_equal(rotation.apply([[1, 0], [0, 0], [0, 1]]), [[0, 0], [1, 0], [0, 1]])

        vector = np.array([1., 0, 0])

        rotation.apply_inplace(vector)

        np.testing.assert_allclose(vector, [0, 1, 0], atol=1e-9)

        with self.assertRaises(TypeError):
            rotation.apply_inplace(np.array([1, 0, 0]))

        self.assertEqual(rot.Rotation.identity().apply([1, 2, 3]).tolist(), [1, 2, 3])

    def test_apply_to_particles(self):

        rotation = rot.Rotation.angle_axis(np.pi / 2, [0, 0, 1])

        body = Body(x=1, vy=2)

        rotation.apply_to_particle(body)

        np.testing.assert_array_almost_equal([body.x, body.y, body.z], [0, 1, 0])
        np.testing.assert_array_almost_equal([body.vx, body.vy, body.vz], [-2, 0, 0])

        bodies = [Body(x=1), Body(y=1), Body(z=1, vz=-1)]

        rotation.apply_to_particles(bodies)

        np.testing.assert_array_almost_equal([[body.x, body.y, body.z] for body in bodies],
                                             [[0, 1, 0], [-1, 0, 0], [0, 0, 1]])
        np.testing.assert_array_almost_equal([bodies[2].vx, bodies[2].vy, bodies[2].vz], [0, 0, -1])

    def test_to_orbital(self):

        angles = rot.Rotation.orbital(0.5, 1.3, 4.0).to_orbital()

        np.testing.assert_array_almost_equal(angles, [0.5, 1.3, 4.0])

        angles = rot.Rotation.orbital(1.0, 1e-6, 0.5).to_orbital(min_inclination=1e-4)

        self.assertEqual(angles[0], 0)
        self.assertAlmostEqual(angles[2], 1.5, places=6)

    def test_copy(self):

        rotation = rot.Rotation([1, 2, 3])

        rotation_copy = rotation.copy()

        self.assertEqual(rotation, rotation_copy)
        self.assertIsNot(rotation, rotation_copy)
        self.assertIsNot(rotation.quaternion, rotation_copy.quaternion)

        self.assertFalse(rotation_copy.quaternion.flags.writeable)

        with self.assertRaises(ValueError):
            rotation_copy.quaternion[0] = 1

    def test_repr(self):

        self.assertEqual(repr(rot.Rotation()), 'Rotation(array([0., 0., 0., 1.]))')
        self.assertEqual(str(rot.Rotation()), '[0. 0. 0. 1.]')
