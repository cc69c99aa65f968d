import unittest

from config import GRAVITY, MAX_VELOCITY, PENGER_JET_PROPULSION_ACCELERATION
from entities_player import AccelerationMode, Penger


class FallingTests(unittest.TestCase):
    def test_velocity_converges_to_cap_without_thrust(self):
        for dt in (1.0, 16.0, 50.0):
            with self.subTest(dt=dt):
                penger = Penger()
                frames = int(MAX_VELOCITY / (GRAVITY * dt)) + 10
                for _ in range(frames):
                    penger.update(dt, MAX_VELOCITY)
                    self.assertLessEqual(penger.vel[1], MAX_VELOCITY)
                self.assertEqual(penger.vel[1], MAX_VELOCITY)

    def test_zero_dt_changes_nothing(self):
        penger = Penger()
        penger.pos[1] = 100.0
        penger.update(0.0, MAX_VELOCITY)
        self.assertEqual(penger.vel[1], 0.0)
        self.assertEqual(penger.pos[1], 100.0)

    def test_position_integrates_updated_velocity(self):
        penger = Penger()
        penger.pos[1] = 100.0
        penger.update(10.0, MAX_VELOCITY)
        self.assertAlmostEqual(penger.vel[1], GRAVITY * 10.0)
        self.assertAlmostEqual(penger.pos[1], 100.0 + GRAVITY * 10.0 * 10.0)
        self.assertEqual(penger.ay, GRAVITY)
        self.assertIs(penger.mode, AccelerationMode.FALLING)


class ThrustTests(unittest.TestCase):
    def test_thrust_makes_velocity_more_upward(self):
        for dt in (1.0, 16.0, 33.0):
            with self.subTest(dt=dt):
                plain, boosted = Penger(), Penger()
                boosted.thrust()
                plain.update(dt, MAX_VELOCITY)
                boosted.update(dt, MAX_VELOCITY)
                self.assertLess(boosted.vel[1], plain.vel[1])

    def test_thrust_sets_jet_acceleration(self):
        penger = Penger()
        penger.thrust()
        self.assertEqual(penger.ay, PENGER_JET_PROPULSION_ACCELERATION)
        self.assertIs(penger.mode, AccelerationMode.THRUSTING)

    def test_thrust_decays_back_to_falling(self):
        penger = Penger()
        penger.pos[1] = 300.0
        penger.thrust()
        for _ in range(9):
            penger.update(16.0, MAX_VELOCITY)
            self.assertIs(penger.mode, AccelerationMode.THRUSTING)
            self.assertLess(penger.ay, 0)
        for _ in range(3):
            penger.update(16.0, MAX_VELOCITY)
        self.assertIs(penger.mode, AccelerationMode.FALLING)
        self.assertEqual(penger.ay, GRAVITY)

    def test_upward_velocity_has_no_lower_clamp(self):
        penger = Penger()
        for _ in range(10):
            penger.thrust()
            penger.update(100.0, MAX_VELOCITY)
        self.assertLess(penger.vel[1], -MAX_VELOCITY)


class SizeTests(unittest.TestCase):
    def test_box_scales_image_size(self):
        penger = Penger((40, 20))
        self.assertEqual((penger.width, penger.height), (30.0, 15.0))
        penger.resize((80, 80))
        self.assertEqual(penger.bounds()[2:], (60.0, 60.0))


if __name__ == "__main__":
    unittest.main()
