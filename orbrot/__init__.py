# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Quaternion rotations for N-body simulations.

The :mod:`.rotations` package holds everything: vector and quaternion arithmetic, rotation builders, application of
rotations to vectors and particles, and conversion to and from orbital angles.
"""

from orbrot.rotations import Rotation

__all__ = ['Rotation']
