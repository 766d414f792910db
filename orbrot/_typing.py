
from typing import Union, Protocol, runtime_checkable, Any, SupportsIndex

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]


@runtime_checkable
class ParticleLike(Protocol):
    """
    Anything exposing a mutable cartesian position and velocity, like a particle of an N-body simulation.
    """

    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float


class ParticleCollection(Protocol):

    def __getitem__(self, key: SupportsIndex, /) -> Any: ...

    def __len__(self) -> int: ...
