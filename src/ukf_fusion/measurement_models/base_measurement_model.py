from abc import ABC, abstractmethod

import numpy as np


class MeasurementModel(ABC):
    """
    MeasurementModel is a abstract class for different measurement models.
    """

    def __init__(self, random_state=None, *args, **kwargs):
        self._generator = np.random.RandomState(random_state)

    @abstractmethod
    def h(self, state_vectors: np.ndarray) -> np.ndarray:
        pass

    @abstractmethod
    def initial_position(self, raw: np.ndarray) -> np.ndarray:
        pass

    def residual(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a - b

    def observe(self, state_vector: np.ndarray) -> np.ndarray:
        assert isinstance(state_vector, np.ndarray)
        return self._generator.multivariate_normal(mean=self.h(state_vector), cov=self.R)

    @property
    def dim(self):
        return self.d
