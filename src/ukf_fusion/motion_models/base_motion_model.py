import numpy as np


class MotionModel:
    def __init__(self, random_state=None, *args, **kwargs):
        self._generator = np.random.RandomState(random_state)

    def f(self, state_vectors, dt):
        raise NotImplementedError

    def residual(self, a, b):
        return a - b

    def move(self, state_vector, dt, if_noisy=False):
        raise NotImplementedError

    def __repr__(self) -> str:
        raise NotImplementedError
