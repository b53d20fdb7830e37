import numpy as np

from ..motion_models import MotionModel


class ObjectData:
    """Generate groundtruth object data"""

    def __init__(
        self,
        initial_state: np.ndarray,
        motion_model: MotionModel,
        total_steps: int,
        dt: float,
        if_noisy: bool,
    ):
        """Init generator

        Args:
            initial_state (np.ndarray): object state at the first timestep
            motion_model (MotionModel): a structure specifies the motion model parameters
            total_steps (int): number of generated timesteps
            dt (float): time between consecutive timesteps, seconds
            if_noisy (bool): boolean value indicating whether to generate noisy object state
                             sequence or not

        Attributes:
            states (np.ndarray (total_steps x state_dim)): object state at each timestep
        """
        assert isinstance(total_steps, int), "Argument of wrong type!"
        assert total_steps > 0, "total_steps should be positive!"
        assert dt > 0.0, "dt should be positive!"
        self._initial_state = np.asarray(initial_state, dtype=float)
        self._motion_model = motion_model
        self._if_noisy = if_noisy
        self.total_steps = total_steps
        self.dt = float(dt)
        self.states = self.generate_object_data()

    def __len__(self):
        return self.total_steps

    def __getitem__(self, key):
        return self.states[key]

    def generate_object_data(self) -> np.ndarray:
        state = self._initial_state
        state_history = []
        for _ in range(self.total_steps):
            state_history.append(state)
            state = self._motion_model.move(state, dt=self.dt, if_noisy=self._if_noisy)
        return np.array(state_history)

    def __repr__(self) -> str:
        return self.__class__.__name__ + (
            f"(motion_model={self._motion_model}, " f"total_steps={self.total_steps}, " f"dt={self.dt}, " f"if_noisy={self._if_noisy})"
        )
