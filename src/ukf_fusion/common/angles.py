import numpy as np
import numpy.typing as npt


def normalize_angle(angle: npt.ArrayLike):
    """
    Wrap an angle (or an array of angles) into the half-open interval (-pi, pi].

    Wrapping is done by repeated subtraction of 2*pi, so angles that are several
    turns away are handled as well. Wrapping an already wrapped value returns it unchanged.

    Args:
        angle: scalar or array of angles in radians

    Returns:
        wrapped angle, float for scalar input and np.ndarray otherwise
    """
    wrapped = np.array(angle, dtype=float)
    if not np.all(np.isfinite(wrapped)):
        raise ValueError(f"Can not normalize non-finite angle {angle}")

    while np.any(wrapped > np.pi):
        wrapped = np.where(wrapped > np.pi, wrapped - 2.0 * np.pi, wrapped)
    while np.any(wrapped <= -np.pi):
        wrapped = np.where(wrapped <= -np.pi, wrapped + 2.0 * np.pi, wrapped)

    if wrapped.ndim == 0:
        return float(wrapped)
    return wrapped
