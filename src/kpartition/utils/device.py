"""
Device selection for the tensors used inside a clustering run.

Points always live on the CPU in float64; the engine copies the stacked
dataset to the selected device for the assignment step.
"""

from typing import Optional, Union
import torch
import warnings

from ..exceptions import InvalidArgumentError


def get_default_device() -> torch.device:
    """Get the default device.

    Returns:
        CPU. Exact-equality convergence is only meaningful with float64,
        which not every accelerator supports, so accelerators are opt-in.
    """
    return torch.device('cpu')


def parse_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """Parse device specification.

    Args:
        device: Device specification
            - None: Use default (CPU)
            - 'auto': Use best available
            - 'cpu': Use CPU
            - 'cuda': Use default CUDA device
            - 'cuda:X': Use CUDA device X
            - 'mps': Use Apple Metal Performance Shaders
            - torch.device: Use as-is

    Returns:
        Parsed device
    """
    if device is None:
        return get_default_device()

    if isinstance(device, torch.device):
        return device

    if isinstance(device, str):
        if device == 'auto':
            if torch.cuda.is_available():
                return torch.device('cuda')
            return torch.device('cpu')
        elif device == 'cpu':
            return torch.device('cpu')
        elif device.startswith('cuda'):
            if not torch.cuda.is_available():
                warnings.warn("CUDA not available, falling back to CPU")
                return torch.device('cpu')
            return torch.device(device)
        elif device == 'mps':
            # MPS has no float64 support
            warnings.warn("MPS does not support float64, falling back to CPU")
            return torch.device('cpu')
        else:
            raise InvalidArgumentError(f"Unknown device: {device}")
    else:
        raise InvalidArgumentError(f"Device must be str or torch.device, got {type(device)}")
