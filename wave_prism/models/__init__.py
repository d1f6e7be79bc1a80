from .profile import AudioProfile, FeatureFlags
from .spectrum import SpectralComponent, SpectralResult, WaveParams, merge_components, pad_components

__all__ = [
    "AudioProfile",
    "FeatureFlags",
    "SpectralComponent",
    "SpectralResult",
    "WaveParams",
    "merge_components",
    "pad_components",
]
