"""
Analysis Package

Diffusion measurements for the RC6 block transform and key schedule.
"""

from .avalanche import AvalancheResult, plaintext_avalanche, key_avalanche, flip_ratio

__all__ = ['AvalancheResult', 'plaintext_avalanche', 'key_avalanche', 'flip_ratio']
