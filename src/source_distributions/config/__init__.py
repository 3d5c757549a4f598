"""
Configuration loading for source distributions.

Distributions are described by ``type``/``parameters``/``interpolation``
fields in YAML documents (loaded with OmegaConf) or XML elements.
"""
